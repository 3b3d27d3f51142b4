from tests.helpers import create_place, login_user


def test_create_place_sets_owner_from_session(client):
    me = login_user(client).json()

    r = create_place(client, ownerId="someone-else", owner_id="someone-else")
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "Place saved successfully!"
    place = body["place"]
    assert place["ownerId"] == me["id"]
    assert place["title"] == "Cabin by the lake"
    assert place["extraInfo"] == "No parties"
    assert place["maxGuests"] == 4
    assert place["perks"] == ["wifi", "parking"]


def test_create_place_requires_session(client):
    r = create_place(client)
    assert r.status_code == 401


def test_perks_are_deduplicated(client):
    login_user(client)
    r = create_place(client, perks=["wifi", "pets", "wifi"])
    assert r.json()["place"]["perks"] == ["wifi", "pets"]


def test_owner_update_merges_fields(client):
    login_user(client)
    place = create_place(client).json()["place"]

    r = client.put(f"/places/{place['id']}", json={"title": "Renovated cabin", "price": 150})
    assert r.status_code == 200
    updated = r.json()
    assert updated["title"] == "Renovated cabin"
    assert updated["price"] == 150
    # Untouched fields survive the merge
    assert updated["address"] == place["address"]
    assert updated["photos"] == place["photos"]
    assert updated["ownerId"] == place["ownerId"]


def test_update_cannot_reassign_owner(client):
    login_user(client)
    place = create_place(client).json()["place"]

    r = client.put(f"/places/{place['id']}", json={"ownerId": "intruder", "title": "Mine now"})
    assert r.status_code == 200
    assert r.json()["ownerId"] == place["ownerId"]


def test_non_owner_update_is_forbidden(client, make_client):
    login_user(client)
    place = create_place(client).json()["place"]

    intruder = make_client()
    login_user(intruder, name="Intruder")
    r = intruder.put(f"/places/{place['id']}", json={"title": "Hijacked"})
    assert r.status_code == 403
    assert r.json()["detail"] == "Forbidden"

    # Nothing was written
    assert client.get(f"/places/{place['id']}").json()["title"] == "Cabin by the lake"


def test_update_missing_place_is_not_found(client):
    login_user(client)
    r = client.put("/places/does-not-exist", json={"title": "x"})
    assert r.status_code == 404


def test_update_without_session_is_unauthorized(client, make_client):
    login_user(client)
    place = create_place(client).json()["place"]

    anonymous = make_client()
    r = anonymous.put(f"/places/{place['id']}", json={"title": "x"})
    assert r.status_code == 401


def test_single_place_is_public(client, make_client):
    login_user(client)
    place = create_place(client).json()["place"]

    anonymous = make_client()
    r = anonymous.get(f"/places/{place['id']}")
    assert r.status_code == 200
    assert r.json()["id"] == place["id"]

    assert anonymous.get("/places/unknown-id").status_code == 404


def test_listing_all_and_mine(client, make_client):
    login_user(client)
    mine = create_place(client, title="Mine").json()["place"]

    other = make_client()
    login_user(other, name="Other")
    theirs = create_place(other, title="Theirs").json()["place"]

    all_places = client.get("/places")
    assert all_places.status_code == 200
    assert {p["id"] for p in all_places.json()} == {mine["id"], theirs["id"]}

    user_places = client.get("/user-places")
    assert user_places.status_code == 200
    assert [p["id"] for p in user_places.json()] == [mine["id"]]


def test_listing_requires_session(client):
    assert client.get("/places").status_code == 401
    assert client.get("/user-places").status_code == 401
