import uuid
from typing import Optional

from fastapi.testclient import TestClient

IMAGE_BYTES = b"\xff\xd8\xff\xe0fake-jpeg-payload"


def unique_email(prefix: str = 'guest') -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8]}@example.com"


def create_user(client: TestClient, email: Optional[str] = None, name: str = 'Test User', password: str = 'pass123'):
    if email is None:
        email = unique_email()
    payload = {
        'name': name,
        'email': email,
        'password': password,
    }
    return client.post('/register', json=payload)


def login_user(client: TestClient, email: Optional[str] = None, name: str = 'Test User', password: str = 'pass123'):
    """Register a fresh user and log the client in; returns the login response."""
    if email is None:
        email = unique_email()
    r = create_user(client, email=email, name=name, password=password)
    assert r.status_code == 201
    return client.post('/login', json={'email': email, 'password': password})


def create_place(client: TestClient, **overrides):
    payload = {
        'title': 'Cabin by the lake',
        'address': '1 Shore Road',
        'photos': ['1700000000000000000.jpg'],
        'description': 'Quiet and warm',
        'perks': ['wifi', 'parking'],
        'extraInfo': 'No parties',
        'checkIn': '14:00',
        'checkOut': '11:00',
        'maxGuests': 4,
        'price': 120,
    }
    payload.update(overrides)
    return client.post('/places', json=payload)
