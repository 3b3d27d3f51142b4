"""
Ownership Authorizer

A single policy table decides what an authenticated identity may do with a
place or booking. Handlers consult it through `can_access` / `authorize`
instead of comparing owner ids themselves. Pairs missing from the table are
denied.
"""
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from app.services.auth.session import Identity
from app.services.exceptions import ForbiddenError


class ResourceKind(str, Enum):
    PLACE = "place"
    BOOKING = "booking"


class Action(str, Enum):
    READ = "read"
    LIST_MINE = "list_mine"
    LIST_ALL = "list_all"
    CREATE = "create"
    UPDATE = "update"


class Decision(str, Enum):
    ALLOW = "allow"
    DENY = "deny"


Rule = Callable[[Identity, Optional[Any]], bool]


def _always(identity: Identity, resource: Optional[Any]) -> bool:
    return True


def _owns_place(identity: Identity, resource: Optional[Any]) -> bool:
    return resource is not None and resource.owner_id == identity.id


def _booked_by(identity: Identity, resource: Optional[Any]) -> bool:
    return resource is not None and resource.user_id == identity.id


POLICY: Dict[Tuple[ResourceKind, Action], Rule] = {
    (ResourceKind.PLACE, Action.READ): _always,
    (ResourceKind.PLACE, Action.LIST_MINE): _owns_place,
    (ResourceKind.PLACE, Action.LIST_ALL): _always,
    (ResourceKind.PLACE, Action.CREATE): _always,
    (ResourceKind.PLACE, Action.UPDATE): _owns_place,
    (ResourceKind.BOOKING, Action.CREATE): _always,
    (ResourceKind.BOOKING, Action.LIST_MINE): _booked_by,
}


def can_access(identity: Identity, kind: ResourceKind, action: Action, resource: Optional[Any] = None) -> Decision:
    rule = POLICY.get((kind, action))
    if rule is None or identity is None:
        return Decision.DENY
    return Decision.ALLOW if rule(identity, resource) else Decision.DENY


def authorize(identity: Identity, kind: ResourceKind, action: Action, resource: Optional[Any] = None) -> None:
    """Raise ForbiddenError unless the policy allows the action."""
    if can_access(identity, kind, action, resource) is Decision.DENY:
        raise ForbiddenError()
