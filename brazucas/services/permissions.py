"""
Role/ownership checks in one place.

check_permission answers allow/deny; ensure_permission raises ForbiddenError.
Owner-scoped actions pass for the owner or an admin; the rest are admin only.
"""
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from brazucas.errors import ForbiddenError


class UserRole(str, Enum):
    NORMAL = "normal"
    ADMIN = "admin"
    ADVERTISER = "advertiser"


class Action(str, Enum):
    EDIT = "edit"
    DELETE = "delete"
    SUBMIT = "submit"
    VIEW_HISTORY = "view_history"
    REVIEW = "review"
    VIEW_PENDING = "view_pending"
    MANAGE_CATEGORIES = "manage_categories"
    VIEW_STATS = "view_stats"


OWNER_ACTIONS = frozenset({Action.EDIT, Action.DELETE, Action.SUBMIT, Action.VIEW_HISTORY})
ADMIN_ACTIONS = frozenset({Action.REVIEW, Action.VIEW_PENDING, Action.MANAGE_CATEGORIES, Action.VIEW_STATS})

DENIAL_MESSAGES = {
    Action.EDIT: "You can only edit your own content",
    Action.DELETE: "You can only delete your own content",
    Action.SUBMIT: "You can only submit your own content",
    Action.VIEW_HISTORY: "You can only view the history of your own content",
    Action.REVIEW: "Only administrators can approve or reject content",
    Action.VIEW_PENDING: "Only administrators can view pending content",
    Action.MANAGE_CATEGORIES: "Only administrators can manage service categories",
    Action.VIEW_STATS: "Admin access required",
}


@dataclass(frozen=True)
class Principal:
    """Authenticated caller, as carried by the bearer token."""

    id: uuid.UUID
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def check_permission(
    principal: Optional[Principal],
    action: Action,
    owner_id: Optional[uuid.UUID] = None,
) -> bool:
    """Allow/deny for principal doing action on a resource owned by owner_id."""
    if principal is None:
        return False
    if principal.is_admin:
        return True
    if action in OWNER_ACTIONS:
        return owner_id is not None and owner_id == principal.id
    return False


def ensure_permission(
    principal: Optional[Principal],
    action: Action,
    owner_id: Optional[uuid.UUID] = None,
) -> None:
    if not check_permission(principal, action, owner_id):
        raise ForbiddenError(DENIAL_MESSAGES[action], code=f"{action.value}_forbidden")
