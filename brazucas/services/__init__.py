"""Business logic services."""
from brazucas.services.permissions import Action, Principal, UserRole, check_permission, ensure_permission
from brazucas.services.status_service import ContentKind, ContentStatus, derive_status

__all__ = [
    "Action",
    "Principal",
    "UserRole",
    "check_permission",
    "ensure_permission",
    "ContentKind",
    "ContentStatus",
    "derive_status",
]
