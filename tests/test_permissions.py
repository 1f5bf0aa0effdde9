"""check_permission / ensure_permission for owners, strangers and admins."""
import uuid

import pytest

from brazucas.errors import ForbiddenError
from brazucas.services.permissions import (
    ADMIN_ACTIONS,
    OWNER_ACTIONS,
    Action,
    Principal,
    UserRole,
    check_permission,
    ensure_permission,
)


def _principal(role: UserRole = UserRole.NORMAL) -> Principal:
    return Principal(id=uuid.uuid4(), email=f"{role.value}@example.com", role=role)


@pytest.mark.parametrize("action", sorted(OWNER_ACTIONS, key=lambda a: a.value))
def test_owner_actions_allow_owner_and_admin(action) -> None:
    owner = _principal()
    stranger = _principal(UserRole.ADVERTISER)
    admin = _principal(UserRole.ADMIN)
    assert check_permission(owner, action, owner_id=owner.id) is True
    assert check_permission(admin, action, owner_id=owner.id) is True
    assert check_permission(stranger, action, owner_id=owner.id) is False


@pytest.mark.parametrize("action", sorted(ADMIN_ACTIONS, key=lambda a: a.value))
def test_admin_actions_deny_everyone_else(action) -> None:
    user = _principal()
    assert check_permission(_principal(UserRole.ADMIN), action) is True
    # Ownership does not matter for admin-only actions.
    assert check_permission(user, action, owner_id=user.id) is False


def test_anonymous_is_always_denied() -> None:
    for action in Action:
        assert check_permission(None, action, owner_id=uuid.uuid4()) is False


def test_owner_action_without_owner_is_denied_for_non_admin() -> None:
    assert check_permission(_principal(), Action.EDIT, owner_id=None) is False


def test_ensure_permission_raises_with_action_code() -> None:
    owner_id = uuid.uuid4()
    with pytest.raises(ForbiddenError) as exc:
        ensure_permission(_principal(), Action.DELETE, owner_id=owner_id)
    assert exc.value.status_code == 403
    assert exc.value.code == "delete_forbidden"
    assert "delete" in exc.value.message


def test_every_action_has_one_scope() -> None:
    assert OWNER_ACTIONS.isdisjoint(ADMIN_ACTIONS)
    assert OWNER_ACTIONS | ADMIN_ACTIONS == set(Action)
