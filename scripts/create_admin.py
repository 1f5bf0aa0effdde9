"""
Bootstrap an admin account directly in the database (no HTTP, no admin secret).
Idempotent: if the email already exists nothing is changed.

Run from the repo root (DATABASE_URL from env or .env):
  set ADMIN_EMAIL=admin@brazucasemcork.com
  set ADMIN_PASSWORD=<password>
  python scripts/create_admin.py
  or: python scripts/create_admin.py <email> <password> [nickname]

Exit codes: 0 ok (created or already there), 2 missing email/password, 3 weak password.
"""
import asyncio
import os
import sys

from brazucas.db import dispose_engine, get_session_factory
from brazucas.logging_config import configure_logging
from brazucas.schemas.auth import check_password_strength
from brazucas.services.user_service import ensure_admin

EXIT_MISSING_ARGS = 2
EXIT_WEAK_PASSWORD = 3


async def run(email: str, password: str, nickname: str) -> int:
    try:
        async with get_session_factory()() as session:
            user, created = await ensure_admin(session, email, password, nickname)
            await session.commit()
    finally:
        await dispose_engine()
    if created:
        print(f"Admin created: {user.email} (id={user.id})")
    else:
        print(f"User already exists: {user.email} (role={user.role}); nothing changed")
    return 0


def main() -> None:
    args = sys.argv[1:]
    email = (args[0] if len(args) > 0 else os.environ.get("ADMIN_EMAIL", "")).strip()
    password = args[1] if len(args) > 1 else os.environ.get("ADMIN_PASSWORD", "")
    nickname = (args[2] if len(args) > 2 else os.environ.get("ADMIN_NICKNAME", "Admin")).strip()
    if not email or not password:
        print("Usage: create_admin.py <email> <password> [nickname]  (or ADMIN_EMAIL / ADMIN_PASSWORD)")
        sys.exit(EXIT_MISSING_ARGS)
    try:
        check_password_strength(password)
    except ValueError as e:
        print(f"Weak password: {e}")
        sys.exit(EXIT_WEAK_PASSWORD)

    configure_logging()
    sys.exit(asyncio.run(run(email, password, nickname)))


if __name__ == "__main__":
    main()
