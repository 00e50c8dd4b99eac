"""
Create (or promote) the platform admin in the users collection.

The admin still has to sign up with the identity provider using the same
email; roles are read from our database, not from the token.

Usage:
    MONGO_URI=... ADMIN_EMAIL=admin@example.com python scripts/setup_admin.py
"""

from __future__ import annotations

import asyncio
import logging

from core import config, db
from core.logging import configure_logging
from users import repository as user_repository

DEFAULT_ADMIN_EMAIL = "admin@example.com"
DEFAULT_ADMIN_NAME = "System Administrator"

logger = logging.getLogger("setup_admin")


async def setup_admin(email: str, name: str) -> str:
    """
    Returns "created" or "promoted".
    """
    existing = await user_repository.get_user_by_email(email)
    if existing is not None:
        await user_repository.update_user(email, {"role": "admin"})
        return "promoted"

    await user_repository.create_user(email=email, name=name, photo_url="", role="admin")
    return "created"


async def main() -> None:
    email = config.env_str("ADMIN_EMAIL", DEFAULT_ADMIN_EMAIL)
    name = config.env_str("ADMIN_NAME", DEFAULT_ADMIN_NAME)

    await db.init_client()
    try:
        outcome = await setup_admin(email, name)
        logger.info("admin_%s email=%s db=%s", outcome, email, db.database_name())
    finally:
        await db.close_client()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(main())
