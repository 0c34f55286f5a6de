"""Apply the users schema and seed the reserved admin accounts.

  fagan-auth-init-db            # uses APP_ENV / .env settings
"""
from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from ..container import build_container
from ..database.bootstrap import init_database
from ..main import configure_logging, load_settings

logger = logging.getLogger(__name__)


def main() -> int:
    load_dotenv(override=False)
    settings = load_settings()
    configure_logging(settings.get("LOG_LEVEL", "INFO"))

    container = build_container(
        db_config=settings["DB_CONFIG"],
        password_hash_method=settings["PASSWORD_HASH_METHOD"],
    )
    try:
        created = init_database(container.users_repo, container.hasher, settings["RESERVED_ADMINS"])
    except Exception as e:
        logger.exception("Database init failed: %s", e)
        return 1

    users = container.users_repo.list_public()
    print(
        f"OK: users schema ready -> {container.conn.config.describe()} "
        f"(users={len(users)}, seeded={len(created)})"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
