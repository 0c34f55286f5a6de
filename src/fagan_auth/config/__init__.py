import os

from ..core.constants import DEFAULT_RESERVED_ADMINS


def get_settings_module() -> str:
    # APP_ENV picks the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "fagan_auth.config.production"

    if env in {"test", "testing"}:
        return "fagan_auth.config.testing"

    return "fagan_auth.config.development"


def reserved_admins_from_env() -> list:
    """Two (username, password) pairs; env vars override the shipped defaults."""
    (u1, p1), (u2, p2) = DEFAULT_RESERVED_ADMINS
    return [
        (os.getenv("ADMIN1_USERNAME", u1), os.getenv("ADMIN1_PASSWORD", p1)),
        (os.getenv("ADMIN2_USERNAME", u2), os.getenv("ADMIN2_PASSWORD", p2)),
    ]


def db_config_from_env(default_path: str) -> dict:
    return {
        "driver": os.getenv("DB_DRIVER", "sqlite"),
        "path": os.getenv("DB_PATH", default_path),
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", ""),
        "database": os.getenv("DB_NAME", "fagan_inventory"),
    }
