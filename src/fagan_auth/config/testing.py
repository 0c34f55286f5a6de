import os

from . import reserved_admins_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "driver": "sqlite",
    "path": os.getenv("DB_PATH", "fagan_inventory_test.db"),
}

RESERVED_ADMINS = reserved_admins_from_env()

# Cheap work factor so the suite stays fast.
PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = True
