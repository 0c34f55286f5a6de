"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

# werkzeug method string: algorithm plus fixed work factor.
DEFAULT_PASSWORD_HASH_METHOD = "scrypt:32768:8:1"

# Hashes written by the earlier desktop build (bcrypt cost 10).
BCRYPT_HASH_PREFIXES = ("$2a$", "$2b$", "$2y$")

DEFAULT_SQLITE_PATH = "fagan_inventory.db"

# Two reserved admin accounts expected by existing deployments.
DEFAULT_RESERVED_ADMINS = (
    ("fagan@admin_1", "fagan_glass"),
    ("fagan@admin_2", "fagan_aluminum"),
)

MSG_LOGIN_OK = "Login successful"
MSG_INVALID_CREDENTIALS = "Invalid credentials"
MSG_CREATOR_NOT_FOUND = "Creator not found"
MSG_ONLY_ADMIN_CREATE = "Only admins can create secretary accounts"
MSG_USERNAME_EXISTS = "Username already exists"
MSG_SECRETARY_CREATED = "Secretary account created successfully"
MSG_USER_NOT_FOUND = "User not found"
MSG_WRONG_CURRENT_PASSWORD = "Current password is incorrect"
MSG_PASSWORD_CHANGED = "Password changed successfully"
MSG_ADMIN_NOT_FOUND = "Admin not found"
MSG_ONLY_ADMIN_DEACTIVATE = "Only admins can deactivate secretary accounts"
MSG_ONLY_SECRETARY_DEACTIVATE = "Only secretary accounts can be deactivated"
MSG_SECRETARY_DEACTIVATED = "Secretary account deactivated successfully"
