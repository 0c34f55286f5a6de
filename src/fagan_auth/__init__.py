"""Fagan auth package.

Local user store, login verification and admin/secretary account management
for the desktop shell. Organized by feature module (users, database) with a
thin command/Flask boundary over the service and repository layers.
"""

__version__ = "0.1.0"
