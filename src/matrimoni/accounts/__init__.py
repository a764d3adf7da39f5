"""user accounts and the login session."""
from .directory import AccountDirectory, USERS_KEY, SESSION_KEY

__all__ = [
    "AccountDirectory",
    "USERS_KEY",
    "SESSION_KEY",
]
