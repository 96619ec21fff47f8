"""Input validation rules for registration and password changes.

Pure functions with no I/O; the auth service runs them before touching the
user store or the password hasher.
"""

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_PASSWORD_LENGTH = 6
# bcrypt only reads the first 72 bytes and current releases reject longer input
MAX_PASSWORD_BYTES = 72


def validate_email_format(email: str) -> bool:
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.match(email) is not None


def validate_password_strength(password: str) -> bool:
    if not isinstance(password, str):
        return False
    return len(password) >= MIN_PASSWORD_LENGTH


def validate_password_length(password: str) -> bool:
    """Return False when the password exceeds the hasher's input limit."""
    return len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES


def validate_name(name: str) -> bool:
    return isinstance(name, str) and bool(name.strip())
