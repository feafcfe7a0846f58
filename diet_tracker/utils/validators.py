"""Pure input and ownership checks shared by controllers and services."""

import re
from typing import Any

PASSWORD_MIN_LENGTH = 8
PASSWORD_SYMBOLS = '!@#$%^&*(),.?":{}|<>'
PASSWORD_RULES_MESSAGE = (
    "Password must contain at least 8 characters, one uppercase letter, "
    "one special character, and one number"
)

_UPPERCASE_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"\d")


def validate_password(password: str) -> bool:
    if not isinstance(password, str) or len(password) < PASSWORD_MIN_LENGTH:
        return False
    has_upper = bool(_UPPERCASE_RE.search(password))
    has_digit = bool(_DIGIT_RE.search(password))
    has_symbol = any(ch in PASSWORD_SYMBOLS for ch in password)
    return has_upper and has_digit and has_symbol


def is_owner(resource: Any, user_id: int) -> bool:
    """True when ``resource`` exists and belongs to ``user_id``."""
    if resource is None:
        return False
    return getattr(resource, "user_id", None) == user_id
