import datetime as dt
import logging
from functools import wraps
from typing import Any, Dict, Optional
from flask import request, current_app
import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from diet_tracker.errors import TokenExpired, TokenInvalid, Unauthenticated

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def create_token(user_id: int, email: str) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    ttl_hours = int(current_app.config.get("TOKEN_TTL_HOURS", 24))
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int((now + dt.timedelta(hours=ttl_hours)).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Verify ``token`` and return its identity claims.

    Raises TokenExpired once ``exp`` has passed and TokenInvalid for a bad
    signature, a malformed token or missing claims.
    """
    try:
        payload = jwt.decode(
            token,
            current_app.config["SECRET_KEY"],
            algorithms=[JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpired() from exc
    except jwt.InvalidTokenError as exc:
        raise TokenInvalid() from exc

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError) as exc:
        raise TokenInvalid() from exc
    email = payload.get("email")
    if not isinstance(email, str):
        raise TokenInvalid()
    return {"user_id": user_id, "email": email}


def bearer_token() -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.lower().startswith("bearer "):
        return None
    token = auth_header.split(" ", 1)[1].strip()
    return token or None


def require_auth(f=None, *, allow_query_token: bool = False):
    """Authenticate the request and expose ``request.user_id``/``request.user_email``.

    With ``allow_query_token`` a ``?token=`` parameter is accepted as well and
    takes precedence over the header, for inline image references that cannot
    set headers.
    """
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = None
            if allow_query_token:
                token = (request.args.get("token") or "").strip() or None
            if token is None:
                token = bearer_token()
            if token is None:
                raise Unauthenticated()
            claims = decode_token(token)
            request.user_id = claims["user_id"]  # type: ignore
            request.user_email = claims["email"]  # type: ignore
            return view(*args, **kwargs)
        return wrapper

    if f is not None:
        return decorator(f)
    return decorator


__all__ = [
    "hash_password",
    "create_token",
    "decode_token",
    "require_auth",
    "check_password_hash",
]
