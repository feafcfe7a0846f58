import logging

from diet_tracker.errors import Unauthenticated, ValidationError
from diet_tracker.schemas import load_payload
from diet_tracker.schemas.auth_schema import LoginSchema, RegisterSchema
from diet_tracker.services import user_service
from diet_tracker.utils.auth import check_password_hash, create_token, hash_password
from diet_tracker.utils.http import ok, json_body
from diet_tracker.utils.validators import PASSWORD_RULES_MESSAGE, validate_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def _user_payload(user):
    return {"id": user.id, "email": user.email, "name": user.name}


def register_handler():
    data = load_payload(RegisterSchema(), json_body())
    if not validate_password(data["password"]):
        raise ValidationError(PASSWORD_RULES_MESSAGE)

    user = user_service.create_user(
        email=data["email"],
        password_hash=hash_password(data["password"]),
        name=data["name"],
    )
    token = create_token(user.id, user.email)
    return ok({
        "message": "User created successfully",
        "token": token,
        "user": _user_payload(user),
    }, 201)


def login_handler():
    data = load_payload(LoginSchema(), json_body(), "Email and password are required")

    user = user_service.find_by_email(data["email"])
    if not user or not check_password_hash(user.password, data["password"]):
        logger.info("Failed login attempt")
        raise Unauthenticated(INVALID_CREDENTIALS)

    token = create_token(user.id, user.email)
    return ok({
        "message": "Login successful",
        "token": token,
        "user": _user_payload(user),
    })
