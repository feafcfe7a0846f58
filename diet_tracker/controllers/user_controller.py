from flask import request

from diet_tracker.errors import NotFound
from diet_tracker.schemas.auth_schema import UserSchema
from diet_tracker.services import user_service
from diet_tracker.utils.http import ok


def profile_handler():
    user = user_service.find_by_id(request.user_id)
    if not user:
        raise NotFound("User not found")
    return ok(UserSchema().dump(user))
