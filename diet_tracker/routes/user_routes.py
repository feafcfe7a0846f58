from flask import Blueprint
from diet_tracker.utils.auth import require_auth
from diet_tracker.controllers.user_controller import profile_handler

user_bp = Blueprint("user", __name__, url_prefix="/api")


@user_bp.get("/profile")
@require_auth
def profile():
    return profile_handler()
