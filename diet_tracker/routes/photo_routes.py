from flask import Blueprint
from diet_tracker.utils.auth import require_auth
from diet_tracker.controllers.photo_controller import (
    upload_photo_handler,
    list_photos_handler,
    delete_photo_handler,
    serve_photo_handler,
)

photo_bp = Blueprint("photos", __name__, url_prefix="/api/photos")


@photo_bp.route("", methods=["GET"])
@require_auth
def list_photos():
    return list_photos_handler()


@photo_bp.route("", methods=["POST"])
@require_auth
def upload_photo():
    return upload_photo_handler()


@photo_bp.route("/<int:id>", methods=["DELETE"])
@require_auth
def delete_photo(id):
    return delete_photo_handler(id)


# <img src> cannot send headers, so this route also takes ?token=
@photo_bp.route("/<filename>", methods=["GET"])
@require_auth(allow_query_token=True)
def serve_photo(filename):
    return serve_photo_handler(filename)
