"""
Photo Controller Module

Handles meal photo endpoints: upload, listing, deletion and serving the
stored image bytes back to their owner.
"""

import os

from flask import request, send_from_directory

from diet_tracker.errors import NotFound, ValidationError
from diet_tracker.schemas import load_payload
from diet_tracker.schemas.photo_schema import PhotoSchema, PhotoUploadSchema
from diet_tracker.services import photo_service, upload_service
from diet_tracker.utils.http import ok

UPLOAD_FIELD = "photo"


def upload_photo_handler():
    """
    Store an uploaded meal photo for the current user.

    Form Parameters:
        - photo (required): image file part
        - calories (optional): positive integer annotation
    """
    upload = request.files.get(UPLOAD_FIELD)
    if upload is None or not upload.filename:
        raise ValidationError("No file uploaded")

    form = load_payload(PhotoUploadSchema(), request.form.to_dict())

    filename = upload_service.store(
        upload.stream,
        original_filename=upload.filename,
        mimetype=upload.mimetype,
        declared_size=upload.content_length or None,
    )
    photo = photo_service.add_photo(
        user_id=request.user_id,
        filename=filename,
        original_name=upload.filename,
        calories=form.get("calories"),
    )
    return ok({
        "message": "Photo uploaded successfully",
        "photo": PhotoSchema().dump(photo),
    }, 201)


def list_photos_handler():
    photos = photo_service.list_photos(request.user_id)
    return ok(PhotoSchema(many=True).dump(photos))


def delete_photo_handler(photo_id: int):
    photo_service.delete_photo(photo_id, request.user_id)
    return ok({"message": "Photo deleted successfully"})


def serve_photo_handler(filename: str):
    photo = photo_service.get_photo(filename, request.user_id)
    path = upload_service.path_for(photo.filename)
    if not os.path.isfile(path):
        raise NotFound("File not found")
    return send_from_directory(upload_service.uploads_dir(), photo.filename)
