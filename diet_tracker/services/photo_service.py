"""
Photo Service

Photo metadata store. Every lookup is filtered by the owning user; the
backing files are handled by the upload service.
"""

import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError

from diet_tracker.errors import NotFound
from diet_tracker.extensions import db
from diet_tracker.models.photo import Photo
from diet_tracker.services import upload_service
from diet_tracker.utils.dates import today
from diet_tracker.utils.validators import is_owner

logger = logging.getLogger(__name__)


def add_photo(
    user_id: int,
    filename: str,
    original_name: str,
    calories: Optional[int] = None,
) -> Photo:
    """
    Record metadata for a stored upload.

    The stored file is removed again if the row cannot be written.

    Raises:
        NotFound: If ``user_id`` no longer has a user row
    """
    photo = Photo(
        user_id=user_id,
        filename=filename,
        original_name=original_name,
        date=today(),
        calories=calories,
    )
    db.session.add(photo)
    try:
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        upload_service.remove(filename)
        if isinstance(exc, IntegrityError):
            raise NotFound("User not found") from exc
        raise
    logger.info("User %s uploaded photo %s as %s", user_id, photo.id, filename)
    return photo


def list_photos(user_id: int) -> List[Photo]:
    return (
        Photo.query
        .filter_by(user_id=user_id)
        .order_by(desc(Photo.created_at), desc(Photo.id))
        .all()
    )


def get_photo(filename: str, user_id: int) -> Photo:
    photo = Photo.query.filter_by(filename=filename).first()
    if not is_owner(photo, user_id):
        raise NotFound("Photo not found")
    return photo


def delete_photo(photo_id: int, user_id: int) -> Photo:
    """
    Delete a photo row owned by ``user_id`` and then its backing file.

    File removal is best-effort: a failure is logged and the metadata
    delete still stands.

    Raises:
        NotFound: If no photo matches both id and owner
    """
    photo = Photo.query.filter_by(id=photo_id, user_id=user_id).first()
    if photo is None:
        raise NotFound("Photo not found")

    filename = photo.filename
    db.session.delete(photo)
    db.session.commit()

    if not upload_service.remove(filename):
        logger.warning("Photo %s deleted but file %s could not be removed", photo_id, filename)
    return photo
