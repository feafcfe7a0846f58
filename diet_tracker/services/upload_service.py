"""
Upload Service

Persists uploaded image payloads to the uploads directory under generated
names, and removes them again on a best-effort basis.
"""

import logging
import os
import re
import uuid
from typing import BinaryIO, Optional

from flask import current_app

from diet_tracker.errors import InvalidType, NotFound, TooLarge

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
_EXTENSION_RE = re.compile(r"\.[A-Za-z0-9]{1,10}")


def uploads_dir() -> str:
    return os.path.abspath(current_app.config["UPLOADS_DIR"])


def max_upload_bytes() -> int:
    return int(current_app.config.get("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES))


def is_image_mimetype(mimetype: Optional[str]) -> bool:
    return bool(mimetype) and mimetype.lower().startswith("image/")


def generate_filename(original_filename: Optional[str]) -> str:
    """Random unique name that keeps the original extension when it is plain ASCII."""
    _, ext = os.path.splitext(os.path.basename((original_filename or "").replace("\\", "/")))
    if not _EXTENSION_RE.fullmatch(ext):
        ext = ""
    return f"{uuid.uuid4().hex}{ext.lower()}"


def store(
    stream: BinaryIO,
    original_filename: Optional[str],
    mimetype: Optional[str],
    declared_size: Optional[int] = None,
) -> str:
    """
    Write an uploaded image to the uploads directory.

    Args:
        stream: Readable binary stream with the file content
        original_filename: Client supplied name, only used for its extension
        mimetype: Declared content type, must be ``image/*``
        declared_size: Declared byte size, checked before anything is written

    Returns:
        The generated stored filename

    Raises:
        InvalidType: If the declared type is not an image
        TooLarge: If the payload exceeds MAX_UPLOAD_BYTES
    """
    if not is_image_mimetype(mimetype):
        raise InvalidType()

    limit = max_upload_bytes()
    if declared_size is not None and declared_size > limit:
        raise TooLarge()

    directory = uploads_dir()
    os.makedirs(directory, exist_ok=True)

    filename = generate_filename(original_filename)
    final_path = os.path.join(directory, filename)
    partial_path = final_path + ".part"

    written = 0
    try:
        # "xb" fails instead of overwriting if the name ever collides
        with open(partial_path, "xb") as out:
            while True:
                chunk = stream.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > limit:
                    raise TooLarge()
                out.write(chunk)
        os.replace(partial_path, final_path)
    except BaseException:
        _discard(partial_path)
        raise

    logger.info("Stored upload %s (%d bytes)", filename, written)
    return filename


def path_for(filename: str) -> str:
    """Absolute path of a stored file; names escaping the directory are NotFound."""
    directory = uploads_dir()
    path = os.path.abspath(os.path.join(directory, filename))
    if os.path.dirname(path) != directory:
        raise NotFound("File not found")
    return path


def remove(filename: str) -> bool:
    """Best-effort delete. Returns False if the file could not be removed."""
    try:
        path = path_for(filename)
    except NotFound:
        logger.warning("Refusing to remove file outside uploads dir: %r", filename)
        return False

    try:
        os.remove(path)
    except FileNotFoundError:
        logger.info("Upload already gone: %s", filename)
        return True
    except OSError as exc:
        logger.warning("Could not remove upload %s: %s", filename, exc)
        return False
    logger.info("Removed upload %s", filename)
    return True


def _discard(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not discard partial upload %s: %s", path, exc)
