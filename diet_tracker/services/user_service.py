"""
User Service

Credential store: creates and looks up user records. Email uniqueness is
enforced by the ``users.email`` UNIQUE constraint.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from diet_tracker.errors import Conflict
from diet_tracker.extensions import db
from diet_tracker.models.user import User

logger = logging.getLogger(__name__)


def find_by_email(email: str) -> Optional[User]:
    return User.query.filter_by(email=email).first()


def find_by_id(user_id: int) -> Optional[User]:
    return db.session.get(User, user_id)


def create_user(email: str, password_hash: str, name: str) -> User:
    """
    Insert a new user.

    Raises:
        Conflict: If the email is already registered, including when a
            concurrent registration wins the race after the existence check
    """
    if find_by_email(email) is not None:
        raise Conflict()

    user = User(email=email, password=password_hash, name=name)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        logger.info("Duplicate registration rejected by constraint for %s", email)
        raise Conflict() from exc

    logger.info("Registered user id=%s", user.id)
    return user
