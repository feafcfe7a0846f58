"""
Food Entry Service

Create, list and delete food log entries, always scoped to the owning user.
"""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError

from diet_tracker.errors import NotFound
from diet_tracker.extensions import db
from diet_tracker.models.food_entry import FoodEntry
from diet_tracker.utils.dates import today

logger = logging.getLogger(__name__)


def add_food_entry(
    user_id: int,
    name: str,
    calories: int,
    meal_type: str,
    entry_date: Optional[date] = None,
) -> FoodEntry:
    """
    Raises:
        NotFound: If ``user_id`` no longer has a user row
    """
    entry = FoodEntry(
        user_id=user_id,
        name=name,
        calories=calories,
        meal_type=meal_type,
        date=entry_date or today(),
    )
    db.session.add(entry)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise NotFound("User not found") from exc
    logger.info("User %s logged food entry %s", user_id, entry.id)
    return entry


def list_food_entries(user_id: int, entry_date: Optional[date] = None) -> List[FoodEntry]:
    """Entries of ``user_id``, newest first, optionally for one calendar day."""
    query = FoodEntry.query.filter_by(user_id=user_id)
    if entry_date is not None:
        query = query.filter_by(date=entry_date)
    return query.order_by(desc(FoodEntry.created_at), desc(FoodEntry.id)).all()


def delete_food_entry(entry_id: int, user_id: int) -> None:
    """
    Delete one entry owned by ``user_id``.

    Raises:
        NotFound: If no entry matches both id and owner
    """
    deleted = (
        FoodEntry.query
        .filter_by(id=entry_id, user_id=user_id)
        .delete(synchronize_session=False)
    )
    db.session.commit()
    if not deleted:
        raise NotFound("Food item not found")
    logger.info("User %s deleted food entry %s", user_id, entry_id)
