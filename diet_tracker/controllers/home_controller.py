import logging

from sqlalchemy.exc import SQLAlchemyError

from diet_tracker.extensions import db
from diet_tracker.utils.http import ok

logger = logging.getLogger(__name__)


def health_check():
    db_status = "healthy"
    try:
        # Ping the database
        db.session.execute(db.text("SELECT 1"))
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Health check could not reach the database")
        db_status = "unhealthy"

    return ok({
        "status": "online",
        "database": db_status,
    })
