import logging
from typing import Any, Mapping, Optional

from flask import Flask
from diet_tracker.extensions import db, cors, migrate
from diet_tracker.errors import register_error_handlers
from diet_tracker.routes import register_routes
from diet_tracker.commands import register_commands
from diet_tracker import models  # noqa: F401  (registers tables on db.metadata)
from config import DEV_SECRET_KEY

logger = logging.getLogger(__name__)


def create_app(overrides: Optional[Mapping[str, Any]] = None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if overrides:
        app.config.update(overrides)
        if "MAX_UPLOAD_BYTES" in overrides and "MAX_CONTENT_LENGTH" not in overrides:
            app.config["MAX_CONTENT_LENGTH"] = int(overrides["MAX_UPLOAD_BYTES"]) + 1024 * 1024

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if app.config["SECRET_KEY"] == DEV_SECRET_KEY and not app.config.get("TESTING"):
        logger.warning("Using the development signing secret; set JWT_SECRET in production")

    # Initialize database
    init_storage(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "DELETE", "OPTIONS"])

    register_error_handlers(app)
    register_routes(app)
    register_commands(app)

    return app


def init_storage(app: Flask) -> None:
    """Bind the process-wide database handle to ``app`` and create tables if asked."""
    db.init_app(app)
    if app.config.get("AUTO_CREATE_TABLES"):
        with app.app_context():
            db.create_all()


def shutdown_storage(app: Flask) -> None:
    """Release pooled database connections; call once on process exit."""
    with app.app_context():
        db.session.remove()
        db.engine.dispose()
    logger.info("Database connections released")
