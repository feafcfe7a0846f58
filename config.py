from dotenv import load_dotenv
import os

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
DEV_SECRET_KEY = "dev-secret-change-me"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str):
    raw = os.getenv(name, default)
    if raw.strip() == "*":
        return "*"
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    # Token signing secret
    SECRET_KEY = os.getenv("JWT_SECRET") or os.getenv("SECRET_KEY") or DEV_SECRET_KEY
    TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "24"))

    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL", "sqlite:///" + os.path.join(BASE_DIR, "diet_tracker.db")
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
    }
    AUTO_CREATE_TABLES = _env_bool("AUTO_CREATE_TABLES", True)

    UPLOADS_DIR = os.getenv("UPLOADS_DIR", os.path.join(BASE_DIR, "uploads"))
    MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
    # Werkzeug rejects bodies above this before they are read; 1 MiB of multipart slack.
    MAX_CONTENT_LENGTH = MAX_UPLOAD_BYTES + 1024 * 1024

    CORS_ORIGINS = _env_list("CORS_ORIGINS", "*")
    PORT = int(os.getenv("PORT", "5000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
