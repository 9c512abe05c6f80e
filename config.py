import os
from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, '.env'))

SQLITE_PREFIX = 'sqlite:///'


def database_url(url: str, project_root: str) -> str:
    """Anchor a relative SQLite file under ``project_root``; other URLs pass through."""
    db_file = url[len(SQLITE_PREFIX):] if url.startswith(SQLITE_PREFIX) else None
    if not db_file or db_file == ':memory:' or os.path.isabs(db_file):
        return url

    db_path = os.path.join(project_root, db_file)
    os.makedirs(os.path.dirname(db_path), exist_ok=True)
    return SQLITE_PREFIX + db_path.replace('\\', '/')


class Config:
    _env = os.environ.get("FLASK_ENV") or os.environ.get("ENV") or "production"
    IS_DEV = str(_env).lower() in {"development", "dev"}

    # In production SECRET_KEY must be set.
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY and IS_DEV:
        SECRET_KEY = "dev-secret-key"

    SQLALCHEMY_DATABASE_URI = database_url(
        os.environ.get('DATABASE_URL', 'sqlite:///instance/snippetbox.db'),
        basedir,
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_CREATE_DB = os.environ.get("AUTO_CREATE_DB", "0") == "1"

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    NAV_LINKS = (
        {"label": "Home", "href": "/"},
        {"label": "Login", "href": "/login"},
        {"label": "Signup", "href": "/register"},
    )

    # page furniture, milliseconds
    FLASH_FADE_DELAY_MS = int(os.environ.get("FLASH_FADE_DELAY_MS", "5000"))
    FLASH_REMOVE_DELAY_MS = int(os.environ.get("FLASH_REMOVE_DELAY_MS", "500"))
