import os
from pathlib import Path
from dotenv import load_dotenv
load_dotenv()  # reads .env in the project root

class Settings:
    DATA_DIR = Path(os.getenv("DATA_DIR", "./data")).expanduser().resolve()
    DATA_DIR.mkdir(parents=True, exist_ok=True)

    WEB_HOST = os.getenv("WEB_HOST", "0.0.0.0")
    WEB_PORT = int(os.getenv("WEB_PORT", "8000"))

    SSL_CERTFILE = os.getenv("SSL_CERTFILE", "")
    SSL_KEYFILE  = os.getenv("SSL_KEYFILE", "")

    AUTH_DB_URL = os.getenv(
        "AUTH_DB_URL", f"sqlite:///{DATA_DIR / 'auth.sqlite3'}"
    )

    # Token signing ------------------------------------------------------
    JWT_SECRET = os.getenv("JWT_SECRET", "dev-jwt-secret-change-me-before-deploying")
    ACCESS_TOKEN_EXPIRY = os.getenv("ACCESS_TOKEN_EXPIRY", "1d")

    INITIAL_ADMIN_NAME = os.getenv("INITIAL_ADMIN_NAME", "Administrator")
    INITIAL_ADMIN_EMAIL = os.getenv("INITIAL_ADMIN_EMAIL", "")
    INITIAL_ADMIN_PASSWORD = os.getenv("INITIAL_ADMIN_PASSWORD", "")

settings = Settings()
