import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./accounts.db")
    CREATE_TABLES = bool(data.get("CREATE_TABLES", True))
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    SESSION_SECRET = data.get("SESSION_SECRET", "dev-session-secret-change-in-production")
    SESSION_COOKIE = data.get("SESSION_COOKIE", "account_session")
    SESSION_MAX_AGE = data.get("SESSION_MAX_AGE", 14 * 24 * 60 * 60)
    SESSION_HTTPS_ONLY = bool(data.get("SESSION_HTTPS_ONLY", False))
    TOKEN_TTL_SECONDS = data.get("TOKEN_TTL_SECONDS", 24 * 60 * 60)
    MAIL_BACKEND = data.get("MAIL_BACKEND", "log")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = data.get("SMTP_PORT", 25)
    MAIL_FROM = data.get("MAIL_FROM", "postmaster@kazzla.com")
    DEFAULT_LANGUAGE = data.get("DEFAULT_LANGUAGE", "en")
