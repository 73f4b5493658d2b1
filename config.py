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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./site.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")

    # Site
    SITE_URL = data.get("SITE_URL", "http://localhost:8000")
    ADMIN_EMAIL = data.get("ADMIN_EMAIL", "admin@example.com")

    # Mail
    EMAIL_BACKEND = data.get("EMAIL_BACKEND", "console")
    EMAIL_FROM = data.get("EMAIL_FROM", "noreply@example.com")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = data.get("SMTP_PORT", 587)
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))

    # Setting defaults (overridden by rows in the settings table)
    LOGIN_WITH_EMAIL = bool(data.get("LOGIN_WITH_EMAIL", False))
    REGISTRATION_NEEDS_ACTIVATION = bool(data.get("REGISTRATION_NEEDS_ACTIVATION", True))

    # Lifetimes, in seconds
    PASSWORD_RESET_TOKEN_TTL = data.get("PASSWORD_RESET_TOKEN_TTL", 3600)
    ACCOUNT_ACTIVATION_TOKEN_TTL = data.get("ACCOUNT_ACTIVATION_TOKEN_TTL", 86400)
    SESSION_TTL_SECONDS = data.get("SESSION_TTL_SECONDS", 86400)
    REMEMBER_ME_TTL_SECONDS = data.get("REMEMBER_ME_TTL_SECONDS", 30 * 86400)
