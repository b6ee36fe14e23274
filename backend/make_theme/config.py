import os
from dotenv import load_dotenv

load_dotenv()


def _csv(value, default):
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Theme behaviour
    MAKE_COMPATIBILITY_MODE = os.getenv("MAKE_COMPATIBILITY_MODE", "full")
    MAKE_PLUS_VERSION = os.getenv("MAKE_PLUS_VERSION") or None
    MAKE_SCRIPT_DEBUG = os.getenv("MAKE_SCRIPT_DEBUG", "false").lower() == "true"
    MAKE_WOOCOMMERCE = os.getenv("MAKE_WOOCOMMERCE", "false").lower() == "true"
    MAKE_BUILDER_POST_TYPES = _csv(os.getenv("MAKE_BUILDER_POST_TYPES"), ["page"])

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///make-dev.db")

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "testing-secret-key-with-enough-length"

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
