"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


class Config:
    # Runtime settings
    APP_ENV = os.getenv("APP_ENV", "development")
    TESTING = os.getenv("TESTING", "false").lower() in _TRUTHY
    DEBUG = os.getenv("DEBUG", "false").lower() in _TRUTHY
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Room concurrency
    # Upper bound (seconds) a mutation waits for a room's lock before giving up
    ROOM_LOCK_TIMEOUT: float = float(os.getenv("ROOM_LOCK_TIMEOUT", "5.0"))

    # User profile photos
    MAX_PHOTO_MB: float = float(os.getenv("MAX_PHOTO_MB", "2"))
    MAX_PHOTO_BYTES: int = int(MAX_PHOTO_MB * 1024 * 1024)


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    ROOM_LOCK_TIMEOUT = float(os.getenv("ROOM_LOCK_TIMEOUT", "1.0"))


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
