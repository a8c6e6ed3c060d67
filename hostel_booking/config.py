import os
from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), '.env'))


def _optional_float(value):
    return float(value) if value else None


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-prod'

    # Resource store (json-server style)
    API_BASE_URL = os.environ.get('API_BASE_URL') or 'http://localhost:3000'
    RESOURCE_TIMEOUT = _optional_float(os.environ.get('RESOURCE_TIMEOUT'))  # None = wait forever

    # UI defaults
    NOTIFY_SECONDS = float(os.environ.get('NOTIFY_SECONDS') or 2)


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    API_BASE_URL = 'http://backend.test'
    RESOURCE_TIMEOUT = None


class ProductionConfig(Config):
    DEBUG = False
    # In prod, rely on env vars strictly
