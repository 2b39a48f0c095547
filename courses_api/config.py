"""
Configuration settings for the application
"""
import os
from dotenv import load_dotenv
from .env_config import ENVIRONMENT, DEBUG, HOST, PORT

# Load environment variables
load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Console logging, rendered by colorlog
LOG_FORMAT = "%(log_color)s%(asctime)s %(levelname)-8s%(reset)s %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def normalize_database_url(url):
    """
    Rewrite legacy postgres:// URLs into the scheme SQLAlchemy accepts
    @param url: str - Database URL, possibly None
    @returns: str - Normalized URL or None
    """
    if url and url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


class Config:
    """
    Base configuration shared by every environment.
    """

    ENVIRONMENT = ENVIRONMENT
    DEBUG = DEBUG
    TESTING = False
    HOST = HOST
    PORT = PORT

    # Database settings
    SQLALCHEMY_DATABASE_URI = normalize_database_url(os.getenv('DATABASE_URL')) or \
        'sqlite:///' + os.path.join(BASE_DIR, 'courses.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # Origins allowed to call the API from a browser
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv('CORS_ORIGINS', 'http://localhost:5173').split(',')
        if origin.strip()
    ]

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required configuration values are set.
        Raises ValueError if any required value is missing.
        """
        if not cls.SQLALCHEMY_DATABASE_URI:
            raise ValueError("No database configured, set DATABASE_URL")


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}


class ProductionConfig(Config):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = normalize_database_url(os.getenv('DATABASE_URL'))

    @classmethod
    def validate(cls) -> None:
        if not cls.SQLALCHEMY_DATABASE_URI:
            raise ValueError("DATABASE_URL environment variable is not set")


config_by_name = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
}


def get_config(config_name=None):
    """
    Resolve a configuration class by environment name
    @param config_name: str - One of development, testing, production
    @returns: type - Configuration class
    """
    name = config_name or ENVIRONMENT
    try:
        return config_by_name[name]
    except KeyError:
        raise ValueError(f"Unknown configuration: {name}")
