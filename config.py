"""
Application Configuration

Centralizes Flask, database, nutrition engine and USDA settings.
"""

import os

from constants import MAX_INGREDIENTS as DEFAULT_MAX_INGREDIENTS

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL', 'sqlite:///' + os.path.join(BASE_DIR, 'nutrition.db')
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Nutrition engine
    NUTRITION_DEFAULT_SERVINGS = 2
    MAX_INGREDIENTS = int(os.environ.get('MAX_INGREDIENTS', DEFAULT_MAX_INGREDIENTS))

    # USDA FoodData Central
    USDA_API_KEY = os.environ.get('USDA_API_KEY', '')
    USDA_BASE_URL = os.environ.get('USDA_BASE_URL', 'https://api.nal.usda.gov/fdc/v1')
    USDA_TIMEOUT = float(os.environ.get('USDA_TIMEOUT', '10'))
    USDA_RATE_LIMIT = int(os.environ.get('USDA_RATE_LIMIT', '1000'))  # requests per hour


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    USDA_API_KEY = ''


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
