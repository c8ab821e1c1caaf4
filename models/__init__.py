"""
Models Package

Exports the nutrition reference model and the db instance.
"""

from .base import db

from .ingredient import Ingredient

__all__ = [
    'db',
    'Ingredient',
]
