"""
Shared fixtures for the nutrition service tests.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Must be set before the app module is imported
os.environ['FLASK_ENV'] = 'testing'


REFERENCE_ROWS = [
    {'name': 'Chicken, breast, meat only, cooked, roasted', 'calories_per_100g': 165,
     'protein_g_per_100g': 31, 'carbs_g_per_100g': 0, 'fat_g_per_100g': 3.6, 'sodium_mg_per_100g': 74},
    {'name': 'Olive oil, extra virgin', 'calories_per_100g': 884,
     'protein_g_per_100g': 0, 'carbs_g_per_100g': 0, 'fat_g_per_100g': 100, 'sodium_mg_per_100g': 2},
    {'name': 'Apples, raw, with skin', 'calories_per_100g': 52,
     'protein_g_per_100g': 0.3, 'carbs_g_per_100g': 13.8, 'fat_g_per_100g': 0.2, 'sodium_mg_per_100g': 1},
    {'name': 'Tomatoes, red, ripe, raw', 'calories_per_100g': 18,
     'protein_g_per_100g': 0.9, 'carbs_g_per_100g': 3.9, 'fat_g_per_100g': 0.2, 'sodium_mg_per_100g': 5},
    {'name': 'Milk, whole', 'calories_per_100g': 61,
     'protein_g_per_100g': 3.2, 'carbs_g_per_100g': 4.8, 'fat_g_per_100g': 3.3, 'sodium_mg_per_100g': 43},
    # Incomplete row, never offered as a match
    {'name': 'Quinoa, uncooked', 'calories_per_100g': 368,
     'protein_g_per_100g': None, 'carbs_g_per_100g': 64.2, 'fat_g_per_100g': 6.1, 'sodium_mg_per_100g': 5},
]


@pytest.fixture
def reference_rows():
    return [dict(row) for row in REFERENCE_ROWS]


@pytest.fixture
def repository(reference_rows):
    from services import InMemoryReferenceRepository
    return InMemoryReferenceRepository(reference_rows)


@pytest.fixture
def flask_app():
    """App bound to a fresh in-memory database."""
    from app import app
    from models import db

    # The USDA client is cached per app; start every test without one
    app.extensions.pop('usda', None)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()
    app.extensions.pop('usda', None)


@pytest.fixture
def seeded_app(flask_app, reference_rows):
    from models import db, Ingredient

    for row in reference_rows:
        db.session.add(Ingredient(**row))
    db.session.commit()
    return flask_app


@pytest.fixture
def client(seeded_app):
    return seeded_app.test_client()
