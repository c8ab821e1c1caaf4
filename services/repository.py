"""
Nutrition Reference Repository

Read-only lookup over the nutrition reference table. The matching engine only
needs one operation: find up to N rows whose name contains a fragment
(case-insensitive) and whose five macro fields are all present.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from .types import ReferenceIngredient

logger = logging.getLogger(__name__)


class ReferenceRepository:
    """Interface for nutrition reference backends."""

    def search(self, fragment, limit):
        """Return up to `limit` complete ReferenceIngredient rows whose name contains `fragment`."""
        raise NotImplementedError


class SQLAlchemyReferenceRepository(ReferenceRepository):
    """Reference rows from the `ingredients` table via a SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    def search(self, fragment, limit):
        # models imports services.types, so import lazily
        from models import Ingredient

        logger.debug('Reference search %r (limit %d)', fragment, limit)
        try:
            rows = (
                self.session.query(Ingredient)
                .filter(Ingredient.name.icontains(fragment, autoescape=True))
                .filter(
                    Ingredient.calories_per_100g.isnot(None),
                    Ingredient.protein_g_per_100g.isnot(None),
                    Ingredient.carbs_g_per_100g.isnot(None),
                    Ingredient.fat_g_per_100g.isnot(None),
                    Ingredient.sodium_mg_per_100g.isnot(None),
                )
                .order_by(Ingredient.id)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError:
            # A failed statement leaves the transaction aborted on some backends
            self.session.rollback()
            raise
        return [row.to_reference() for row in rows]


class InMemoryReferenceRepository(ReferenceRepository):
    """Reference rows held in a list, searched in insertion order. Used for fixtures and tests."""

    def __init__(self, rows=None):
        self.rows = []
        for row in rows or []:
            self.add(row)

    def add(self, row):
        if not isinstance(row, ReferenceIngredient):
            row = ReferenceIngredient.from_mapping(row)
        self.rows.append(row)
        return row

    def search(self, fragment, limit):
        logger.debug('Reference search %r (limit %d)', fragment, limit)
        needle = fragment.lower()
        found = []
        for row in self.rows:
            if len(found) >= limit:
                break
            if row.has_complete_macros() and needle in row.name.lower():
                found.append(row)
        return found
