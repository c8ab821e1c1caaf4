"""
Smart Nutrition Service

Calculates total and per-serving nutrition for a list of recipe ingredients:
each line is matched against the nutrition reference table, converted to
grams, and scaled from per-100g macros to an absolute amount.
"""

import logging

from constants import MIN_MATCH_CONFIDENCE
from .conversion import to_grams
from .matching import IngredientMatcher
from .parsing import parse_quantity, resolve_unit
from .types import IngredientLine, NutritionMacros, ResolvedIngredient, SmartNutritionResult

logger = logging.getLogger(__name__)


class NutritionCalculator:
    """
    Aggregates nutrition over recipe ingredient lines.

    Args:
        matcher: IngredientMatcher used to resolve ingredient names
        min_confidence: Matches below this score are reported as unmatched
    """

    def __init__(self, matcher, min_confidence=MIN_MATCH_CONFIDENCE):
        self.matcher = matcher
        self.min_confidence = min_confidence

    def resolve_line(self, line):
        """Resolve one line to a ResolvedIngredient, or None if it can't be matched."""
        quantity, parsed_unit = parse_quantity(line.quantity)
        if quantity is None:
            logger.debug('Unparseable quantity %r for %r', line.quantity, line.item)
            return None

        unit = resolve_unit(line.unit, parsed_unit)

        match = self.matcher.find_match(line.item)
        if match is None or match.similarity < self.min_confidence:
            return None

        grams_used = to_grams(quantity, unit, line.item)
        return ResolvedIngredient(
            input_name=line.item,
            matched_name=match.reference_name,
            confidence=match.similarity,
            quantity=quantity,
            unit=unit,
            grams_used=grams_used,
            nutrition=match.macros_per_100g.scaled(grams_used / 100),
        )

    def calculate(self, lines, servings=2):
        """
        Calculate nutrition for a recipe.

        Lines are processed in order. Each line ends up either in the
        breakdown or in the unmatched list. Totals are the sum of the
        already-rounded per-line values, rounded again to one decimal.
        A servings value of 0 yields inf/nan per-serving values.

        Args:
            lines: Iterable of IngredientLine (or dicts with item/quantity/unit)
            servings: Number of servings to divide totals by

        Returns:
            SmartNutritionResult
        """
        totals = NutritionMacros()
        breakdown = []
        unmatched = []

        for line in lines:
            if not isinstance(line, IngredientLine):
                line = IngredientLine.from_mapping(line)

            resolved = self.resolve_line(line)
            if resolved is None:
                unmatched.append(line.item)
                continue

            totals.add(resolved.nutrition)
            breakdown.append(resolved)

        total_nutrition = totals.rounded()
        logger.info('Nutrition calculated: %d matched, %d unmatched, %s kcal total',
                    len(breakdown), len(unmatched), total_nutrition.calories)

        return SmartNutritionResult(
            total_nutrition=total_nutrition,
            per_serving=total_nutrition.per_serving(servings),
            ingredient_breakdown=breakdown,
            unmatched_ingredients=unmatched,
        )


def calculate_smart_nutrition(ingredients, servings=2, repository=None, config=None):
    """
    Calculate smart nutrition for recipe ingredients.

    Args:
        ingredients: List of {'item', 'quantity', 'unit'?} dicts or IngredientLine
        servings: Number of servings (default 2)
        repository: ReferenceRepository to search; defaults to the app database
        config: Optional MatchingConfig

    Returns:
        SmartNutritionResult
    """
    if repository is None:
        # Needs an active Flask app context
        from models import db
        from .repository import SQLAlchemyReferenceRepository
        repository = SQLAlchemyReferenceRepository(db.session)

    calculator = NutritionCalculator(IngredientMatcher(repository, config))
    return calculator.calculate(ingredients, servings)
