"""
Unit Conversion Service

Converts recipe quantities to grams using ingredient-aware density rules.
The rules are kitchen heuristics, not a physical model: unusual ingredients
may convert imprecisely, but conversion never fails.
"""

from constants import (
    MASS_TO_G, CUP_DENSITY_RULES, DEFAULT_CUP_G, MILLILITER_UNITS, LITER_UNITS,
    OIL_DENSITY, PIECE_WEIGHTS, DEFAULT_PIECE_G, FIXED_UNIT_G, DEFAULT_UNIT_G,
)


def _is_milliliters(unit):
    return 'ml' in unit or unit in MILLILITER_UNITS


def _is_liters(unit):
    return unit in LITER_UNITS


def _cup_to_grams(quantity, name_lower):
    for keywords, grams in CUP_DENSITY_RULES:
        if any(keyword in name_lower for keyword in keywords):
            return quantity * grams
    return quantity * DEFAULT_CUP_G


def _piece_to_grams(quantity, name_lower):
    for keyword, grams in PIECE_WEIGHTS:
        if keyword in name_lower:
            return quantity * grams
    return quantity * DEFAULT_PIECE_G


def to_grams(quantity, unit, ingredient_name):
    """
    Convert a quantity in any kitchen unit to grams.

    Precedence (first match wins):
    1. Mass units (g, kg, oz, lb and spelled variants) use a fixed factor
    2. Cups use a per-ingredient density (liquids, oils, flours, grains, vegetables)
    3. Millilitres/litres, with oil at 0.92 g/ml
    4. Whole/piece/empty units use an average item weight
    5. Teaspoons/tablespoons/items use a fixed weight, anything else is 100g

    Args:
        quantity: Numeric amount in the given unit
        unit: Unit string as written in the recipe (case-insensitive)
        ingredient_name: Ingredient name, used for density keywords

    Returns:
        Weight in grams
    """
    unit_lower = (unit or '').lower().strip()
    name_lower = (ingredient_name or '').lower()

    if unit_lower in MASS_TO_G:
        return quantity * MASS_TO_G[unit_lower]

    if 'cup' in unit_lower:
        return _cup_to_grams(quantity, name_lower)

    if _is_milliliters(unit_lower) or _is_liters(unit_lower):
        ml = quantity * 1000 if _is_liters(unit_lower) else quantity
        if 'oil' in name_lower:
            return ml * OIL_DENSITY
        return ml * 1.0

    if 'whole' in unit_lower or 'piece' in unit_lower or unit_lower == '':
        return _piece_to_grams(quantity, name_lower)

    return quantity * FIXED_UNIT_G.get(unit_lower, DEFAULT_UNIT_G)
