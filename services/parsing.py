"""
Parsing Service

Functions for reading free-form quantity text from recipe ingredient lines.
"""

import re

from constants import DEFAULT_UNIT

# Leading decimal number, optionally followed by a unit word ("200g", "1.5 cups")
QUANTITY_PATTERN = re.compile(r'^\s*(-?\d+(?:\.\d+)?)\s*([A-Za-z]+)?')


def parse_quantity(text):
    """
    Parse quantity text like '200', '1.5 cups' or '200g'.

    Returns (quantity, unit_token) where unit_token is None if no unit word
    follows the number. Returns (None, None) if the text does not start
    with a number ('a pinch', 'to taste', '').
    """
    if text is None:
        return None, None

    match = QUANTITY_PATTERN.match(str(text))
    if not match:
        return None, None

    return float(match.group(1)), match.group(2)


def resolve_unit(explicit_unit, parsed_unit):
    """Pick the effective unit: explicit field, then parsed token, then 'piece'."""
    return explicit_unit or parsed_unit or DEFAULT_UNIT
