"""
Input Sanitization Module

Cleans and validates JSON payloads before they reach the nutrition engine.
Ingredient names are not HTML-escaped: escaping would change the words the
matcher sees ("mac & cheese" -> "mac &amp; cheese").
"""

import math
import re

from constants import MAX_LENGTHS


class PayloadError(Exception):
    """Raised when a request payload fails validation."""
    pass


def sanitize_text(text, max_length=10000):
    """
    Clean free text for matching.

    Removes control characters, collapses whitespace and truncates.

    Args:
        text: The text to clean (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Cleaned string ('' for None)
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters and null bytes
    text = re.sub(r'[\x00-\x1f\x7f-\x9f]', ' ', text)

    # Collapse multiple spaces
    text = re.sub(r'\s+', ' ', text).strip()

    # Truncate if too long
    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text


def sanitize_ingredient_line(entry, index=0):
    """
    Validate and clean one ingredient entry from a request.

    Args:
        entry: Dict with 'item', 'quantity' and optional 'unit'
        index: Position in the request list (for error messages)

    Returns:
        Dict with cleaned 'item', 'quantity' and 'unit' (None if absent)

    Raises:
        PayloadError: If the entry is not an object or has no item name
    """
    if not isinstance(entry, dict):
        raise PayloadError(f"ingredients[{index}] must be an object")

    item = sanitize_text(entry.get('item'), max_length=MAX_LENGTHS['ingredient_item'])
    if not item:
        raise PayloadError(f"ingredients[{index}].item is required")

    # Quantity stays free-form; unparseable quantities are reported as unmatched
    quantity = sanitize_text(entry.get('quantity'), max_length=MAX_LENGTHS['ingredient_quantity'])

    unit = entry.get('unit')
    if unit is not None:
        unit = sanitize_text(unit, max_length=MAX_LENGTHS['ingredient_unit'])

    return {'item': item, 'quantity': quantity, 'unit': unit}


def parse_servings(value, default):
    """
    Validate the servings value of a request.

    Any number is accepted, including 0 (per-serving values become inf/nan).

    Raises:
        PayloadError: If servings is not a finite number
    """
    if value is None:
        return default
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PayloadError('servings must be a number')
    if not math.isfinite(value):
        raise PayloadError('servings must be a finite number')
    return value


def parse_nutrition_payload(payload, max_ingredients, default_servings):
    """
    Validate a nutrition calculation request body.

    Args:
        payload: Decoded JSON body
        max_ingredients: Maximum number of ingredient lines
        default_servings: Servings used when the body has none

    Returns:
        (ingredients, servings) tuple

    Raises:
        PayloadError: If the body is malformed
    """
    if not isinstance(payload, dict):
        raise PayloadError('Request body must be a JSON object')

    ingredients = payload.get('ingredients')
    if not isinstance(ingredients, list):
        raise PayloadError('ingredients must be a list')
    if len(ingredients) > max_ingredients:
        raise PayloadError(f"Too many ingredients (max {max_ingredients})")

    lines = [sanitize_ingredient_line(entry, i) for i, entry in enumerate(ingredients)]
    servings = parse_servings(payload.get('servings'), default_servings)
    return lines, servings
