# Utility modules for the nutrition service
from .sanitizer import (
    PayloadError, sanitize_text, sanitize_ingredient_line,
    parse_servings, parse_nutrition_payload
)
