"""
Validation Constants

Limits for validating API input before it reaches the nutrition engine.
"""

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_item': 200,
    'ingredient_quantity': 50,
    'ingredient_unit': 30,
    'search_query': 100,
}

# Maximum ingredient lines accepted in one calculation request
MAX_INGREDIENTS = 100

# Bounds for the ingredient search endpoint
DEFAULT_SEARCH_LIMIT = 15
MAX_SEARCH_LIMIT = 50

# Default page size for direct USDA searches
DEFAULT_USDA_SEARCH_LIMIT = 10
