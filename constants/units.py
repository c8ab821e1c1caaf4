"""
Unit Constants and Conversion Tables

Contains the gram factors and density heuristics used to turn recipe
quantities into grams for nutrition calculation.
"""

# Mass units (lowercase input -> grams per unit)
MASS_TO_G = {
    'g': 1, 'gram': 1, 'grams': 1,
    'kg': 1000, 'kilogram': 1000, 'kilograms': 1000,
    'oz': 28.35, 'ounce': 28.35, 'ounces': 28.35,
    'lb': 453.59, 'lbs': 453.59, 'pound': 453.59, 'pounds': 453.59,
}

# Grams per cup by ingredient keyword group (checked in order, first hit wins)
CUP_DENSITY_RULES = [
    # Liquids (close to water density)
    (('milk', 'water', 'broth', 'stock', 'juice', 'wine'), 240),
    # Oils and fats are lighter than water
    (('oil', 'butter'), 220),
    # Flours and powders
    (('flour', 'powder', 'sugar', 'salt'), 200),
    # Rice and grains
    (('rice', 'quinoa', 'grain', 'pasta'), 185),
    # Chopped/diced vegetables
    (('onion', 'carrot', 'pepper', 'vegetable'), 150),
]
DEFAULT_CUP_G = 240

# Metric volume spellings
MILLILITER_UNITS = {'ml', 'milliliter', 'milliliters', 'millilitre', 'millilitres'}
LITER_UNITS = {'l', 'liter', 'liters', 'litre', 'litres'}

# Oil density (g/ml), everything else is treated like water
OIL_DENSITY = 0.92

# Average weight of one whole item in grams (keyword -> grams, checked in order)
PIECE_WEIGHTS = [
    ('apple', 180),
    ('banana', 120),
    ('orange', 150),
    ('tomato', 120),
    ('onion', 110),
    ('potato', 200),
    ('egg', 50),
    ('avocado', 200),
]
DEFAULT_PIECE_G = 100

# Small kitchen units with a fixed gram weight
FIXED_UNIT_G = {
    'tsp': 5, 'teaspoon': 5, 'teaspoons': 5,
    'tbsp': 15, 'tablespoon': 15, 'tablespoons': 15,
    'item': 100, 'items': 100,
}

# Fallback for units we don't recognize
DEFAULT_UNIT_G = 100

# Unit assumed when a line gives neither a unit nor a unit token
DEFAULT_UNIT = 'piece'
