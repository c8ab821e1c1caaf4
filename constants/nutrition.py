"""
Nutrition Constants

Macro field names and USDA FoodData Central nutrient identifiers.
"""

# Macro fields on a computed nutrition record
MACRO_FIELDS = ('calories', 'carbs_g', 'protein_g', 'fat_g', 'sodium_mg')

# Reference table column for each macro (values are per 100g)
REFERENCE_COLUMNS = {
    'calories': 'calories_per_100g',
    'carbs_g': 'carbs_g_per_100g',
    'protein_g': 'protein_g_per_100g',
    'fat_g': 'fat_g_per_100g',
    'sodium_mg': 'sodium_mg_per_100g',
}

# USDA nutrient ids (current and legacy "number") -> reference column
USDA_NUTRIENT_COLUMNS = {
    1008: 'calories_per_100g', 208: 'calories_per_100g',      # Energy (kcal)
    1003: 'protein_g_per_100g', 203: 'protein_g_per_100g',    # Protein
    1005: 'carbs_g_per_100g', 205: 'carbs_g_per_100g',        # Carbohydrate, by difference
    1004: 'fat_g_per_100g', 204: 'fat_g_per_100g',            # Total lipid (fat)
    1093: 'sodium_mg_per_100g', 307: 'sodium_mg_per_100g',    # Sodium, Na
}

# USDA data types with per-100g nutrient values
USDA_DATA_TYPES = ('Foundation', 'SR Legacy')

# USDA hits synced into the reference table when a local search comes up short
USDA_FALLBACK_SYNC_COUNT = 3
