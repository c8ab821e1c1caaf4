"""
Constants Package

Static tables for unit conversion, ingredient matching and validation.
"""

from .units import (
    MASS_TO_G,
    CUP_DENSITY_RULES,
    DEFAULT_CUP_G,
    MILLILITER_UNITS,
    LITER_UNITS,
    OIL_DENSITY,
    PIECE_WEIGHTS,
    DEFAULT_PIECE_G,
    FIXED_UNIT_G,
    DEFAULT_UNIT_G,
    DEFAULT_UNIT,
)

from .ingredients import (
    INGREDIENT_SYNONYMS,
    IMPORTANT_WORDS,
    IMPORTANT_WORD_BONUS,
    WRONG_TYPE_RULES,
    MIN_WORD_LENGTH,
    SYNONYM_SEARCH_LIMIT,
    FUZZY_SEARCH_LIMIT,
    SYNONYM_CONFIDENCE,
    MIN_CANDIDATE_SIMILARITY,
    MIN_MATCH_CONFIDENCE,
)

from .nutrition import (
    MACRO_FIELDS,
    REFERENCE_COLUMNS,
    USDA_NUTRIENT_COLUMNS,
    USDA_DATA_TYPES,
    USDA_FALLBACK_SYNC_COUNT,
)

from .validation import (
    MAX_LENGTHS,
    MAX_INGREDIENTS,
    DEFAULT_SEARCH_LIMIT,
    MAX_SEARCH_LIMIT,
    DEFAULT_USDA_SEARCH_LIMIT,
)
