"""
Services Package

Business logic for the smart nutrition calculation.
"""

from .types import (
    IngredientLine,
    MatchCandidate,
    NutritionMacros,
    ReferenceIngredient,
    ResolvedIngredient,
    SmartNutritionResult,
    ieee_divide,
    round1,
)

from .parsing import (
    parse_quantity,
    resolve_unit,
)

from .conversion import (
    to_grams,
)

from .repository import (
    ReferenceRepository,
    SQLAlchemyReferenceRepository,
    InMemoryReferenceRepository,
)

from .matching import (
    MatchingConfig,
    IngredientMatcher,
    normalize_name,
    score_similarity,
)

from .nutrition import (
    NutritionCalculator,
    calculate_smart_nutrition,
)

from .usda import (
    UsdaClient,
    UsdaError,
    extract_macros,
    sync_ingredient,
    summarize_food,
    search_with_usda_fallback,
)

__all__ = [
    # Types
    'IngredientLine',
    'MatchCandidate',
    'NutritionMacros',
    'ReferenceIngredient',
    'ResolvedIngredient',
    'SmartNutritionResult',
    'ieee_divide',
    'round1',
    # Parsing
    'parse_quantity',
    'resolve_unit',
    # Conversion
    'to_grams',
    # Repository
    'ReferenceRepository',
    'SQLAlchemyReferenceRepository',
    'InMemoryReferenceRepository',
    # Matching
    'MatchingConfig',
    'IngredientMatcher',
    'normalize_name',
    'score_similarity',
    # Nutrition
    'NutritionCalculator',
    'calculate_smart_nutrition',
    # USDA
    'UsdaClient',
    'UsdaError',
    'extract_macros',
    'sync_ingredient',
    'summarize_food',
    'search_with_usda_fallback',
]
