"""
Nutrition Data Types

Value objects passed between the matching, conversion and aggregation
services. All of them are created per calculation and never shared.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from constants import MACRO_FIELDS, REFERENCE_COLUMNS


def round1(value):
    """Round half-up to one decimal place. Non-finite values pass through."""
    scaled = value * 10 + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / 10


def ieee_divide(numerator, denominator):
    """Float division that yields inf/nan for a zero denominator instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass
class NutritionMacros:
    """Five key macros, either per 100g or an absolute amount."""
    calories: float = 0.0
    carbs_g: float = 0.0
    protein_g: float = 0.0
    fat_g: float = 0.0
    sodium_mg: float = 0.0

    def scaled(self, factor):
        """Multiply every macro by factor, rounding each to one decimal."""
        return NutritionMacros(**{
            name: round1(getattr(self, name) * factor) for name in MACRO_FIELDS
        })

    def add(self, other):
        for name in MACRO_FIELDS:
            setattr(self, name, getattr(self, name) + getattr(other, name))

    def rounded(self):
        return NutritionMacros(**{name: round1(getattr(self, name)) for name in MACRO_FIELDS})

    def per_serving(self, servings):
        return NutritionMacros(**{
            name: round1(ieee_divide(getattr(self, name), servings)) for name in MACRO_FIELDS
        })

    def to_dict(self):
        return {name: getattr(self, name) for name in MACRO_FIELDS}


@dataclass(frozen=True)
class IngredientLine:
    """One recipe ingredient as supplied by the caller."""
    item: str
    quantity: str
    unit: Optional[str] = None

    @classmethod
    def from_mapping(cls, data):
        if not isinstance(data, dict):
            # Bare strings have no quantity and end up unmatched
            return cls(item='' if data is None else str(data), quantity='')
        quantity = data.get('quantity')
        unit = data.get('unit')
        return cls(
            item=str(data.get('item') or ''),
            quantity='' if quantity is None else str(quantity),
            unit=None if unit is None else str(unit),
        )


@dataclass
class ReferenceIngredient:
    """Row from the nutrition reference table. Any field may be missing."""
    name: Optional[str]
    calories_per_100g: Optional[float] = None
    protein_g_per_100g: Optional[float] = None
    carbs_g_per_100g: Optional[float] = None
    fat_g_per_100g: Optional[float] = None
    sodium_mg_per_100g: Optional[float] = None

    @classmethod
    def from_mapping(cls, data):
        return cls(
            name=data.get('name'),
            **{column: data.get(column) for column in REFERENCE_COLUMNS.values()}
        )

    def has_complete_macros(self):
        """A row is only usable when the name and all five macros are present."""
        if self.name is None:
            return False
        return all(getattr(self, column) is not None for column in REFERENCE_COLUMNS.values())

    def macros(self):
        return NutritionMacros(**{
            name: getattr(self, column) for name, column in REFERENCE_COLUMNS.items()
        })

    def to_dict(self):
        data = {'name': self.name}
        for column in REFERENCE_COLUMNS.values():
            data[column] = getattr(self, column)
        return data


@dataclass
class MatchCandidate:
    """A scored reference row considered for one ingredient name."""
    reference_name: str
    macros_per_100g: NutritionMacros
    match_type: str  # 'synonym' or 'fuzzy'
    similarity: float


@dataclass
class ResolvedIngredient:
    """Breakdown row: one matched ingredient and its absolute nutrition."""
    input_name: str
    matched_name: str
    confidence: float
    quantity: float
    unit: str
    grams_used: float
    nutrition: NutritionMacros

    def to_dict(self):
        return {
            'inputName': self.input_name,
            'matchedName': self.matched_name,
            'confidence': self.confidence,
            'quantity': self.quantity,
            'unit': self.unit,
            'gramsUsed': self.grams_used,
            'nutrition': self.nutrition.to_dict(),
        }


@dataclass
class SmartNutritionResult:
    total_nutrition: NutritionMacros
    per_serving: NutritionMacros
    ingredient_breakdown: List[ResolvedIngredient] = field(default_factory=list)
    unmatched_ingredients: List[str] = field(default_factory=list)

    def to_dict(self):
        return {
            'totalNutrition': self.total_nutrition.to_dict(),
            'perServing': self.per_serving.to_dict(),
            'ingredientBreakdown': [row.to_dict() for row in self.ingredient_breakdown],
            'unmatchedIngredients': list(self.unmatched_ingredients),
        }
