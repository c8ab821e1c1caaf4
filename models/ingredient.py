"""
Ingredient Model

Nutrition reference rows: one ingredient name with its macros per 100g,
optionally linked to a USDA FoodData Central record.
"""

from services.types import ReferenceIngredient

from .base import db


class Ingredient(db.Model):
    """
    Nutrition reference ingredient.

    Macro columns are nullable: rows imported without complete nutrition
    data stay in the table but are never offered as a match.
    """
    __tablename__ = 'ingredients'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    category = db.Column(db.String(50), nullable=True)

    # USDA FoodData Central id, set once the row has been synced
    fdc_id = db.Column(db.Integer, nullable=True, index=True)

    # Macros per 100g
    calories_per_100g = db.Column(db.Float, nullable=True)
    protein_g_per_100g = db.Column(db.Float, nullable=True)
    carbs_g_per_100g = db.Column(db.Float, nullable=True)
    fat_g_per_100g = db.Column(db.Float, nullable=True)
    sodium_mg_per_100g = db.Column(db.Float, nullable=True)

    usda_sync_date = db.Column(db.DateTime, nullable=True)

    def to_reference(self):
        return ReferenceIngredient(
            name=self.name,
            calories_per_100g=self.calories_per_100g,
            protein_g_per_100g=self.protein_g_per_100g,
            carbs_g_per_100g=self.carbs_g_per_100g,
            fat_g_per_100g=self.fat_g_per_100g,
            sodium_mg_per_100g=self.sodium_mg_per_100g,
        )

    def to_dict(self):
        data = self.to_reference().to_dict()
        data.update({
            'id': self.id,
            'category': self.category,
            'fdc_id': self.fdc_id,
            'usda_sync_date': self.usda_sync_date.isoformat() if self.usda_sync_date else None,
        })
        return data
