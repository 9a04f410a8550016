"""
Category Aggregator: embodied carbon bucketed by material category.

Buckets appear in the order their category is first seen. Categories with
no materials get no bucket.
"""

from .base import BaseScorer, round2

UNCATEGORIZED = "Uncategorized"


class CategoryAggregator(BaseScorer):

    def calculate(self, materials) -> dict:
        buckets: dict[str, float] = {}  # insertion order = first encounter
        for m in materials:
            category = self.category_label(m)
            buckets[category] = buckets.get(category, 0.0) + self.material_carbon(m)

        return {
            "categories": [
                {"category": category, "value": round2(value)}
                for category, value in buckets.items()
            ],
        }

    def category_label(self, material) -> str:
        category = self.field(material, "category")
        # str-valued enums carry the raw value
        category = getattr(category, "value", category)
        if category is None or not str(category).strip():
            return UNCATEGORIZED
        return str(category)
