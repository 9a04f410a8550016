"""
Carbon Estimator: total and per-item embodied carbon.

Compares the average per-item intensity against a fixed national
reference of 500 kg CO2e.
"""

from .base import BaseScorer, round2

NATIONAL_AVG_INTENSITY = 500.0


class CarbonEstimator(BaseScorer):

    def calculate(self, materials) -> dict:
        materials = list(materials)

        per_item = []
        total = 0.0
        for m in materials:
            carbon = self.material_carbon(m)
            total += carbon
            per_item.append({
                "id": self.field(m, "id"),
                "name": self.field(m, "name"),
                "carbon": round2(carbon),
                "recycled_percentage": round2(self.weighted_recycled_fraction(m) * 100.0),
            })

        intensity = total / len(materials) if materials else 0.0
        total_embodied_carbon = round2(total)
        carbon_intensity = round2(intensity)

        return {
            "total_embodied_carbon": total_embodied_carbon,
            "carbon_intensity": carbon_intensity,
            "is_below_national_avg": carbon_intensity < NATIONAL_AVG_INTENSITY,
            "per_item": per_item,
        }
