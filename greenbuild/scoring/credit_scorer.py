"""
Credit Scorer: three material credits and the certification tier.

Modeled loosely on LEED v4.1 Materials & Resources:
  1. EPD credit         : absolute count of materials with an EPD
  2. Regional sourcing  : cost share of locally sourced materials
  3. Recycled content   : cost share weighted post + 0.5 * pre consumer

DECISION: the EPD credit counts items while the other two are cost
weighted. Kept as-is until product decides otherwise.
"""

from .base import BaseScorer

# (threshold, points) pairs, evaluated highest first
EPD_THRESHOLDS = [(20, 2), (10, 1)]
LOCAL_THRESHOLDS = [(30.0, 2), (15.0, 1)]
RECYCLED_THRESHOLDS = [(20.0, 2), (10.0, 1)]

CERT_LEVELS = [
    (5, "Platinum"),
    (4, "Gold"),
    (3, "Silver"),
    (1, "Certified"),
]
NO_CERTIFICATION = "No Certification"


def points_for(value: float, thresholds: list) -> int:
    """Points earned for a value against (threshold, points) pairs."""
    for threshold, points in thresholds:
        if value >= threshold:
            return points
    return 0


def cert_level_for(total_points: int) -> str:
    for minimum, level in CERT_LEVELS:
        if total_points >= minimum:
            return level
    return NO_CERTIFICATION


class CreditScorer(BaseScorer):

    def calculate(self, materials) -> dict:
        materials = list(materials)
        total_cost = sum(self.number(m, "cost") for m in materials)

        # 1. EPD credit
        epd_count = sum(1 for m in materials if self.flag(m, "has_epd"))
        epd_points = points_for(epd_count, EPD_THRESHOLDS)

        # 2. Regional sourcing
        local_value = sum(
            self.number(m, "cost") for m in materials
            if self.flag(m, "is_locally_sourced")
        )
        local_percentage = self.percentage(local_value, total_cost)
        local_points = points_for(local_percentage, LOCAL_THRESHOLDS)

        # 3. Recycled content
        recycled_value = sum(
            self.number(m, "cost") * self.weighted_recycled_fraction(m)
            for m in materials
        )
        recycled_percentage = self.percentage(recycled_value, total_cost)
        recycled_points = points_for(recycled_percentage, RECYCLED_THRESHOLDS)

        total_points = epd_points + local_points + recycled_points

        return {
            "total_cost": total_cost,
            "epd_count": epd_count,
            "epd_points": epd_points,
            "local_percentage": local_percentage,
            "local_points": local_points,
            "recycled_percentage": recycled_percentage,
            "recycled_points": recycled_points,
            "total_points": total_points,
            "cert_level": cert_level_for(total_points),
        }
