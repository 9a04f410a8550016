"""
Abstract base class for the scorers.

Input: sequence of materials (schemas.Material instances or plain dicts)
Output: dict of derived metrics
"""

import math
from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP

TRANSPORT_FACTOR = 0.1  # kg CO2e per tonne-km
PRE_CONSUMER_WEIGHT = 0.5

_TRUE_STRINGS = {"true", "yes", "y", "on", "1"}


def parse_number(value, default: float = 0.0) -> float:
    """Parse a numeric value from user input. Anything unusable becomes default."""
    if value is None:
        return default
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(str(value).strip())
    except (ValueError, TypeError):
        return default
    if not math.isfinite(number):
        return default
    return number


def round2(value: float) -> float:
    """
    Round to 2 decimals with ties going up (1.125 -> 1.13).

    Decimal(float) is exact, so ties are judged on the stored binary value.
    """
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def parse_flag(value) -> bool:
    """Parse a checkbox-style boolean. Unknown values count as unchecked."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in _TRUE_STRINGS


class BaseScorer(ABC):
    """All scorers inherit from this."""

    @abstractmethod
    def calculate(self, materials) -> dict:
        """Takes the ordered material list, returns the metric dict."""
        pass

    # --- Helper methods for all scorers ---

    def field(self, material, name: str, default=None):
        """Read a field from a schema object or a raw dict row."""
        if isinstance(material, dict):
            return material.get(name, default)
        return getattr(material, name, default)

    def number(self, material, name: str) -> float:
        return parse_number(self.field(material, name))

    def flag(self, material, name: str) -> bool:
        return parse_flag(self.field(material, name))

    def material_carbon(self, material) -> float:
        """
        Embodied carbon for one material, including transport.

        carbon = weight * embodied_carbon + (weight / 1000) * distance * 0.1
        The transport term charges 0.1 kg CO2e per tonne-km.
        """
        weight = self.number(material, "weight")
        embodied = self.number(material, "embodied_carbon")
        distance = self.number(material, "transport_distance")
        return (weight * embodied) + (weight / 1000.0) * distance * TRANSPORT_FACTOR

    def weighted_recycled_fraction(self, material) -> float:
        """(post + 0.5 * pre) / 100: post-consumer counts at full weight."""
        pre = self.number(material, "recycled_content_pre")
        post = self.number(material, "recycled_content_post")
        return (post + PRE_CONSUMER_WEIGHT * pre) / 100.0

    def percentage(self, part: float, whole: float) -> float:
        """part / whole as a percentage, 0 when whole is zero."""
        return (part / whole) * 100.0 if whole > 0 else 0.0
