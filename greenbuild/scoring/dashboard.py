"""
Dashboard summary: runs every scorer once over the same collection.

The regional-sourcing panel reads its numbers from the credit score here
rather than recomputing the local share on its own.
"""

from ..config import settings
from .base import round2
from .credit_scorer import CreditScorer
from .carbon_estimator import CarbonEstimator
from .category_aggregator import CategoryAggregator


def net_zero_gauge(total_carbon: float, target: float = None) -> dict:
    """Progress of the project's total carbon toward the net-zero budget."""
    if target is None:
        target = settings.NET_ZERO_TARGET_KG
    percentage = min((total_carbon / target) * 100.0, 100.0) if target > 0 else 100.0
    return {
        "target": target,
        "total_carbon": total_carbon,
        "percentage": round2(percentage),
        "remaining": round2(max(target - total_carbon, 0.0)),
    }


def build_dashboard(materials, target: float = None) -> dict:
    materials = list(materials)
    credits = CreditScorer().calculate(materials)
    carbon = CarbonEstimator().calculate(materials)
    categories = CategoryAggregator().calculate(materials)["categories"]

    return {
        "material_count": len(materials),
        "credits": credits,
        "carbon": carbon,
        "categories": categories,
        "gauge": net_zero_gauge(carbon["total_embodied_carbon"], target),
    }
