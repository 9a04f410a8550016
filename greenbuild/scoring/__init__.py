"""
Scoring engine: credits, embodied carbon, category breakdown.

Pure Python math over the in-memory material list. No I/O, no database.
Every scorer takes the full ordered collection and returns a plain dict.
"""

from .credit_scorer import CreditScorer
from .carbon_estimator import CarbonEstimator
from .category_aggregator import CategoryAggregator
from .dashboard import build_dashboard, net_zero_gauge

__all__ = [
    "CreditScorer",
    "CarbonEstimator",
    "CategoryAggregator",
    "build_dashboard",
    "net_zero_gauge",
]
