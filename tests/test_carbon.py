"""
Carbon Estimator + Category Aggregator tests.

Both share the per-material formula:
    weight * embodied_carbon + (weight / 1000) * distance * 0.1
"""

import pytest

from greenbuild.schemas import Material
from greenbuild.scoring import CarbonEstimator, CategoryAggregator, build_dashboard, net_zero_gauge
from greenbuild.scoring.base import round2


def _material(id, category="structural", weight=0, embodied_carbon=0, transport_distance=0, **extra):
    return Material(
        id=id, name=f"Material {id}", category=category, weight=weight,
        embodied_carbon=embodied_carbon, transport_distance=transport_distance, **extra,
    )


def _sample_materials():
    return [
        _material("a", "structural", weight=1200, embodied_carbon=0.15, transport_distance=40),
        _material("b", "enclosure", weight=350.5, embodied_carbon=1.85, transport_distance=1200),
        _material("c", "structural", weight=80, embodied_carbon=8.2, transport_distance=7000),
        _material("d", "finishes", weight=15.25, embodied_carbon=3.3, transport_distance=260),
        _material("e", None, weight=42, embodied_carbon=0.9, transport_distance=15),
    ]


# ============================================================
# Carbon Estimator
# ============================================================

def test_single_material_with_transport():
    """100 kg at 2 kgCO2e/kg, 500 km → 200 + 5 = 205."""
    result = CarbonEstimator().calculate([
        _material("a", weight=100, embodied_carbon=2, transport_distance=500),
    ])
    assert result["total_embodied_carbon"] == 205.00
    assert result["carbon_intensity"] == 205.00
    assert result["is_below_national_avg"] is True


def test_empty_collection_has_zero_intensity():
    result = CarbonEstimator().calculate([])
    assert result["total_embodied_carbon"] == 0
    assert result["carbon_intensity"] == 0
    assert result["is_below_national_avg"] is True
    assert result["per_item"] == []


def test_intensity_is_average_per_item():
    result = CarbonEstimator().calculate([
        _material("a", weight=100, embodied_carbon=4),
        _material("b", weight=100, embodied_carbon=8),
    ])
    assert result["total_embodied_carbon"] == 1200.00
    assert result["carbon_intensity"] == 600.00
    assert result["is_below_national_avg"] is False


def test_national_average_boundary_is_strict():
    """Exactly 500 is not below the national average."""
    result = CarbonEstimator().calculate([_material("a", weight=250, embodied_carbon=2)])
    assert result["carbon_intensity"] == 500.00
    assert result["is_below_national_avg"] is False


def test_totals_round_to_two_decimals():
    result = CarbonEstimator().calculate([
        _material("a", weight=1, embodied_carbon=0.333333),
    ])
    assert result["total_embodied_carbon"] == 0.33


def test_carbon_is_additive_over_disjoint_sets():
    materials = _sample_materials()
    first, second = materials[:2], materials[2:]
    estimator = CarbonEstimator()
    whole = estimator.calculate(materials)["total_embodied_carbon"]
    parts = (
        estimator.calculate(first)["total_embodied_carbon"]
        + estimator.calculate(second)["total_embodied_carbon"]
    )
    assert whole == pytest.approx(parts, abs=0.01)


def test_per_item_breakdown_keeps_input_order():
    result = CarbonEstimator().calculate(_sample_materials())
    assert [item["id"] for item in result["per_item"]] == ["a", "b", "c", "d", "e"]
    # 80 * 8.2 + 0.08 * 7000 * 0.1
    assert result["per_item"][2]["carbon"] == pytest.approx(712.0)


def test_missing_numbers_count_as_zero():
    rows = [{"weight": "abc", "embodied_carbon": 5}, {"weight": 10, "embodied_carbon": None}]
    result = CarbonEstimator().calculate(rows)
    assert result["total_embodied_carbon"] == 0


# ============================================================
# Category Aggregator
# ============================================================

def test_categories_in_first_encounter_order():
    result = CategoryAggregator().calculate(_sample_materials())["categories"]
    assert [c["category"] for c in result] == ["structural", "enclosure", "finishes", "Uncategorized"]


def test_categories_are_sparse():
    """Mechanical has no members, so it gets no bucket."""
    result = CategoryAggregator().calculate(_sample_materials())["categories"]
    assert "mechanical" not in {c["category"] for c in result}


def test_category_values_sum_same_category():
    result = CategoryAggregator().calculate([
        _material("a", "structural", weight=100, embodied_carbon=2, transport_distance=500),
        _material("b", "structural", weight=10, embodied_carbon=1),
    ])["categories"]
    assert result == [{"category": "structural", "value": 215.0}]


def test_empty_category_string_is_uncategorized():
    rows = [
        {"category": "", "weight": 1, "embodied_carbon": 1},
        {"category": None, "weight": 1, "embodied_carbon": 1},
        {"weight": 1, "embodied_carbon": 1},
    ]
    result = CategoryAggregator().calculate(rows)["categories"]
    assert result == [{"category": "Uncategorized", "value": 3.0}]


def test_category_buckets_sum_to_total_carbon():
    materials = _sample_materials()
    buckets = CategoryAggregator().calculate(materials)["categories"]
    total = CarbonEstimator().calculate(materials)["total_embodied_carbon"]
    assert sum(b["value"] for b in buckets) == pytest.approx(total, abs=0.01 * len(buckets))


def test_empty_collection_has_no_buckets():
    assert CategoryAggregator().calculate([])["categories"] == []


# ============================================================
# Dashboard summary + net-zero gauge
# ============================================================

def test_gauge_caps_at_one_hundred_percent():
    gauge = net_zero_gauge(75000, target=50000)
    assert gauge["percentage"] == 100.0
    assert gauge["remaining"] == 0.0


def test_gauge_partial_progress():
    gauge = net_zero_gauge(12500, target=50000)
    assert gauge["percentage"] == 25.0
    assert gauge["remaining"] == 37500.0


def test_dashboard_combines_all_scorers():
    materials = _sample_materials()
    summary = build_dashboard(materials, target=50000)
    assert summary["material_count"] == 5
    assert summary["credits"]["cert_level"] == "No Certification"
    assert summary["carbon"] == CarbonEstimator().calculate(materials)
    assert summary["categories"] == CategoryAggregator().calculate(materials)["categories"]
    assert summary["gauge"]["total_carbon"] == summary["carbon"]["total_embodied_carbon"]


# ============================================================
# Rounding + per-item recycled content
# ============================================================

def test_half_cent_ties_round_up():
    """9 kg at 0.125 kgCO2e/kg is exactly 1.125, which rounds to 1.13."""
    materials = [_material("a", "finishes", weight=9, embodied_carbon=0.125)]
    carbon = CarbonEstimator().calculate(materials)
    assert carbon["total_embodied_carbon"] == 1.13
    assert carbon["carbon_intensity"] == 1.13
    assert carbon["per_item"][0]["carbon"] == 1.13
    assert CategoryAggregator().calculate(materials)["categories"] == [
        {"category": "finishes", "value": 1.13},
    ]


def test_round2_helper():
    assert round2(2.675) == 2.67  # binary value sits just below the tie
    assert round2(0.125) == 0.13
    assert round2(-0.125) == -0.13
    assert round2(205.0) == 205.0


def test_gauge_remaining_rounds_ties_up():
    gauge = net_zero_gauge(1.125, target=100)
    assert gauge["remaining"] == 98.88  # 98.875


def test_per_item_weighted_recycled_percentage():
    """post + 0.5 * pre, per material."""
    result = CarbonEstimator().calculate([
        _material("a", recycled_content_post=30, recycled_content_pre=20),
        _material("b"),
    ])
    assert result["per_item"][0]["recycled_percentage"] == 40.0
    assert result["per_item"][1]["recycled_percentage"] == 0.0
