from __future__ import annotations

import math

import pytest

from bizusecase.engine import UseCaseAnalyzer
from bizusecase.engine.analyzer import (
    CONSIDER_CAREFULLY,
    HIGHLY_RECOMMENDED,
    RECOMMENDED,
    payback_months,
)
from bizusecase.errors import InvalidCostInput

PHASE_NAMES = [
    "Discovery & Planning",
    "Design & Development",
    "Deployment & Training",
    "Monitoring & Optimization",
]


@pytest.mark.parametrize(
    "feasibility, effort",
    [
        ("easy", "2-4 weeks"),
        ("moderate", "1-3 months"),
        ("complex", "3-6 months"),
        ("very-complex", "6+ months"),
    ],
)
def test_estimate_effort(make_use_case, feasibility, effort):
    assert UseCaseAnalyzer.estimate_effort(make_use_case(feasibility=feasibility)) == effort


def test_estimate_effort_unknown(make_use_case):
    uc = make_use_case()
    uc._feasibility = "mystery"
    assert UseCaseAnalyzer.estimate_effort(uc) == "Unknown"


def test_analyze_complexity(make_use_case):
    uc = make_use_case(feasibility="complex", requirements=["r1", "r2", "r3"])
    profile = UseCaseAnalyzer.analyze_complexity(uc)
    assert profile.requirements_count == 3
    assert profile.feasibility == "complex"
    assert profile.estimated_effort == "3-6 months"


def test_roi_doubling_investment(make_use_case):
    result = UseCaseAnalyzer.calculate_roi(make_use_case(), 10000, 20000)
    assert result.roi == "100.00%"
    assert result.payback_period == "6.0 months"
    assert result.recommendation == HIGHLY_RECOMMENDED
    assert result.roi_percent == pytest.approx(100.0)
    assert result.payback_months == pytest.approx(6.0)


def test_roi_exactly_twenty_is_consider_carefully(make_use_case):
    result = UseCaseAnalyzer.calculate_roi(make_use_case(), 75000, 90000)
    assert result.roi == "20.00%"
    assert result.recommendation == CONSIDER_CAREFULLY
    assert result.payback_period == "10.0 months"


def test_roi_exactly_fifty_is_recommended(make_use_case):
    result = UseCaseAnalyzer.calculate_roi(make_use_case(), 10000, 15000)
    assert result.roi == "50.00%"
    assert result.recommendation == RECOMMENDED


@pytest.mark.parametrize(
    "cost, benefit, expected",
    [
        (10000, 15001, HIGHLY_RECOMMENDED),
        (10000, 12001, RECOMMENDED),
        (10000, 8000, CONSIDER_CAREFULLY),
    ],
)
def test_roi_tiers(make_use_case, cost, benefit, expected):
    assert UseCaseAnalyzer.calculate_roi(make_use_case(), cost, benefit).recommendation == expected


def test_roi_loss_is_negative(make_use_case):
    result = UseCaseAnalyzer.calculate_roi(make_use_case(), 50000, 25000)
    assert result.roi == "-50.00%"
    assert result.payback_period == "24.0 months"


def test_demo_figures(make_use_case):
    result = UseCaseAnalyzer.calculate_roi(make_use_case(), 50000, 120000)
    assert result.roi == "140.00%"
    assert result.payback_period == "5.0 months"


@pytest.mark.parametrize("cost", [0, -1000, math.inf, math.nan, "abc", "10000", True, None])
def test_roi_rejects_bad_cost(make_use_case, cost):
    with pytest.raises(InvalidCostInput) as excinfo:
        UseCaseAnalyzer.calculate_roi(make_use_case(), cost, 20000)
    assert excinfo.value.field == "cost"


@pytest.mark.parametrize("benefit", [0, -5000, math.inf, math.nan, "20000", True])
def test_roi_rejects_bad_annual_benefit(make_use_case, benefit):
    with pytest.raises(InvalidCostInput) as excinfo:
        UseCaseAnalyzer.calculate_roi(make_use_case(), 10000, benefit)
    assert excinfo.value.field == "annual_benefit"


def test_roi_huge_figures_stay_finite(make_use_case):
    even = UseCaseAnalyzer.calculate_roi(make_use_case(), 1e308, 1e308)
    assert even.roi == "0.00%"
    assert even.payback_period == "12.0 months"

    lopsided = UseCaseAnalyzer.calculate_roi(make_use_case(), 1e307, 1.7e308)
    assert lopsided.roi == "1600.00%"
    assert lopsided.roi_percent == pytest.approx(1600.0)
    assert lopsided.recommendation == HIGHLY_RECOMMENDED
    assert math.isfinite(lopsided.payback_months)
    assert payback_months(1e308, 1e308) == pytest.approx(12.0)


def test_roi_unrepresentable_result_raises(make_use_case):
    with pytest.raises(InvalidCostInput) as excinfo:
        UseCaseAnalyzer.calculate_roi(make_use_case(), 1e-300, 1e300)
    assert excinfo.value.field == "cost"

    with pytest.raises(InvalidCostInput) as excinfo:
        UseCaseAnalyzer.estimate_payback(1e300, 1e-300)
    assert excinfo.value.field == "annual_benefit"


def test_invalid_cost_input_is_a_value_error(make_use_case):
    with pytest.raises(ValueError):
        UseCaseAnalyzer.calculate_roi(make_use_case(), 0, 0)


def test_estimate_payback():
    assert UseCaseAnalyzer.estimate_payback(10000, 20000) == "6.0 months"
    assert UseCaseAnalyzer.estimate_payback(100000, 30000) == "40.0 months"
    assert payback_months(1000, 12000) == pytest.approx(1.0)
    with pytest.raises(InvalidCostInput):
        UseCaseAnalyzer.estimate_payback(10000, 0)


def test_roadmap_has_four_fixed_phases(make_use_case):
    roadmap = UseCaseAnalyzer.generate_roadmap(make_use_case(feasibility="very-complex"))
    assert [p.name for p in roadmap] == PHASE_NAMES
    assert [p.duration for p in roadmap] == ["2-4 weeks", "6+ months", "2-3 weeks", "Ongoing"]
    assert all(len(p.activities) == 4 for p in roadmap)


def test_roadmap_only_development_duration_varies(make_use_case):
    easy = UseCaseAnalyzer.generate_roadmap(make_use_case("low", "easy", ["a"], ["r"]))
    hard = UseCaseAnalyzer.generate_implementation_roadmap(
        make_use_case("critical", "complex", ["a", "b", "c"], [])
    )
    assert easy[1].duration == "2-4 weeks"
    assert hard[1].duration == "3-6 months"
    for i in (0, 2, 3):
        assert easy[i] == hard[i]
    assert easy[1].activities == hard[1].activities


def test_evaluate_scenarios_ranks_and_totals(make_use_case):
    a, b, c = make_use_case(), make_use_case(), make_use_case()
    comparison = UseCaseAnalyzer.evaluate_scenarios(
        [
            ("Customer Service Automation", a, 75000, 180000),
            ("Sales Process Optimization", b, 60000, 150000),
            ("Operations Efficiency", c, 100000, 250000),
        ]
    )
    assert [s.name for s in comparison.scenarios] == [
        "Sales Process Optimization",
        "Operations Efficiency",
        "Customer Service Automation",
    ]
    assert [s.result.roi for s in comparison.scenarios] == ["150.00%", "150.00%", "140.00%"]
    assert comparison.total_investment == 235000
    assert comparison.total_annual_benefit == 580000
    assert comparison.combined.recommendation == HIGHLY_RECOMMENDED


def test_evaluate_scenarios_requires_input():
    with pytest.raises(ValueError):
        UseCaseAnalyzer.evaluate_scenarios([])
