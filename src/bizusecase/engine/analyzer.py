"""
Stateless evaluation helpers for individual use cases.

Effort bands, ROI with payback period, and a fixed four-phase implementation
roadmap. Nothing here touches the generator's collection; every function is a
pure computation over a ``UseCase`` and/or plain cost/benefit figures.

Money inputs must be positive and finite. A zero cost makes ROI undefined and
a zero (or negative) annual benefit means the investment never pays back, so
both are rejected with ``InvalidCostInput`` instead of yielding inf/NaN.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from ..errors import InvalidCostInput
from .usecase import UseCase

EFFORT_BANDS: Dict[str, str] = {
    "easy": "2-4 weeks",
    "moderate": "1-3 months",
    "complex": "3-6 months",
    "very-complex": "6+ months",
}
UNKNOWN_EFFORT = "Unknown"

HIGHLY_RECOMMENDED = "Highly Recommended"
RECOMMENDED = "Recommended"
CONSIDER_CAREFULLY = "Consider Carefully"
RECOMMENDATIONS = (HIGHLY_RECOMMENDED, RECOMMENDED, CONSIDER_CAREFULLY)

# Strict thresholds: an ROI of exactly 50 or 20 falls to the lower tier.
HIGHLY_RECOMMENDED_ROI = 50.0
RECOMMENDED_ROI = 20.0


@dataclass(frozen=True)
class ComplexityProfile:
    requirements_count: int
    feasibility: str
    estimated_effort: str


@dataclass(frozen=True)
class RoiResult:
    roi: str
    payback_period: str
    recommendation: str
    roi_percent: float
    payback_months: float


@dataclass(frozen=True)
class RoadmapPhase:
    name: str
    duration: str
    activities: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ScenarioResult:
    name: str
    use_case_id: str
    title: str
    cost: float
    annual_benefit: float
    result: RoiResult


@dataclass(frozen=True)
class ScenarioComparison:
    scenarios: List[ScenarioResult]
    total_investment: float
    total_annual_benefit: float
    combined: RoiResult


# ---------------------------------------------------------------------------
# Effort & complexity
# ---------------------------------------------------------------------------


def estimate_effort(use_case: UseCase) -> str:
    return EFFORT_BANDS.get(use_case.feasibility, UNKNOWN_EFFORT)


def analyze_complexity(use_case: UseCase) -> ComplexityProfile:
    return ComplexityProfile(
        requirements_count=len(use_case.requirements),
        feasibility=use_case.feasibility,
        estimated_effort=estimate_effort(use_case),
    )


# ---------------------------------------------------------------------------
# Financials
# ---------------------------------------------------------------------------


def _require_positive(name: str, value: float) -> float:
    # bool is an int subclass; True must not pass as a dollar figure.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidCostInput(name, value)
    number = float(value)
    if not math.isfinite(number) or number <= 0:
        raise InvalidCostInput(name, value)
    return number


def _recommend(roi_percent: float) -> str:
    if roi_percent > HIGHLY_RECOMMENDED_ROI:
        return HIGHLY_RECOMMENDED
    if roi_percent > RECOMMENDED_ROI:
        return RECOMMENDED
    return CONSIDER_CAREFULLY


def _months(cost: float, annual_benefit: float) -> float:
    months = cost * 12 / annual_benefit
    if not math.isfinite(months):
        # cost * 12 overflowed; dividing first stays in range.
        months = cost / annual_benefit * 12
    if not math.isfinite(months):
        raise InvalidCostInput(
            "annual_benefit", annual_benefit, "is too small against cost for a finite payback period"
        )
    return months


def _roi_percent(cost: float, annual_benefit: float) -> float:
    roi_percent = (annual_benefit - cost) * 100 / cost
    if not math.isfinite(roi_percent):
        roi_percent = (annual_benefit - cost) / cost * 100
    if not math.isfinite(roi_percent):
        raise InvalidCostInput("cost", cost, "is too small against annual_benefit for a finite ROI")
    return roi_percent


def payback_months(cost: float, annual_benefit: float) -> float:
    cost = _require_positive("cost", cost)
    annual_benefit = _require_positive("annual_benefit", annual_benefit)
    return _months(cost, annual_benefit)


def estimate_payback(cost: float, annual_benefit: float) -> str:
    return f"{payback_months(cost, annual_benefit):.1f} months"


def _roi(cost: float, annual_benefit: float) -> RoiResult:
    cost = _require_positive("cost", cost)
    annual_benefit = _require_positive("annual_benefit", annual_benefit)
    roi_percent = _roi_percent(cost, annual_benefit)
    months = _months(cost, annual_benefit)
    return RoiResult(
        roi=f"{roi_percent:.2f}%",
        payback_period=f"{months:.1f} months",
        recommendation=_recommend(roi_percent),
        roi_percent=roi_percent,
        payback_months=months,
    )


def calculate_roi(use_case: UseCase, cost: float, annual_benefit: float) -> RoiResult:
    """
    Return on investment over one year of benefit.

    ``roi = (annual_benefit - cost) / cost * 100`` rendered with two decimals.
    The product is taken before the division so round figures stay exact
    (15000 * 100 / 75000 is 20.0, not 20.000000000000004). Figures large
    enough to overflow the product fall back to dividing first; a result that
    is still not finite raises ``InvalidCostInput``.
    """
    return _roi(cost, annual_benefit)


def evaluate_scenarios(
    scenarios: Iterable[Tuple[str, UseCase, float, float]]
) -> ScenarioComparison:
    """
    ROI per named ``(name, use_case, cost, annual_benefit)`` scenario, ranked by
    ROI descending, plus the combined figures of funding all of them.
    """
    results: List[ScenarioResult] = []
    for name, use_case, cost, annual_benefit in scenarios:
        result = calculate_roi(use_case, cost, annual_benefit)
        results.append(
            ScenarioResult(
                name=name,
                use_case_id=use_case.id,
                title=use_case.title,
                cost=float(cost),
                annual_benefit=float(annual_benefit),
                result=result,
            )
        )
    if not results:
        raise ValueError("at least one scenario is required")

    results.sort(key=lambda r: r.result.roi_percent, reverse=True)
    total_cost = sum(r.cost for r in results)
    total_benefit = sum(r.annual_benefit for r in results)
    return ScenarioComparison(
        scenarios=results,
        total_investment=total_cost,
        total_annual_benefit=total_benefit,
        combined=_roi(total_cost, total_benefit),
    )


# ---------------------------------------------------------------------------
# Roadmap
# ---------------------------------------------------------------------------

_DISCOVERY_ACTIVITIES = (
    "Stakeholder interviews",
    "Requirements documentation",
    "Technical feasibility assessment",
    "Resource allocation",
)
_DEVELOPMENT_ACTIVITIES = (
    "System architecture design",
    "Integration planning",
    "Development and testing",
    "Quality assurance",
)
_DEPLOYMENT_ACTIVITIES = (
    "Pilot deployment",
    "User training",
    "Performance monitoring",
    "Optimization",
)
_MONITORING_ACTIVITIES = (
    "Performance tracking",
    "User feedback collection",
    "Continuous improvement",
    "Scaling strategy",
)


def generate_roadmap(use_case: UseCase) -> List[RoadmapPhase]:
    # Only the development phase depends on the use case.
    return [
        RoadmapPhase("Discovery & Planning", "2-4 weeks", _DISCOVERY_ACTIVITIES),
        RoadmapPhase("Design & Development", estimate_effort(use_case), _DEVELOPMENT_ACTIVITIES),
        RoadmapPhase("Deployment & Training", "2-3 weeks", _DEPLOYMENT_ACTIVITIES),
        RoadmapPhase("Monitoring & Optimization", "Ongoing", _MONITORING_ACTIVITIES),
    ]


class UseCaseAnalyzer:
    """Namespace grouping the analyzer functions."""

    estimate_effort = staticmethod(estimate_effort)
    analyze_complexity = staticmethod(analyze_complexity)
    calculate_roi = staticmethod(calculate_roi)
    estimate_payback = staticmethod(estimate_payback)
    generate_roadmap = staticmethod(generate_roadmap)
    generate_implementation_roadmap = staticmethod(generate_roadmap)
    evaluate_scenarios = staticmethod(evaluate_scenarios)


__all__ = [
    "UseCaseAnalyzer",
    "ComplexityProfile",
    "RoiResult",
    "RoadmapPhase",
    "ScenarioResult",
    "ScenarioComparison",
    "estimate_effort",
    "analyze_complexity",
    "calculate_roi",
    "estimate_payback",
    "payback_months",
    "generate_roadmap",
    "evaluate_scenarios",
    "EFFORT_BANDS",
    "RECOMMENDATIONS",
    "HIGHLY_RECOMMENDED",
    "RECOMMENDED",
    "CONSIDER_CAREFULLY",
]
