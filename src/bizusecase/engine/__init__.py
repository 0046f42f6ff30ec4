"""Use case scoring, ranking and portfolio analysis."""

from .analyzer import (
    ComplexityProfile,
    RoadmapPhase,
    RoiResult,
    ScenarioComparison,
    UseCaseAnalyzer,
    analyze_complexity,
    calculate_roi,
    estimate_effort,
    estimate_payback,
    evaluate_scenarios,
    generate_roadmap,
)
from .generator import PortfolioAnalysis, UseCaseGenerator
from .usecase import FEASIBILITIES, PRIORITIES, UseCase

__all__ = [
    "UseCase",
    "PRIORITIES",
    "FEASIBILITIES",
    "UseCaseGenerator",
    "PortfolioAnalysis",
    "UseCaseAnalyzer",
    "ComplexityProfile",
    "RoiResult",
    "RoadmapPhase",
    "ScenarioComparison",
    "estimate_effort",
    "analyze_complexity",
    "calculate_roi",
    "estimate_payback",
    "evaluate_scenarios",
    "generate_roadmap",
]
