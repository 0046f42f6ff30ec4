from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class PortfolioAnalysisResponse(BaseModel):
    total_use_cases: int
    by_domain: Dict[str, int]
    by_priority: Dict[str, int]
    by_feasibility: Dict[str, int]
    average_score: float


class ComplexityResponse(BaseModel):
    requirements_count: int
    feasibility: str
    estimated_effort: str


class RoadmapPhaseResponse(BaseModel):
    name: str
    duration: str
    activities: List[str]


class RoadmapResponse(BaseModel):
    use_case_id: str
    title: str
    phases: List[RoadmapPhaseResponse]


class RoiRequest(BaseModel):
    cost: float = Field(..., description="One-off implementation cost")
    annual_benefit: float = Field(..., description="Expected yearly benefit")


class RoiResponse(BaseModel):
    use_case_id: str
    cost: float
    annual_benefit: float
    roi: str
    payback_period: str
    recommendation: str
    roi_percent: float
    payback_months: float
