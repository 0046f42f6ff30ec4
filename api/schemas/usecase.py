from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class DomainResponse(BaseModel):
    name: str
    description: str
    common_challenges: List[str]


class DomainListResponse(BaseModel):
    domains: List[DomainResponse]
    count: int


class GenerateRequest(BaseModel):
    domain: str = Field(..., min_length=1, description="Name of a catalog domain")
    custom_challenge: Optional[str] = Field(
        default=None,
        description="Free-text challenge; accepted but not used for template selection",
    )


class UseCaseRecord(BaseModel):
    id: str
    title: str
    domain: str
    description: str
    benefits: List[str]
    requirements: List[str]
    priority: str
    feasibility: str
    score: float
    created_at: str


class UseCaseListResponse(BaseModel):
    use_cases: List[UseCaseRecord]
    count: int
