from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import PlainTextResponse

from ..schemas.analysis import (
    ComplexityResponse,
    RoadmapResponse,
    RoiRequest,
    RoiResponse,
)
from ..schemas.usecase import GenerateRequest, UseCaseListResponse, UseCaseRecord

router = APIRouter(prefix="/api/v1/use-cases", tags=["use-cases"])

EXPORT_MEDIA_TYPES = {"json": "application/json", "csv": "text/csv"}


@router.post("", response_model=UseCaseRecord, status_code=201)
async def generate_use_case(body: GenerateRequest, request: Request):
    svc = request.app.state.portfolio_service
    return UseCaseRecord(**svc.generate(body.domain, body.custom_challenge))


@router.get("", response_model=UseCaseListResponse)
async def list_use_cases(request: Request, domain: Optional[str] = None):
    records = request.app.state.portfolio_service.list_use_cases(domain)
    return UseCaseListResponse(
        use_cases=[UseCaseRecord(**r) for r in records],
        count=len(records),
    )


@router.get("/top", response_model=UseCaseListResponse)
async def top_use_cases(request: Request, count: Optional[int] = Query(default=None, ge=1)):
    state = request.app.state
    records = state.portfolio_service.top(count or state.default_top_count)
    return UseCaseListResponse(
        use_cases=[UseCaseRecord(**r) for r in records],
        count=len(records),
    )


@router.get("/export")
async def export_use_cases(request: Request, format: str = "json"):
    payload = request.app.state.portfolio_service.export(format)
    return PlainTextResponse(payload, media_type=EXPORT_MEDIA_TYPES.get(format, "text/plain"))


@router.get("/{use_case_id}", response_model=UseCaseRecord)
async def get_use_case(use_case_id: str, request: Request):
    return UseCaseRecord(**request.app.state.portfolio_service.get(use_case_id))


@router.get("/{use_case_id}/complexity", response_model=ComplexityResponse)
async def use_case_complexity(use_case_id: str, request: Request):
    return ComplexityResponse(**request.app.state.portfolio_service.complexity(use_case_id))


@router.get("/{use_case_id}/roadmap", response_model=RoadmapResponse)
async def use_case_roadmap(use_case_id: str, request: Request):
    return RoadmapResponse(**request.app.state.portfolio_service.roadmap(use_case_id))


@router.post("/{use_case_id}/roi", response_model=RoiResponse)
async def use_case_roi(use_case_id: str, body: RoiRequest, request: Request):
    result = request.app.state.portfolio_service.roi(
        use_case_id, cost=body.cost, annual_benefit=body.annual_benefit
    )
    return RoiResponse(**result)
