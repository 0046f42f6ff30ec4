from fastapi import APIRouter, Request

from ..schemas.usecase import DomainListResponse, DomainResponse

router = APIRouter(prefix="/api/v1/domains", tags=["domains"])


@router.get("", response_model=DomainListResponse)
async def list_domains(request: Request):
    domains = request.app.state.portfolio_service.list_domains()
    return DomainListResponse(
        domains=[DomainResponse(**d) for d in domains],
        count=len(domains),
    )
