from fastapi import APIRouter, Request

from ..schemas.analysis import PortfolioAnalysisResponse

router = APIRouter(prefix="/api/v1/portfolio", tags=["portfolio"])


@router.get("/analysis", response_model=PortfolioAnalysisResponse)
async def portfolio_analysis(request: Request):
    return PortfolioAnalysisResponse(**request.app.state.portfolio_service.analysis())
