import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bizusecase.config import load_config
from bizusecase.errors import (
    DomainNotFound,
    InvalidCostInput,
    NoTemplatesAvailable,
    UnsupportedFormat,
    UseCaseEngineError,
    UseCaseNotFound,
)

from .core.config import get_config_path, get_cors_origins
from .core.lifespan import lifespan
from .routers import domains, health, portfolio, usecases

logger = logging.getLogger(__name__)

app = FastAPI(
    title="BizUseCase API",
    version="1.0.0",
    description="Score, rank and cost out AI-adoption use cases across business domains",
    lifespan=lifespan,
)

ERROR_STATUS = {
    DomainNotFound: 404,
    UseCaseNotFound: 404,
    InvalidCostInput: 422,
    UnsupportedFormat: 400,
    NoTemplatesAvailable: 409,
}


def error_status(exc: UseCaseEngineError) -> int:
    # Nearest mapped ancestor wins, so subclasses inherit their parent's status.
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return 400


@app.exception_handler(UseCaseEngineError)
async def engine_error_handler(request: Request, exc: UseCaseEngineError):
    status = error_status(exc)
    logger.warning("%s %s -> %d: %s", request.method, request.url.path, status, exc)
    return JSONResponse(status_code=status, content={"detail": str(exc)})


def _cors_config():
    try:
        return load_config(get_config_path())
    except FileNotFoundError:
        return {}


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(_cors_config()),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(domains.router)
app.include_router(usecases.router)
app.include_router(portfolio.router)
