from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request):
    has_engine = getattr(request.app.state, "generator", None) is not None
    if not has_engine:
        return {"status": "not_ready", "reason": "use case engine not initialised"}
    return {"status": "ready"}
