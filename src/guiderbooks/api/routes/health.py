"""Health and readiness probe endpoints."""

from fastapi import APIRouter, Request

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/ping", summary="Basic liveness check")
async def ping() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/ready", summary="Report which backing services are configured")
async def ready(request: Request) -> dict[str, bool]:
    state = request.app.state
    return {
        "store": getattr(state, "chapter_store", None) is not None,
        "completion": bool(getattr(state.settings, "openai_api_key", None)),
    }
