"""GET /health: liveness check plus the active normalization config."""
from __future__ import annotations

from fastapi import APIRouter

from app.core.settings import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Basic health check")
def health_check() -> dict[str, str | int]:
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
        "sku_prefix": settings.sku_prefix,
        "cash_rounding_unit": settings.cash_rounding_unit,
    }
