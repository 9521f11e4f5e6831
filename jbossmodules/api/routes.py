"""Service level API routes."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness probe reporting the service version")
async def health(request: Request) -> Dict[str, str]:
    return {"status": "ok", "service": request.app.title, "version": request.app.version}
