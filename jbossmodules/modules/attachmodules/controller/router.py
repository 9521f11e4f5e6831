"""FastAPI routes exposing the attach-modules build step."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from jbossmodules.modules.attachmodules.controller.schemas import (
    AttachModulesRequest,
    AttachModulesResponse,
)
from jbossmodules.modules.attachmodules.domain import ConfigurationError, ModuleIOError
from jbossmodules.modules.attachmodules.service.assembler import AttachModulesService

router = APIRouter(prefix="/modules", tags=["attach-modules"])
log = logging.getLogger(__name__)


def get_service(request: Request) -> AttachModulesService:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "attach_modules_service", None):
        raise HTTPException(status_code=500, detail="Attach modules service not initialized.")
    return container.attach_modules_service


@router.post("/attach", response_model=AttachModulesResponse)
def attach_modules(
    payload: AttachModulesRequest,
    svc: AttachModulesService = Depends(get_service),
) -> AttachModulesResponse:
    try:
        attachment = svc.attach(
            payload.project.to_domain(),
            [dep.to_domain() for dep in payload.dependencies],
            [module.to_domain() for module in payload.modules],
            category=payload.category,
            generate_index=payload.generate_index,
        )
    except ConfigurationError as exc:
        log.error("Attach modules rejected for %s: %s", payload.project.artifact_id, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ModuleIOError as exc:
        log.exception("Attach modules failed for %s", payload.project.artifact_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return AttachModulesResponse.from_attachment(attachment)
