# app/adapters/api/routers/health.py
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from dependency_injector.wiring import inject, Provide
from typing import Dict, Union

from app.shared.container import Container
from app.core.domain.store import LexiconStore

router = APIRouter(prefix="/health", tags=["System"])

@router.get("", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
async def liveness_probe() -> str:
    """
    Liveness Probe.
    Returns 200 OK if the process is serving requests.
    """
    return "OK"

@router.get("/ready", status_code=status.HTTP_200_OK)
@inject
def readiness_probe(
    store: LexiconStore = Depends(Provide[Container.lexicon_store]),
) -> Dict[str, Union[str, int]]:
    """
    Readiness Probe.
    The store is built during startup, so reaching this handler means it is loaded.
    """
    return {"status": "ready", "entries": len(store)}
