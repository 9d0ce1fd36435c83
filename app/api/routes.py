from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import Response

from app.core.serialization import to_status_payload
from app.parsers.errors import ScheduleUnavailableError
from app.providers.errors import FetchError

router = APIRouter()


@router.get("/healthz")
async def healthz(request: Request) -> dict:
    return {
        "status": "ok",
        "groupId": request.app.state.settings.group_id,
    }


@router.get("/v1/status")
async def group_status(
    request: Request,
    group_id: str | None = Query(alias="groupId", default=None, min_length=1),
) -> dict:
    service = request.app.state.status_service
    try:
        status = await service.build_status(group_id=group_id)
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except ScheduleUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return to_status_payload(status)


@router.get("/metrics")
async def metrics(request: Request) -> Response:
    payload, content_type = request.app.state.metrics.render()
    return Response(content=payload, media_type=content_type)
