"""Robot log ingestion and query endpoints."""

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from robot_logs.interfaces.http.deps import get_log_service
from robot_logs.modules.logs import (
    Invalid,
    LogPersistenceError,
    LogService,
    validate_log_batch,
    validate_log_query,
)
from robot_logs.schemas import LogResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_VALIDATION_RESPONSES = {400: {"model": ValidationErrorResponse, "description": "Invalid request"}}


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def _reject(result: Invalid) -> HTTPException:
    logger.info("Rejected request: %s", result.message)
    return HTTPException(status_code=400, detail=result.as_detail())


@router.post(
    "",
    status_code=201,
    response_class=Response,
    responses=_VALIDATION_RESPONSES,
    summary="Store a batch of robot logs",
)
async def create_logs(request: Request, service: LogService = Depends(get_log_service)):
    content_type = request.headers.get("content-type", "")
    if not _is_json(content_type):
        logger.warning("Unsupported content type: %r", content_type)
        return Response(status_code=400)

    max_body_bytes = request.app.state.settings.max_body_bytes
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > max_body_bytes:
        logger.warning("Request body too large: %s bytes", declared)
        return Response(status_code=413)

    body = await request.body()
    if len(body) > max_body_bytes:
        logger.warning("Request body too large: %d bytes", len(body))
        return Response(status_code=413)

    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as exc:
        logger.warning("Malformed request body: %s", exc)
        return Response(status_code=400)

    result = validate_log_batch(payload)
    if isinstance(result, Invalid):
        raise _reject(result)

    try:
        await service.create_logs(result.value)
    except LogPersistenceError:
        logger.exception("Failed to store log batch")
        return Response(status_code=500)
    return Response(status_code=201)


@router.get(
    "",
    response_model=list[LogResponse],
    responses=_VALIDATION_RESPONSES,
    summary="Query stored robot logs",
)
async def list_logs(request: Request, service: LogService = Depends(get_log_service)):
    result = validate_log_query(request.query_params)
    if isinstance(result, Invalid):
        raise _reject(result)

    try:
        entries = await service.list_logs(result.value)
    except LogPersistenceError:
        logger.exception("Failed to query logs")
        return Response(status_code=500)
    return [LogResponse.model_validate(entry) for entry in entries]
