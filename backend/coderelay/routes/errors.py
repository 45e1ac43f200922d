# coderelay/routes/errors.py
from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from coderelay.models.relay import ChatResponse, RunCodeResponse

logger = logging.getLogger(__name__)

CHAT_PATH = "/api/chat"


def describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {err.get('msg', 'invalid')}")
    return "; ".join(parts) or "Invalid request body"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_errors(exc)
    logger.warning("Rejected request to %s: %s", request.url.path, message)
    if request.url.path == CHAT_PATH:
        body = ChatResponse(success=False, error=message).model_dump(exclude_none=True)
        return JSONResponse(status_code=400, content=body)
    # /run-code keeps its always-200 contract; the envelope carries the failure
    body = RunCodeResponse(apiStatus="error", message=message, kind="validation").model_dump(exclude_none=True)
    return JSONResponse(status_code=200, content=body)
