# coderelay/routes/chat.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from coderelay.core.errors import RelayError
from coderelay.models.relay import ChatRequest, ChatResponse
from coderelay.routes.deps import get_gemini_client
from coderelay.services.gemini_client import GeminiClient

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/chat", response_model=ChatResponse, response_model_exclude_none=True)
def chat(req: ChatRequest, client: GeminiClient = Depends(get_gemini_client)):
    try:
        reply = client.generate(req.message)
    except RelayError as ex:
        logger.error("Chat request failed (%s): %s", ex.kind, ex.message)
        return JSONResponse(
            status_code=500,
            content=ChatResponse(success=False, error=ex.message).model_dump(exclude_none=True),
        )
    return ChatResponse(success=True, data=reply)
