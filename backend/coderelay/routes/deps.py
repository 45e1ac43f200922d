# coderelay/routes/deps.py
from __future__ import annotations

from fastapi import Request

from coderelay.core.config import Settings
from coderelay.services.gemini_client import GeminiClient
from coderelay.services.judge0_client import Judge0Client


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_judge0_client(request: Request) -> Judge0Client:
    return Judge0Client(get_settings(request))


def get_gemini_client(request: Request) -> GeminiClient:
    return GeminiClient(get_settings(request))
