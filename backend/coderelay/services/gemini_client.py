# coderelay/services/gemini_client.py
from __future__ import annotations

import logging
from typing import Any

import requests as http_requests

from coderelay.core.config import Settings
from coderelay.core.errors import ConfigurationError, TransportError, UpstreamError
from coderelay.services.payload_builder import build_generation_payload
from coderelay.services.validation import extract_candidate_text

logger = logging.getLogger(__name__)


def _error_message(ex: http_requests.HTTPError) -> str:
    # {"error": {"code": 400, "message": "...", "status": "..."}}
    try:
        body = ex.response.json()
        message = body["error"]["message"]
    except (AttributeError, ValueError, KeyError, TypeError):
        return str(ex)
    return message if isinstance(message, str) and message else str(ex)


class GeminiClient:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings.from_env()
        self.base_url = self.settings.gemini_base_url.rstrip("/")
        self.url = f"{self.base_url}/v1beta/models/{self.settings.gemini_model}:generateContent"

    def generate(self, prompt: str) -> str:
        if not self.settings.gemini_api_key:
            raise ConfigurationError("GEMINI_API_KEY not configured")

        payload = build_generation_payload(prompt)
        try:
            resp = http_requests.post(
                self.url,
                headers={"x-goog-api-key": self.settings.gemini_api_key},
                json=payload,
                timeout=self.settings.gemini_timeout,
            )
            resp.raise_for_status()
        except http_requests.HTTPError as ex:
            raise UpstreamError(_error_message(ex)) from ex
        except http_requests.RequestException as ex:
            raise TransportError(str(ex)) from ex

        try:
            data: Any = resp.json()
        except ValueError as ex:
            raise UpstreamError("Generative-language API returned invalid JSON") from ex
        text = extract_candidate_text(data)
        logger.info("Chat reply received (%d chars)", len(text))
        return text
