# coderelay/workspace/relay_client.py
from __future__ import annotations

from typing import Any, Dict, Optional

import requests as http_requests

from coderelay.core.errors import TransportError, UpstreamError


class RelayClient:
    """HTTP client the editor uses to reach the relay server."""

    def __init__(self, base_url: str = "http://localhost:3000", timeout: float = 120.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def run_code(self, code: str, language: str, stdin: Optional[str] = "") -> Dict[str, Any]:
        try:
            resp = http_requests.post(
                f"{self.base_url}/run-code",
                json={"code": code, "language": language, "stdin": stdin},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            body = resp.json()
        except http_requests.RequestException as ex:
            return {"apiStatus": "error", "message": str(ex)}
        except ValueError:
            return {"apiStatus": "error", "message": "Relay returned invalid JSON"}
        if not isinstance(body, dict):
            return {"apiStatus": "error", "message": "Relay returned an unexpected body"}
        return body

    def chat(self, message: str) -> str:
        try:
            resp = http_requests.post(
                f"{self.base_url}/api/chat",
                json={"message": message},
                timeout=self.timeout,
            )
        except http_requests.RequestException as ex:
            raise TransportError(str(ex)) from ex

        # failures come back as HTTP 500 with {"success": false, "error": ...}
        try:
            body = resp.json()
        except ValueError as ex:
            raise UpstreamError(f"Relay returned HTTP {resp.status_code} without JSON") from ex

        if isinstance(body, dict) and body.get("success"):
            return body.get("data") or ""
        error = body.get("error") if isinstance(body, dict) else None
        raise UpstreamError(error or "Unknown error occurred", details=body)
