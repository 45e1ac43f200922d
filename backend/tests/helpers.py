# tests/helpers.py
from __future__ import annotations

import base64
from typing import Any, Optional
from unittest import mock

import requests

from coderelay.core.config import Settings


def make_settings(**overrides: Any) -> Settings:
    values = dict(
        judge0_api_key="judge0-test-key",
        judge0_base_url="https://judge0.test",
        judge0_host="judge0.test",
        judge0_poll_interval=2.0,
        judge0_max_polls=10,
        gemini_api_key="gemini-test-key",
        gemini_base_url="https://gemini.test",
    )
    values.update(overrides)
    return Settings(**values)


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def fake_response(body: Any = None, status_code: int = 200, text: Optional[str] = None) -> mock.MagicMock:
    resp = mock.MagicMock(spec=requests.Response)
    resp.status_code = status_code
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    resp.text = text if text is not None else str(body)
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error", response=resp)
    else:
        resp.raise_for_status.return_value = None
    return resp


def status_payload(status_id: int, **fields: Any) -> dict:
    payload = {"status": {"id": status_id, "description": "x"}, "stdout": None, "time": "0.01", "memory": 1024}
    payload.update(fields)
    return payload
