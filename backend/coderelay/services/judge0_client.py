# coderelay/services/judge0_client.py
from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Dict, Optional

import requests as http_requests

from coderelay.core.config import Settings
from coderelay.core.errors import (
    ConfigurationError,
    SubmissionCancelledError,
    SubmissionTimeoutError,
    TransportError,
    UpstreamError,
)
from coderelay.core.registry import PENDING_STATUSES
from coderelay.services.payload_builder import build_submission_payload
from coderelay.services.validation import validate_submission_result, validate_submission_token

logger = logging.getLogger(__name__)

RESULT_PARAMS = {"base64_encoded": "true", "fields": "*"}


def _upstream_body(resp: Optional[http_requests.Response]) -> Any:
    if resp is None:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


class Judge0Client:
    def __init__(
        self,
        settings: Settings | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.settings = settings or Settings.from_env()
        self.base_url = self.settings.judge0_base_url.rstrip("/")
        self.url = f"{self.base_url}/submissions"
        self._sleep = sleep

    def _headers(self) -> Dict[str, str]:
        if not self.settings.judge0_api_key:
            raise ConfigurationError("JUDGE0_API_KEY not configured")
        return {
            "x-rapidapi-key": self.settings.judge0_api_key,
            "x-rapidapi-host": self.settings.judge0_host,
        }

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            if method == "POST":
                resp = http_requests.post(url, timeout=self.settings.judge0_timeout, **kwargs)
            else:
                resp = http_requests.get(url, timeout=self.settings.judge0_timeout, **kwargs)
            resp.raise_for_status()
        except http_requests.HTTPError as ex:
            raise UpstreamError(str(ex), details=_upstream_body(ex.response)) from ex
        except http_requests.RequestException as ex:
            raise TransportError(str(ex)) from ex

        try:
            return resp.json()
        except ValueError as ex:
            raise UpstreamError("Execution service returned invalid JSON", details=resp.text) from ex

    def create_submission(self, code: str, language: str, stdin: Optional[str] = None) -> str:
        payload = build_submission_payload(code, language, stdin)
        headers = self._headers()
        headers["Content-Type"] = "application/json"
        data = self._request(
            "POST",
            self.url,
            params={**RESULT_PARAMS, "wait": "false"},
            headers=headers,
            json=payload,
        )
        token = validate_submission_token(data)
        logger.info("Submission created, token=%s", token)
        return token

    def get_submission(self, token: str) -> Dict[str, Any]:
        return self._request(
            "GET",
            f"{self.url}/{token}",
            params=dict(RESULT_PARAMS),
            headers=self._headers(),
        )

    def wait_for_result(self, token: str, cancel: Optional[threading.Event] = None) -> Dict[str, Any]:
        """
        Poll ``token`` until its status leaves queued/processing.

        Sleeps ``judge0_poll_interval`` after every non-terminal poll and gives
        up after ``judge0_max_polls`` polls. Setting ``cancel`` stops the loop
        before the next poll.
        """
        max_polls = max(1, self.settings.judge0_max_polls)
        for attempt in range(1, max_polls + 1):
            if cancel is not None and cancel.is_set():
                raise SubmissionCancelledError(f"Submission {token} cancelled")

            data = self.get_submission(token)
            status_id = validate_submission_result(data).status.id
            logger.debug("Submission %s poll %d: status %d", token, attempt, status_id)
            if status_id not in PENDING_STATUSES:
                return data

            if attempt < max_polls:
                self._sleep(self.settings.judge0_poll_interval)

        raise SubmissionTimeoutError(
            f"Submission {token} still pending after {max_polls} polls",
            details={"token": token},
        )

    def run(
        self,
        code: str,
        language: str,
        stdin: Optional[str] = None,
        cancel: Optional[threading.Event] = None,
    ) -> Dict[str, Any]:
        token = self.create_submission(code, language, stdin)
        return self.wait_for_result(token, cancel=cancel)
