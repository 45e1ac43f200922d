# coderelay/services/validation.py
from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError

from coderelay.core.errors import UpstreamError
from coderelay.models.submission import SubmissionResult


def validate_submission_token(obj: Any) -> str:
    if not isinstance(obj, dict):
        raise UpstreamError("Submission response must be a JSON object", details=obj)
    token = obj.get("token")
    if not isinstance(token, str) or not token:
        raise UpstreamError("Submission response is missing a token", details=obj)
    return token


def validate_submission_result(obj: Any) -> SubmissionResult:
    if not isinstance(obj, dict):
        raise UpstreamError("Submission result must be a JSON object", details=obj)
    try:
        return SubmissionResult.model_validate(obj)
    except ValidationError as ex:
        raise UpstreamError(f"Malformed submission result: {ex.error_count()} invalid field(s)", details=obj) from ex


def extract_candidate_text(obj: Dict[str, Any]) -> str:
    try:
        text = obj["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as ex:
        raise UpstreamError("Malformed response from generative-language API", details=obj) from ex
    if not isinstance(text, str):
        raise UpstreamError("Generated candidate text must be a string", details=obj)
    return text
