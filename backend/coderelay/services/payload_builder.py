# coderelay/services/payload_builder.py
from __future__ import annotations

import base64
from typing import Any, Dict, Optional

from coderelay.core.errors import UnsupportedLanguageError
from coderelay.core.generation import GENERATION_CONFIG
from coderelay.core.registry import is_supported, language_code
from coderelay.models.submission import SubmissionPayload


def encode_base64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def build_submission_payload(code: str, language: str, stdin: Optional[str] = None) -> Dict[str, Any]:
    if not is_supported(language):
        raise UnsupportedLanguageError(language)
    language_id = language_code(language)

    payload = SubmissionPayload(
        language_id=language_id,
        source_code=encode_base64(code),
        stdin=encode_base64(stdin) if stdin else "",
    )
    return payload.model_dump()


def build_generation_payload(prompt: str) -> Dict[str, Any]:
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": dict(GENERATION_CONFIG),
    }
