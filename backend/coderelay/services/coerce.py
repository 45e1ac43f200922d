# coderelay/services/coerce.py
from __future__ import annotations

import base64
import binascii
import logging
from typing import Optional

from coderelay.models.relay import RunCodeData
from coderelay.models.submission import SubmissionResult

logger = logging.getLogger(__name__)

NO_OUTPUT = "No output"
DECODE_ERROR = "Error decoding output"


def decode_output(encoded: Optional[str]) -> Optional[str]:
    """
    Decode a base64 stream captured by the execution service.

    ``None`` passes through untouched. Text that is empty once stripped becomes
    ``NO_OUTPUT``; a payload that is not valid base64 or not UTF-8 becomes
    ``DECODE_ERROR`` instead of raising.
    """
    if encoded is None:
        return None
    try:
        # the service wraps encoded output at 60 columns and ends it with a newline
        compact = "".join(encoded.split())
        decoded = base64.b64decode(compact, validate=True).decode("utf-8")
    except (binascii.Error, ValueError) as ex:
        logger.warning("Failed to decode base64 output: %s", ex)
        return DECODE_ERROR
    if decoded.strip() == "":
        return NO_OUTPUT
    return decoded


def coerce_to_run_data(result: SubmissionResult) -> RunCodeData:
    return RunCodeData(
        stdout=decode_output(result.stdout),
        time=result.time,
        memory=result.memory,
    )
