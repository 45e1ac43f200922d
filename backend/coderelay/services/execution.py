# coderelay/services/execution.py
from __future__ import annotations

import logging
import threading
from typing import Optional

from coderelay.core.errors import RelayError
from coderelay.core.registry import ACCEPTED_STATUS, describe_status
from coderelay.models.relay import RunCodeRequest, RunCodeResponse
from coderelay.services.coerce import coerce_to_run_data
from coderelay.services.judge0_client import Judge0Client
from coderelay.services.validation import validate_submission_result

logger = logging.getLogger(__name__)


def error_response(ex: RelayError) -> RunCodeResponse:
    fields = {"apiStatus": "error", "message": ex.message, "kind": ex.kind}
    if ex.details is not None:
        fields["details"] = ex.details
    return RunCodeResponse(**fields)


def execute(
    client: Judge0Client,
    req: RunCodeRequest,
    cancel: Optional[threading.Event] = None,
) -> RunCodeResponse:
    try:
        raw = client.run(req.code, req.language, req.stdin, cancel=cancel)
        result = validate_submission_result(raw)
    except RelayError as ex:
        logger.error("Run failed (%s): %s", ex.kind, ex.message)
        return error_response(ex)

    status_id = result.status.id
    if status_id == ACCEPTED_STATUS:
        logger.info("Execution finished: time=%s memory=%s", result.time, result.memory)
        return RunCodeResponse(apiStatus="success", data=coerce_to_run_data(result))

    logger.warning("Execution failed with status %d (%s)", status_id, describe_status(status_id))
    return RunCodeResponse(
        apiStatus="error",
        message="Execution failed.",
        kind="upstream",
        details=raw,
    )
