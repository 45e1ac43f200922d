# coderelay/routes/run_code.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from coderelay.models.relay import RunCodeRequest, RunCodeResponse
from coderelay.routes.deps import get_judge0_client
from coderelay.services.execution import execute
from coderelay.services.judge0_client import Judge0Client

router = APIRouter()


@router.post("/run-code", response_model=RunCodeResponse, response_model_exclude_unset=True)
def run_code(req: RunCodeRequest, client: Judge0Client = Depends(get_judge0_client)):
    return execute(client, req)
