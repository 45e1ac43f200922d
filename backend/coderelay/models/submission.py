# coderelay/models/submission.py
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel


class SubmissionPayload(BaseModel):
    language_id: int
    source_code: str
    stdin: str = ""


class SubmissionStatus(BaseModel):
    id: int
    description: Optional[str] = None


class SubmissionResult(BaseModel):
    status: SubmissionStatus
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    compile_output: Optional[str] = None
    message: Optional[str] = None
    time: Optional[Union[str, float]] = None
    memory: Optional[Union[int, float]] = None
    token: Optional[str] = None
