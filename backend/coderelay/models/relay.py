# coderelay/models/relay.py
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel


class RunCodeRequest(BaseModel):
    code: str
    language: str
    stdin: Optional[str] = None


class RunCodeData(BaseModel):
    stdout: Optional[str] = None
    time: Optional[Union[str, float]] = None
    memory: Optional[Union[int, float]] = None


class RunCodeResponse(BaseModel):
    apiStatus: str
    data: Optional[RunCodeData] = None
    message: Optional[str] = None
    kind: Optional[str] = None
    details: Optional[Any] = None


class ChatRequest(BaseModel):
    message: str


class ChatResponse(BaseModel):
    success: bool
    data: Optional[str] = None
    error: Optional[str] = None
