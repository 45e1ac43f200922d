# coderelay/core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List


def _split_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


@dataclass(frozen=True)
class Settings:
    judge0_api_key: str = ""
    judge0_base_url: str = "https://judge0-ce.p.rapidapi.com"
    judge0_host: str = "judge0-ce.p.rapidapi.com"
    judge0_timeout: float = 30.0
    judge0_poll_interval: float = 2.0
    judge0_max_polls: int = 30

    gemini_api_key: str = ""
    gemini_base_url: str = "https://generativelanguage.googleapis.com"
    gemini_model: str = "gemini-2.0-flash"
    gemini_timeout: float = 60.0

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @staticmethod
    def from_env() -> "Settings":
        base = os.getenv("JUDGE0_BASE_URL", "https://judge0-ce.p.rapidapi.com").rstrip("/")
        # RapidAPI routes on the host header, which defaults to the base URL's host
        host_header = os.getenv("JUDGE0_HOST") or base.split("://", 1)[-1].split("/", 1)[0]
        return Settings(
            judge0_api_key=os.getenv("JUDGE0_API_KEY", "").strip(),
            judge0_base_url=base,
            judge0_host=host_header,
            judge0_timeout=float(os.getenv("JUDGE0_TIMEOUT", "30")),
            judge0_poll_interval=float(os.getenv("JUDGE0_POLL_INTERVAL", "2")),
            judge0_max_polls=int(os.getenv("JUDGE0_MAX_POLLS", "30")),
            gemini_api_key=os.getenv("GEMINI_API_KEY", "").strip(),
            gemini_base_url=os.getenv(
                "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com"
            ).rstrip("/"),
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.0-flash"),
            gemini_timeout=float(os.getenv("GEMINI_TIMEOUT", "60")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
