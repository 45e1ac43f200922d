# coderelay/core/registry.py
from __future__ import annotations

from typing import Dict, FrozenSet, Optional

# editor language id -> execution service language_id
LANGUAGE_CODES: Dict[str, int] = {
    "c": 110,
    "csharp": 51,
    "cpp": 54,
    "python": 92,
    "javascript": 93,
    "java": 91,
    "sql": 82,
    "go": 107,
    "php": 68,
    "lua": 64,
    "rust": 108,
    "ruby": 72,
    "swift": 83,
}

STATUS_DESCRIPTIONS: Dict[int, str] = {
    1: "In Queue",
    2: "Processing",
    3: "Accepted",
    4: "Wrong Answer",
    5: "Time Limit Exceeded",
    6: "Compilation Error",
    7: "Runtime Error (SIGSEGV)",
    8: "Runtime Error (SIGXFSZ)",
    9: "Runtime Error (SIGFPE)",
    10: "Runtime Error (SIGABRT)",
    11: "Runtime Error (NZEC)",
    12: "Runtime Error (Other)",
    13: "Internal Error",
    14: "Exec Format Error",
}

PENDING_STATUSES: FrozenSet[int] = frozenset({1, 2})
ACCEPTED_STATUS = 3

EXTENSION_LANGUAGES: Dict[str, str] = {
    "js": "javascript",
    "ts": "typescript",
    "py": "python",
    "html": "html",
    "css": "css",
    "json": "json",
    "md": "markdown",
    "txt": "plaintext",
    "xml": "xml",
    "java": "java",
    "c": "c",
    "cpp": "cpp",
    "cs": "csharp",
    "go": "go",
    "php": "php",
    "rb": "ruby",
    "swift": "swift",
    "rs": "rust",
    "sh": "shell",
    "yml": "yaml",
    "yaml": "yaml",
    "toml": "toml",
    "lua": "lua",
    "r": "r",
    "kt": "kotlin",
    "dart": "dart",
    "sql": "sql",
}

FALLBACK_LANGUAGE = "plaintext"


def language_code(language: Optional[str]) -> Optional[int]:
    if not language:
        return None
    return LANGUAGE_CODES.get(language)


def is_supported(language: Optional[str]) -> bool:
    return language_code(language) is not None


def describe_status(status_id: Optional[int]) -> str:
    if status_id is None:
        return "Unknown"
    return STATUS_DESCRIPTIONS.get(status_id, f"Unknown status {status_id}")


def detect_language(filename: str) -> str:
    """Editor language for a file name, keyed on its last suffix."""
    if "." not in filename:
        return FALLBACK_LANGUAGE
    extension = filename.rsplit(".", 1)[-1].lower()
    return EXTENSION_LANGUAGES.get(extension, FALLBACK_LANGUAGE)
