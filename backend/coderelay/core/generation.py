# coderelay/core/generation.py
from __future__ import annotations

from typing import Any, Dict

# fixed sampling parameters for every chat prompt
GENERATION_CONFIG: Dict[str, Any] = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 1000,
}
