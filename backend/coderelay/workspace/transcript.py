# coderelay/workspace/transcript.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

USER = "user"
AI = "ai"

PLACEHOLDER_TEXT = "Waiting for response..."


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str
    pending: bool = False


@dataclass(frozen=True)
class Transcript:
    """Append-only chat log; at most the pending placeholder is ever rewritten."""

    messages: Tuple[ChatMessage, ...] = ()

    def __len__(self) -> int:
        return len(self.messages)

    @property
    def has_pending(self) -> bool:
        return any(m.pending for m in self.messages)

    def add_user(self, content: str) -> "Transcript":
        return Transcript(self.messages + (ChatMessage(USER, content),))

    def add_ai(self, content: str) -> "Transcript":
        return Transcript(self.messages + (ChatMessage(AI, content),))

    def add_placeholder(self) -> "Transcript":
        return Transcript(self.messages + (ChatMessage(AI, PLACEHOLDER_TEXT, pending=True),))

    def resolve(self, content: str) -> "Transcript":
        """Swap the oldest pending placeholder for the reply, or append it if none is waiting."""
        for i, message in enumerate(self.messages):
            if message.pending:
                resolved = ChatMessage(AI, content)
                return Transcript(self.messages[:i] + (resolved,) + self.messages[i + 1:])
        return self.add_ai(content)
