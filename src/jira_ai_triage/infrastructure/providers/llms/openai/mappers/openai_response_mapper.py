from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class OpenAiResponseMapper:
    def to_text(self, response: Any) -> str:
        """Return choices[0].message.content; raises ValueError when the response does not carry it."""
        choices = getattr(response, "choices", None)
        if not choices:
            raise ValueError("Chat completion response has no choices")
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise ValueError("Chat completion response has no message content")
        return content
