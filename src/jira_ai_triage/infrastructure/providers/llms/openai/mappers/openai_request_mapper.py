from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from jira_ai_triage.core.value_objects.message import Message, MessageRole


@dataclass(frozen=True, slots=True)
class OpenAiRequestMapper:
    def to_kwargs(self, model: str, system_instruction: str, user_content: str) -> Mapping[str, Any]:
        messages = (
            Message(role=MessageRole.SYSTEM, content=system_instruction),
            Message(role=MessageRole.USER, content=user_content),
        )
        return {
            "model": model,
            "messages": [self._msg(m) for m in messages],
        }

    def _msg(self, message: Message) -> dict[str, str]:
        return {"role": message.role.value, "content": message.content}
