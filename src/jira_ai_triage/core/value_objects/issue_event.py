from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IssueEvent:
    issue_key: str
    summary: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if not self.issue_key or not self.issue_key.strip():
            raise ValueError("IssueEvent requires a non-empty issue_key")
