from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IssueSummary:
    """A search hit returned by the issue tracker."""

    key: str
    summary: str = ""
    status: str | None = None
