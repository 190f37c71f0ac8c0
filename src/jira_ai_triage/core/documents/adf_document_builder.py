from __future__ import annotations

import re
from typing import Any

from jira_ai_triage.core.value_objects.triage_comment import (
    ANALYSIS_HEADING,
    ARTICLE_HEADING,
    TriageComment,
)

_BLANK_LINES = re.compile(r"\n\s*\n")


class AdfDocumentBuilder:
    """
    Builder for Atlassian Document Format (ADF) documents accepted by the Jira Cloud comment API.

    Every top-level node is a paragraph of text nodes; Jira rejects plain strings as comment bodies.
    """

    @staticmethod
    def _create_doc(content: list[dict[str, Any]]) -> dict[str, Any]:
        return {
            "type": "doc",
            "version": 1,
            "content": content,
        }

    @staticmethod
    def _create_paragraph(content: list[dict[str, Any]]) -> dict[str, Any]:
        return {
            "type": "paragraph",
            "content": content,
        }

    @staticmethod
    def _create_text(text: str, marks: list[dict[str, Any]] | None = None) -> dict[str, Any]:
        node: dict[str, Any] = {
            "type": "text",
            "text": text,
        }
        if marks:
            node["marks"] = marks
        return node

    @classmethod
    def _create_label(cls, text: str) -> dict[str, Any]:
        return cls._create_paragraph([cls._create_text(text, marks=[{"type": "strong"}])])

    @classmethod
    def _create_link(cls, url: str) -> dict[str, Any]:
        return cls._create_paragraph(
            [cls._create_text(url, marks=[{"type": "link", "attrs": {"href": url}}])]
        )

    @staticmethod
    def _split_blocks(text: str) -> list[str]:
        # ADF rejects empty text nodes
        return [block.strip() for block in _BLANK_LINES.split(text) if block.strip()]

    @classmethod
    def build_text_document(cls, text: str) -> dict[str, Any]:
        paragraphs = [cls._create_paragraph([cls._create_text(block)]) for block in cls._split_blocks(text)]
        return cls._create_doc(paragraphs)

    @classmethod
    def build_triage_comment(cls, comment: TriageComment) -> dict[str, Any]:
        content = [cls._create_label(ANALYSIS_HEADING)]
        content.extend(cls.build_text_document(comment.analysis)["content"])

        if comment.article:
            content.append(cls._create_label(ARTICLE_HEADING))
            content.append(cls._create_paragraph([cls._create_text(comment.article.title)]))
            content.append(cls._create_link(comment.article.url))

        return cls._create_doc(content)

    @staticmethod
    def to_plain_text(document: dict[str, Any]) -> str:
        """Flattens a document built here back to text, one line per paragraph."""
        lines = []
        for node in document.get("content", []):
            lines.append("".join(child.get("text", "") for child in node.get("content", [])))
        return "\n".join(lines)
