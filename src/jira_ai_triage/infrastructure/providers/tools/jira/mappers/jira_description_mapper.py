from typing import Any


class JiraDescriptionMapper:
    """
    Converts a Jira issue description into plain text.

    Webhooks deliver the description either as a plain string or, on the v3 API, as an
    Atlassian Document Format tree. Text nodes are concatenated per block and blocks are
    separated by blank lines.
    """

    _BLOCK_TYPES = {"paragraph", "heading", "codeBlock", "blockquote", "listItem", "panel", "tableCell"}

    def to_text(self, description: Any) -> str:
        if description is None:
            return ""
        if isinstance(description, str):
            return description
        if isinstance(description, dict):
            blocks: list[str] = []
            self._collect_blocks(description, blocks)
            return "\n\n".join(blocks)
        if isinstance(description, list):
            return "\n\n".join(text for text in (self.to_text(item) for item in description) if text)
        return str(description)

    def _collect_blocks(self, node: dict[str, Any], blocks: list[str]) -> None:
        children = node.get("content") or []
        has_nested_blocks = any(isinstance(c, dict) and c.get("type") == "paragraph" for c in children)
        if node.get("type") in self._BLOCK_TYPES and not has_nested_blocks:
            text = self._inline_text(node)
            if text.strip():
                blocks.append(text)
            return
        for child in children:
            if isinstance(child, dict):
                self._collect_blocks(child, blocks)

    def _inline_text(self, node: dict[str, Any]) -> str:
        if node.get("type") == "text":
            return node.get("text", "")
        if node.get("type") == "hardBreak":
            return "\n"
        return "".join(self._inline_text(c) for c in node.get("content") or [] if isinstance(c, dict))
