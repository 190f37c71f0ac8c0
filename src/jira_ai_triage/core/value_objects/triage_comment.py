from __future__ import annotations

from dataclasses import dataclass

from jira_ai_triage.core.value_objects.knowledge_article import KnowledgeArticle

ANALYSIS_HEADING = "AI Analysis:"
ARTICLE_HEADING = "Recommended Knowledge Article:"


@dataclass(frozen=True, slots=True)
class TriageComment:
    analysis: str
    article: KnowledgeArticle | None = None

    def as_text(self) -> str:
        text = f"{ANALYSIS_HEADING}\n\n{self.analysis}"
        if self.article:
            text += f"\n\n{ARTICLE_HEADING}\n{self.article.title}\n{self.article.url}"
        return text
