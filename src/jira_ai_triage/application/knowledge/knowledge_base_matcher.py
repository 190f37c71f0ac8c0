"""Keyword lookup of the knowledge article that best fits an issue.

Rules are evaluated in order and the first match wins; a later rule never
overrides an earlier one even if it would match more of the text.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from jira_ai_triage.application.knowledge.knowledge_catalog import (
    ACCOUNT_LOCKED_RESOLUTION,
    MFA_ISSUES,
    PASSWORD_RESET_GUIDE,
    SESSION_EXPIRED_TROUBLESHOOTING,
    SSO_LOGIN_TROUBLESHOOTING,
)
from jira_ai_triage.core.value_objects.knowledge_article import KnowledgeArticle
from jira_ai_triage.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)

_NON_WORD_RUNS = re.compile(r"[\W_]+")


@dataclass(frozen=True, slots=True)
class KnowledgeRule:
    name: str
    predicate: Callable[[str], bool]
    article: KnowledgeArticle


def _pattern(expression: str) -> Callable[[str], bool]:
    compiled = re.compile(expression)
    return lambda text: compiled.search(text) is not None


DEFAULT_RULES: tuple[KnowledgeRule, ...] = (
    KnowledgeRule("password_reset", _pattern(r"password\s*reset"), PASSWORD_RESET_GUIDE),
    KnowledgeRule("session_expired", _pattern(r"session\s*expired"), SESSION_EXPIRED_TROUBLESHOOTING),
    KnowledgeRule("account_locked", _pattern(r"account\s*locked"), ACCOUNT_LOCKED_RESOLUTION),
    KnowledgeRule("sso", _pattern(r"sso"), SSO_LOGIN_TROUBLESHOOTING),
    KnowledgeRule("mfa", _pattern(r"mfa|otp"), MFA_ISSUES),
)


def normalize(text: str) -> str:
    """Lower-case and collapse punctuation, underscores and whitespace runs to one space."""
    return _NON_WORD_RUNS.sub(" ", text.lower())


class KnowledgeBaseMatcher:
    def __init__(self, rules: Sequence[KnowledgeRule] = DEFAULT_RULES):
        self.rules = tuple(rules)

    def match(self, summary: str, description: str) -> KnowledgeArticle | None:
        text = normalize(f"{summary} {description}")
        logger.debug(f"Combined text for KB lookup: {text}")

        for rule in self.rules:
            if rule.predicate(text):
                logger.info(f"KB rule '{rule.name}' matched: {rule.article.title}")
                return rule.article

        logger.info("No KB article matched")
        return None
