from __future__ import annotations

from dataclasses import dataclass, field

from jira_ai_triage.application.knowledge.knowledge_base_matcher import KnowledgeBaseMatcher
from jira_ai_triage.application.ports.analysis_provider import AnalysisProvider
from jira_ai_triage.application.ports.issue_tracker_gateway import IssueTrackerGateway
from jira_ai_triage.application.usecases.triage.triage_prompt_builder import TriagePromptBuilder
from jira_ai_triage.core.documents.adf_document_builder import AdfDocumentBuilder
from jira_ai_triage.core.exceptions.triage_failed_error import TriageFailedError
from jira_ai_triage.core.value_objects.issue_event import IssueEvent
from jira_ai_triage.core.value_objects.triage_comment import TriageComment
from jira_ai_triage.core.value_objects.triage_stage import TriageStage
from jira_ai_triage.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


@dataclass
class TriageIssueUseCase:
    """
    Analyze an issue, attach the matching knowledge article and post the result as a comment.

    Single pass: a failure at any stage aborts the run with TriageFailedError and nothing is retried.
    The analysis is discarded if the comment cannot be posted.
    """

    analysis_provider: AnalysisProvider
    tracker: IssueTrackerGateway
    matcher: KnowledgeBaseMatcher = field(default_factory=KnowledgeBaseMatcher)
    prompt_builder: TriagePromptBuilder = field(default_factory=TriagePromptBuilder)

    async def execute(self, event: IssueEvent) -> TriageComment:
        issue_key = event.issue_key
        logger.info(f"Triaging issue {issue_key}")

        stage = TriageStage.VALIDATED
        try:
            # Step 1: AI analysis
            analysis = await self.analysis_provider.analyze(
                self.prompt_builder.system_instruction,
                self.prompt_builder.build_user_content(event),
            )
            stage = TriageStage.ANALYZED
            logger.info(f"AI analysis generated for {issue_key} ({len(analysis)} chars)")

            # Step 2: Knowledge base enrichment
            article = self.matcher.match(event.summary, event.description)
            comment = TriageComment(analysis=analysis, article=article)
            stage = TriageStage.ENRICHED

            # Step 3: Post comment
            document = AdfDocumentBuilder.build_triage_comment(comment)
            await self.tracker.post_comment(issue_key, document)
            stage = TriageStage.POSTED
        except Exception as exc:
            raise TriageFailedError(stage=stage, cause=exc) from exc

        logger.info(f"Comment added to {issue_key}")
        return comment
