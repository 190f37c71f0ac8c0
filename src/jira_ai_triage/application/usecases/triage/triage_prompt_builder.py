from dataclasses import dataclass

from jira_ai_triage.core.value_objects.issue_event import IssueEvent

TRIAGE_SYSTEM_INSTRUCTION = (
    "You are an IT support assistant. Analyze login/password issues and provide "
    "troubleshooting steps, severity suggestion, and next action."
)


@dataclass(frozen=True, slots=True)
class TriagePromptBuilder:
    system_instruction: str = TRIAGE_SYSTEM_INSTRUCTION

    def build_user_content(self, event: IssueEvent) -> str:
        return f"Issue Summary: {event.summary}\nDescription: {event.description}"
