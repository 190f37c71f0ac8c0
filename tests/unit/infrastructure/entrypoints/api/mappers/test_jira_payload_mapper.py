from jira_ai_triage.core.value_objects.issue_event import IssueEvent
from jira_ai_triage.infrastructure.entrypoints.api.dtos.jira_webhook_dto import JiraWebhookDTO
from jira_ai_triage.infrastructure.entrypoints.api.mappers.jira_payload_mapper import JiraPayloadMapper


def _map(payload):
    return JiraPayloadMapper.map_to_event(JiraWebhookDTO.model_validate(payload))


def test_maps_key_summary_and_description():
    event = _map(
        {
            "webhookEvent": "jira:issue_created",
            "issue": {
                "id": "10001",
                "key": "KAN-1",
                "fields": {"summary": "Password Reset Failed", "description": "user cannot log in", "priority": {}},
            },
        }
    )

    assert event == IssueEvent(issue_key="KAN-1", summary="Password Reset Failed", description="user cannot log in")


def test_missing_fields_default_to_empty_strings():
    assert _map({"issue": {"key": "KAN-2"}}) == IssueEvent(issue_key="KAN-2")
    assert _map({"issue": {"key": "KAN-3", "fields": {"summary": None, "description": None}}}) == IssueEvent(
        issue_key="KAN-3"
    )


def test_adf_description_is_flattened():
    event = _map(
        {
            "issue": {
                "key": "KAN-4",
                "fields": {
                    "summary": "MFA",
                    "description": {
                        "type": "doc",
                        "version": 1,
                        "content": [{"type": "paragraph", "content": [{"type": "text", "text": "OTP never arrives"}]}],
                    },
                },
            }
        }
    )

    assert event.description == "OTP never arrives"


def test_no_issue_key_yields_none():
    assert _map({}) is None
    assert _map({"issue": None}) is None
    assert _map({"issue": {"fields": {"summary": "orphan"}}}) is None
    assert _map({"issue": {"key": ""}}) is None
    assert _map({"issue": {"key": "   "}}) is None


def test_unrelated_attributes_do_not_affect_mapping():
    event = _map(
        {
            "timestamp": "2024-05-01T10:00:00Z",
            "webhookEvent": {"name": "jira:issue_created"},
            "issue": {"id": 10001, "key": "KAN-5", "fields": {"summary": "SSO loop", "labels": 3}},
        }
    )

    assert event == IssueEvent(issue_key="KAN-5", summary="SSO loop")


def test_non_string_text_fields_are_coerced():
    event = _map({"issue": {"key": "KAN-6", "fields": {"summary": 42, "description": ["OTP", "lost"]}}})

    assert event == IssueEvent(issue_key="KAN-6", summary="42", description="OTP\n\nlost")


def test_malformed_fields_object_keeps_the_key():
    assert _map({"issue": {"key": "KAN-7", "fields": "unexpected"}}) == IssueEvent(issue_key="KAN-7")
