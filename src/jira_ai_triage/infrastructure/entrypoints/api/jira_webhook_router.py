import json

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from jira_ai_triage.application.usecases.triage.triage_issue_usecase import TriageIssueUseCase
from jira_ai_triage.core.exceptions.triage_failed_error import TriageFailedError
from jira_ai_triage.core.value_objects.issue_event import IssueEvent
from jira_ai_triage.infrastructure.entrypoints.api.dtos.jira_webhook_dto import JiraWebhookDTO
from jira_ai_triage.infrastructure.entrypoints.api.mappers.jira_payload_mapper import JiraPayloadMapper
from jira_ai_triage.infrastructure.observability.logger_factory_service import LoggerFactoryService
from jira_ai_triage.infrastructure.resolution.container import TriageContainer

logger = LoggerFactoryService.build_logger(__name__)
router = APIRouter()

NO_ISSUE_DATA = "No issue data"
SUCCESS = "Success"
ERROR_OCCURRED = "Error occurred"
DUPLICATE_IGNORED = "Duplicate delivery ignored"


def get_container(request: Request) -> TriageContainer:
    return request.app.state.container


def _text(status_code: int, content: str) -> PlainTextResponse:
    return PlainTextResponse(status_code=status_code, content=content)


@router.post("/jira-webhook", response_class=PlainTextResponse)
async def jira_webhook(request: Request, container: TriageContainer = Depends(get_container)):
    logger.info("Webhook received")

    # 1. Parse raw body; an empty body is treated as an empty event
    body_bytes = await request.body()
    logger.debug(f"Incoming Jira Payload (Raw): {body_bytes.decode('utf-8', errors='replace')}")
    try:
        raw = json.loads(body_bytes) if body_bytes.strip() else {}
    except ValueError as e:
        logger.error(f"Error: webhook body is not valid JSON: {e}")
        return _text(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_OCCURRED)

    # 2. Validate. Deliveries without issue context are acknowledged so Jira does not retry them.
    try:
        payload = JiraWebhookDTO.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Ignoring webhook with unexpected shape: {e.error_count()} validation error(s)")
        return _text(status.HTTP_200_OK, NO_ISSUE_DATA)

    event = JiraPayloadMapper.map_to_event(payload)
    if event is None:
        logger.info("No issue key found")
        return _text(status.HTTP_200_OK, NO_ISSUE_DATA)

    logger.info(f"Issue Key: {event.issue_key}")
    logger.info(f"Summary: {event.summary}")

    if container.in_flight is None:
        return await _triage(container.usecase, event)

    with container.in_flight.claim(event.issue_key) as owned:
        if not owned:
            return _text(status.HTTP_200_OK, DUPLICATE_IGNORED)
        return await _triage(container.usecase, event)


async def _triage(usecase: TriageIssueUseCase, event: IssueEvent) -> PlainTextResponse:
    try:
        await usecase.execute(event)
    except TriageFailedError as e:
        logger.error(f"Error: {event.issue_key} failed after stage '{e.stage.value}': {e.detail()}")
        return _text(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_OCCURRED)
    except Exception as e:
        logger.exception(f"Error: unexpected failure while triaging {event.issue_key}: {e}")
        return _text(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_OCCURRED)

    logger.info("Comment added successfully.")
    return _text(status.HTTP_200_OK, SUCCESS)
