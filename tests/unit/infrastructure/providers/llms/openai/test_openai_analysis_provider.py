from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from jira_ai_triage.core.exceptions.upstream_error import UpstreamError
from jira_ai_triage.infrastructure.providers.llms.openai.openai_analysis_provider import (
    OpenAiAnalysisProvider,
)

GROQ_URL = "https://api.groq.com/openai/v1/chat/completions"


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def client():
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=_completion("Reset the user's password."))
    return client


@pytest.fixture
def provider(client):
    return OpenAiAnalysisProvider(client=client, model="llama-3.1-8b-instant")


@pytest.mark.asyncio
async def test_analyze_sends_system_and_user_messages(provider, client):
    text = await provider.analyze("You are an IT support assistant.", "Issue Summary: x\nDescription: y")

    assert text == "Reset the user's password."
    client.chat.completions.create.assert_awaited_once_with(
        model="llama-3.1-8b-instant",
        messages=[
            {"role": "system", "content": "You are an IT support assistant."},
            {"role": "user", "content": "Issue Summary: x\nDescription: y"},
        ],
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        SimpleNamespace(choices=[]),
        SimpleNamespace(),
        SimpleNamespace(choices=[SimpleNamespace(message=None)]),
        _completion(None),
        _completion("   "),
    ],
)
async def test_malformed_response_raises_upstream_error(provider, client, response):
    client.chat.completions.create.return_value = response

    with pytest.raises(UpstreamError) as exc:
        await provider.analyze("system", "user")

    assert exc.value.provider == "groq"
    assert exc.value.message.startswith("Malformed response")
    assert exc.value.status_code is None


@pytest.mark.asyncio
async def test_status_error_keeps_code_and_body(provider, client):
    body = {"error": {"message": "Service Unavailable"}}
    client.chat.completions.create.side_effect = openai.APIStatusError(
        "Service Unavailable",
        response=httpx.Response(503, request=httpx.Request("POST", GROQ_URL)),
        body=body,
    )

    with pytest.raises(UpstreamError) as exc:
        await provider.analyze("system", "user")

    assert exc.value.status_code == 503
    assert exc.value.detail() == body
    assert isinstance(exc.value.__cause__, openai.APIStatusError)


@pytest.mark.asyncio
async def test_connection_error_carries_only_message(provider, client):
    client.chat.completions.create.side_effect = openai.APIConnectionError(
        request=httpx.Request("POST", GROQ_URL)
    )

    with pytest.raises(UpstreamError) as exc:
        await provider.analyze("system", "user")

    assert exc.value.status_code is None
    assert exc.value.body is None
    assert exc.value.detail() == "Connection error."


@pytest.mark.asyncio
async def test_single_call_per_analysis(provider, client):
    client.chat.completions.create.side_effect = openai.APIConnectionError(
        request=httpx.Request("POST", GROQ_URL)
    )

    with pytest.raises(UpstreamError):
        await provider.analyze("system", "user")

    assert client.chat.completions.create.await_count == 1
