"""Tests for the translation dispatch pipeline."""

import json
from unittest.mock import AsyncMock

import pytest

from services.dispatch_service import FAILURE_MESSAGE, DispatchOutcome


def log_lines(path):
    if not path.exists():
        return []
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def last_target(fake_model) -> str:
    return fake_model.prompts[-1].split('translate it into "')[1].split('"')[0]


@pytest.mark.asyncio
async def test_plain_text_uses_default_language(app_context, fake_model, log_path):
    reply = AsyncMock()
    outcome = await app_context.dispatcher.dispatch(1, "merhaba", reply, "alice", "Alice")

    assert outcome is DispatchOutcome.TRANSLATED
    assert last_target(fake_model) == "en"
    reply.assert_awaited_once_with("translated", disable_web_page_preview=True)
    assert [line["dir"] for line in log_lines(log_path)] == ["in", "out"]
    assert log_lines(log_path)[0]["username"] == "alice"


@pytest.mark.asyncio
async def test_stored_preference_is_used(app_context, fake_model, clock):
    app_context.preferences.set(1, "tr")
    for text in ("hello", "good night"):
        await app_context.dispatcher.dispatch(1, text, AsyncMock())
        assert last_target(fake_model) == "tr"
        clock.advance(1)


@pytest.mark.asyncio
async def test_one_off_override_not_persisted(app_context, fake_model, clock):
    await app_context.dispatcher.dispatch(1, "/to ru hello", AsyncMock())
    assert last_target(fake_model) == "ru"
    assert fake_model.prompts[-1].endswith("\nhello")
    assert app_context.preferences.get(1) == "en"

    clock.advance(1)
    await app_context.dispatcher.dispatch(1, "to de: good morning", AsyncMock())
    assert last_target(fake_model) == "de"
    assert fake_model.prompts[-1].endswith("\ngood morning")
    assert app_context.preferences.get(1) == "en"


@pytest.mark.asyncio
async def test_unrelated_command_ignored(app_context, fake_model, log_path):
    reply = AsyncMock()
    outcome = await app_context.dispatcher.dispatch(1, "/help", reply)

    assert outcome is DispatchOutcome.IGNORED
    reply.assert_not_awaited()
    assert fake_model.prompts == []
    assert log_lines(log_path) == []


@pytest.mark.asyncio
async def test_second_event_within_window_dropped(app_context, fake_model, clock, log_path):
    first, second = AsyncMock(), AsyncMock()
    assert await app_context.dispatcher.dispatch(1, "one", first) is DispatchOutcome.TRANSLATED
    clock.advance(0.5)
    assert await app_context.dispatcher.dispatch(1, "two", second) is DispatchOutcome.DEBOUNCED

    first.assert_awaited_once()
    second.assert_not_awaited()
    assert len(fake_model.prompts) == 1
    assert [line["dir"] for line in log_lines(log_path)] == ["in", "out"]


@pytest.mark.asyncio
async def test_other_chat_not_debounced(app_context, fake_model):
    await app_context.dispatcher.dispatch(1, "one", AsyncMock())
    assert await app_context.dispatcher.dispatch(2, "two", AsyncMock()) is DispatchOutcome.TRANSLATED


@pytest.mark.asyncio
async def test_empty_model_output_reports_failure(app_context, fake_model, log_path):
    fake_model.text = ""
    reply = AsyncMock()
    outcome = await app_context.dispatcher.dispatch(1, "hello", reply)

    assert outcome is DispatchOutcome.FAILED
    reply.assert_awaited_once_with(FAILURE_MESSAGE)
    lines = log_lines(log_path)
    assert [line["dir"] for line in lines] == ["in", "error"]
    assert lines[1] == {"t": lines[1]["t"], "dir": "error", "chatId": 1, "error": "Empty response from model"}


@pytest.mark.asyncio
async def test_service_error_contained(app_context, fake_model, clock, log_path):
    fake_model.error = TimeoutError("deadline exceeded")
    reply = AsyncMock()
    assert await app_context.dispatcher.dispatch(1, "hello", reply) is DispatchOutcome.FAILED
    reply.assert_awaited_once_with(FAILURE_MESSAGE)

    # The next event is unaffected.
    fake_model.error = None
    clock.advance(1)
    assert await app_context.dispatcher.dispatch(1, "hello", AsyncMock()) is DispatchOutcome.TRANSLATED
    assert [line["dir"] for line in log_lines(log_path)] == ["in", "error", "in", "out"]


@pytest.mark.asyncio
async def test_reply_send_failure_logged_as_error(app_context, log_path):
    reply = AsyncMock(side_effect=[RuntimeError("chat not found"), RuntimeError("chat not found")])
    assert await app_context.dispatcher.dispatch(1, "hello", reply) is DispatchOutcome.FAILED
    assert [line["dir"] for line in log_lines(log_path)] == ["in", "error"]
