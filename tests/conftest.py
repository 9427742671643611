"""Shared fixtures: fake Gemini model, controllable clock, wired AppContext."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest
from telegram import Chat, Message, Update, User

from ai.gemini_translator import GeminiTranslator
from services.app_context import APP_CONTEXT_KEY, AppContext
from repositories.activity_log_repo import ActivityLogRepository
from security.rate_limiter import ChatDebouncer


class FakeClock:
    """Millisecond monotonic clock that only moves when told to."""

    def __init__(self, start_ms: int = 1_000_000) -> None:
        self.now = start_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += round(seconds * 1000)


class FakeModel:
    """Stands in for genai.GenerativeModel; records prompts, returns canned text."""

    def __init__(self, text: str = "translated", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def generate_content_async(self, prompt: str):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_model() -> FakeModel:
    return FakeModel()


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "logs" / "messages.jsonl"


@pytest.fixture
def app_context(fake_model, clock, log_path) -> AppContext:
    return AppContext(
        translator=GeminiTranslator(model=fake_model),
        debouncer=ChatDebouncer(window_ms=900, clock=clock),
        activity_log=ActivityLogRepository(log_path),
    )


@pytest.fixture
def tg_context(app_context):
    """Callback context carrying the AppContext in bot_data."""
    context = Mock()
    context.bot_data = {APP_CONTEXT_KEY: app_context}
    return context


@pytest.fixture
def make_update():
    """Build a mocked Update for a text message."""

    def _make(text: str, chat_id: int = 42, username: str | None = "alice",
              first_name: str | None = "Alice", last_name: str | None = "Smith"):
        update = AsyncMock(spec=Update)

        message = AsyncMock(spec=Message)
        message.text = text
        message.reply_text = AsyncMock()

        chat = Mock(spec=Chat)
        chat.id = chat_id

        user = Mock(spec=User)
        user.username = username
        user.first_name = first_name
        user.last_name = last_name

        update.message = message
        update.effective_chat = chat
        update.effective_user = user
        return update

    return _make
