"""Pytest configuration and fixtures."""

import asyncio
import sys
from pathlib import Path
from typing import Dict, List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from vtranslate.translation.base import ChatBackend, ChatRequest, ChatResponse


class StubChatBackend(ChatBackend):
    """
    Chat backend answering from a table instead of the network.

    Replies are looked up by a substring of the system prompt (the target
    language's native or plain name), so one stub serves a whole fan-out.
    """

    def __init__(
        self,
        replies: Optional[Dict[str, str]] = None,
        default: Optional[str] = "translated",
        failures: Optional[Dict[str, Exception]] = None,
        delay: float = 0.0
    ):
        super().__init__(api_key="test", model="stub")
        self.replies = replies or {}
        self.default = default
        self.failures = failures or {}
        self.delay = delay
        self.requests: List[ChatRequest] = []
        self.completed = 0

    async def complete(self, request: ChatRequest) -> ChatResponse:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)

        system = request.messages[0].content
        for key, error in self.failures.items():
            if key in system:
                raise error

        choices = []
        for key, reply in self.replies.items():
            if key in system:
                choices = [reply]
                break
        else:
            if self.default is not None:
                choices = [self.default]

        self.completed += 1
        return ChatResponse(choices=choices, backend="stub", model="stub")

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def stub_backend():
    """Backend answering Spanish/French like the demo scenario."""
    return StubChatBackend(replies={"Español": "Hola", "Français": "Bonjour"})


@pytest.fixture
def translation_client(stub_backend):
    from vtranslate.translation.client import TranslationClient
    return TranslationClient(stub_backend)


@pytest.fixture
def history_store(tmp_path):
    from vtranslate.storage.history import HistoryStore
    store = HistoryStore(tmp_path / "history")
    yield store
    store.close()


@pytest.fixture
def sample_item():
    from vtranslate.core.models import HistoryItem
    return HistoryItem(
        id="1700000000000",
        source_language="English",
        source_text="Hello",
        translations={"Spanish": "Hola", "French": "Bonjour"}
    )


@pytest.fixture
def make_backend():
    """The StubChatBackend class, for tests that need custom replies."""
    return StubChatBackend
