"""
Base chat backend interface.
All chat-completion providers must inherit from ChatBackend.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Optional
from dataclasses import dataclass, field


@dataclass
class ChatMessage:
    """One message of a chat-completion prompt."""
    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class ChatRequest:
    """Request for a chat completion."""
    messages: List[ChatMessage]
    # Low temperature keeps translations consistent between calls
    temperature: float = 0.3
    model: Optional[str] = None


@dataclass
class ChatResponse:
    """Response from a chat backend."""
    choices: List[Optional[str]]
    backend: str
    model: str
    tokens_used: int = 0
    latency: float = 0.0
    metadata: Dict = field(default_factory=dict)

    @property
    def content(self) -> Optional[str]:
        """Content of the first choice, if any."""
        if not self.choices:
            return None
        return self.choices[0]


class ChatBackend(ABC):
    """Abstract base class for chat-completion backends."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key
        self.model = model
        self.name = self.__class__.__name__

    @abstractmethod
    async def complete(self, request: ChatRequest) -> ChatResponse:
        """
        Run a chat completion asynchronously.

        Args:
            request: Prompt messages and sampling parameters

        Returns:
            ChatResponse with the returned choices

        Raises:
            Exception: Any transport or provider error; the caller maps it
                into the domain failure type.
        """
        pass

    async def aclose(self) -> None:
        """Release network resources held by the backend."""
        return None

    def is_available(self) -> bool:
        """Check if backend is configured."""
        return self.api_key is not None

    def get_info(self) -> Dict:
        """Get backend information."""
        return {
            "name": self.name,
            "model": self.model,
            "available": self.is_available()
        }
