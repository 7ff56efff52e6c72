"""
Core data models for VTranslate.

History records, their favorite projection, the ephemeral error shown in the
UI and the per-call translation outcome.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Any
import time


class ErrorCode(str, Enum):
    """Coarse classification of a session error."""
    TRANSLATION_ERROR = "TRANSLATION_ERROR"
    DETECTION_ERROR = "DETECTION_ERROR"


@dataclass
class TranslationError:
    """Error held by a session until it is superseded or cleared."""
    message: str
    code: Optional[ErrorCode] = None


@dataclass
class TranslationOutcome:
    """Result of translating one text into one language."""
    language: str
    text: str = ""
    error: Optional[TranslationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def new_record_id() -> str:
    """Time-based identifier: milliseconds since the epoch."""
    return str(time.time_ns() // 1_000_000)


@dataclass
class FavoriteItem:
    """A history record as shown in the favorites view."""
    id: str
    source_language: str
    source_text: str
    translations: Dict[str, str]
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FavoriteItem:
        return cls(
            id=str(data["id"]),
            source_language=data.get("source_language", ""),
            source_text=data.get("source_text", ""),
            translations=dict(data.get("translations") or {}),
            timestamp=_parse_timestamp(data.get("timestamp")),
        )


@dataclass
class HistoryItem:
    """
    One completed translation batch.

    Created when every target language of a batch has finished; the
    favorite flag is the only field mutated afterwards.
    """
    source_language: str
    source_text: str
    translations: Dict[str, str] = field(default_factory=dict)
    is_favorite: bool = False
    id: str = field(default_factory=new_record_id)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_favorite(self) -> FavoriteItem:
        """Project this record into the favorites view."""
        return FavoriteItem(
            id=self.id,
            source_language=self.source_language,
            source_text=self.source_text,
            translations=dict(self.translations),
            timestamp=self.timestamp,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary for persistence."""
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> HistoryItem:
        """Create from a persisted dictionary."""
        return cls(
            id=str(data["id"]),
            source_language=data.get("source_language", ""),
            source_text=data.get("source_text", ""),
            translations=dict(data.get("translations") or {}),
            is_favorite=bool(data.get("is_favorite", False)),
            timestamp=_parse_timestamp(data.get("timestamp")),
        )

    @classmethod
    def from_favorite(cls, favorite: FavoriteItem) -> HistoryItem:
        return cls(
            id=favorite.id,
            source_language=favorite.source_language,
            source_text=favorite.source_text,
            translations=dict(favorite.translations),
            is_favorite=True,
            timestamp=favorite.timestamp,
        )


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
    return datetime.now()
