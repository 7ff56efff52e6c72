"""
Tests for core data models.
"""

import pytest
from datetime import datetime

from vtranslate.core.models import (
    HistoryItem,
    FavoriteItem,
    TranslationOutcome,
    TranslationError,
    ErrorCode,
    new_record_id
)


class TestHistoryItem:
    """Test HistoryItem."""

    def test_defaults(self):
        item = HistoryItem(source_language="English", source_text="Hi")
        assert item.id.isdigit()
        assert item.is_favorite is False
        assert item.translations == {}
        assert isinstance(item.timestamp, datetime)

    def test_dict_round_trip(self, sample_item):
        sample_item.is_favorite = True
        restored = HistoryItem.from_dict(sample_item.to_dict())

        assert restored == sample_item

    def test_to_dict_is_json_compatible(self, sample_item):
        data = sample_item.to_dict()
        assert isinstance(data["timestamp"], str)
        assert data["translations"] == {"Spanish": "Hola", "French": "Bonjour"}

    def test_to_favorite_drops_flag(self, sample_item):
        favorite = sample_item.to_favorite()

        assert isinstance(favorite, FavoriteItem)
        assert favorite.id == sample_item.id
        assert favorite.source_text == "Hello"
        assert favorite.translations == sample_item.translations
        assert not hasattr(favorite, "is_favorite")

    def test_favorite_translations_are_copied(self, sample_item):
        favorite = sample_item.to_favorite()
        favorite.translations["German"] = "Hallo"
        assert "German" not in sample_item.translations

    def test_from_favorite_marks_favorite(self, sample_item):
        item = HistoryItem.from_favorite(sample_item.to_favorite())
        assert item.is_favorite is True
        assert item.id == sample_item.id

    def test_from_dict_accepts_zulu_timestamps(self):
        item = HistoryItem.from_dict({
            "id": 123,
            "source_language": "English",
            "source_text": "x",
            "translations": {},
            "timestamp": "2024-11-05T10:00:00.000Z",
        })
        assert item.id == "123"
        assert item.timestamp.year == 2024


def test_record_ids_are_millisecond_timestamps():
    record_id = new_record_id()
    assert record_id.isdigit()
    assert len(record_id) >= 13


def test_outcome_ok():
    assert TranslationOutcome(language="Spanish", text="Hola").ok
    failed = TranslationOutcome(
        language="Spanish",
        error=TranslationError("boom", ErrorCode.TRANSLATION_ERROR)
    )
    assert not failed.ok


def test_error_codes_match_wire_values():
    assert ErrorCode.TRANSLATION_ERROR.value == "TRANSLATION_ERROR"
    assert ErrorCode.DETECTION_ERROR == "DETECTION_ERROR"
