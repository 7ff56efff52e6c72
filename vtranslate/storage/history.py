"""
Local translation history with a derived favorites view.

Records live in a single diskcache entry (newest first). Favorites are the
records flagged `is_favorite`; there is no separately stored copy to keep in
sync. Every read-modify-write runs inside a diskcache transaction so two
processes sharing the directory do not overwrite each other's changes.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

import diskcache

from vtranslate.core.models import HistoryItem, FavoriteItem

logger = logging.getLogger(__name__)

HISTORY_KEY = "translationHistory"
LEGACY_FAVORITES_KEY = "translationFavorites"
MAX_HISTORY = 100


class HistoryStore:
    """Persistent, bounded translation history."""

    def __init__(
        self,
        directory: Union[str, Path] = ".cache/vtranslate/history",
        max_items: int = MAX_HISTORY
    ):
        """
        Open (or create) the store.

        Args:
            directory: diskcache directory holding the records
            max_items: Maximum number of records kept
        """
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.max_items = max_items
        self._cache = diskcache.Cache(str(self.directory))
        self._migrate_legacy_favorites()

    def _read(self) -> List[Dict[str, Any]]:
        return list(self._cache.get(HISTORY_KEY, default=[]) or [])

    def _write(self, records: List[Dict[str, Any]]) -> None:
        self._cache.set(HISTORY_KEY, records)

    def _migrate_legacy_favorites(self) -> None:
        """Fold a separately stored favorites list into the history records."""
        with self._cache.transact():
            legacy = self._cache.get(LEGACY_FAVORITES_KEY)
            if legacy is None:
                return

            records = self._read()
            by_id = {r["id"]: r for r in records}
            for data in legacy:
                favorite = FavoriteItem.from_dict(data)
                if favorite.id in by_id:
                    by_id[favorite.id]["is_favorite"] = True
                else:
                    records.append(HistoryItem.from_favorite(favorite).to_dict())

            records.sort(key=lambda r: r.get("timestamp", ""), reverse=True)
            self._write(self._evict(records))
            self._cache.delete(LEGACY_FAVORITES_KEY)
            logger.info(f"Migrated {len(legacy)} legacy favorites into history")

    def _evict(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        # Newest first, so the oldest records fall off the end
        return records[:self.max_items]

    def append(self, item: HistoryItem) -> HistoryItem:
        """Prepend a record, evicting the oldest beyond the size limit."""
        with self._cache.transact():
            records = self._read()
            existing = {r["id"] for r in records}
            while item.id in existing:
                item.id = str(int(item.id) + 1) if item.id.isdigit() else f"{item.id}-1"
            records.insert(0, item.to_dict())
            self._write(self._evict(records))
        logger.debug(f"History record {item.id} saved")
        return item

    def history(self) -> List[HistoryItem]:
        """All records, newest first."""
        return [HistoryItem.from_dict(r) for r in self._read()]

    def favorites(self) -> List[FavoriteItem]:
        """Favorited records, newest first."""
        return [item.to_favorite() for item in self.history() if item.is_favorite]

    def get(self, item_id: str) -> Optional[HistoryItem]:
        for record in self._read():
            if record["id"] == item_id:
                return HistoryItem.from_dict(record)
        return None

    def _set_favorite(self, item_id: str, value: Optional[bool]) -> Optional[HistoryItem]:
        with self._cache.transact():
            records = self._read()
            for record in records:
                if record["id"] == item_id:
                    record["is_favorite"] = (not record.get("is_favorite")) if value is None else value
                    self._write(records)
                    return HistoryItem.from_dict(record)
        return None

    def toggle_favorite(self, item_id: str) -> Optional[HistoryItem]:
        """Flip the favorite flag; returns the updated record or None if absent."""
        return self._set_favorite(item_id, None)

    def remove_favorite(self, item_id: str) -> Optional[HistoryItem]:
        """Drop a record from the favorites view, keeping it in history."""
        return self._set_favorite(item_id, False)

    def clear_favorites(self) -> int:
        """Unflag every favorite, keeping the records; returns how many changed."""
        with self._cache.transact():
            records = self._read()
            changed = 0
            for record in records:
                if record.get("is_favorite"):
                    record["is_favorite"] = False
                    changed += 1
            if changed:
                self._write(records)
        return changed

    def delete(self, item_id: str) -> bool:
        """Remove one record; returns whether it existed."""
        with self._cache.transact():
            records = self._read()
            remaining = [r for r in records if r["id"] != item_id]
            if len(remaining) == len(records):
                return False
            self._write(remaining)
        return True

    def clear(self) -> None:
        """Remove every record."""
        self._cache.delete(HISTORY_KEY)

    def close(self) -> None:
        self._cache.close()

    def __len__(self) -> int:
        return len(self._read())
