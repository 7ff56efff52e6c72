"""Local persistence."""

from .history import HistoryStore

__all__ = ['HistoryStore']
