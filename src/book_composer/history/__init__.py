"""Bounded undo/redo history of page-list snapshots."""

from .history_manager import HistoryManager

__all__ = ["HistoryManager"]
