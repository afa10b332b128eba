"""Undo/redo history for the editor session.

States are deep copies of the page list taken immediately before a
structural operation. Settings are not part of a state, so undo never
reverts a settings change.
"""

import copy
import logging
from collections import deque
from typing import Deque, List, Optional

from ..config.models import DEFAULT_HISTORY_LIMIT
from ..models.document import Page

logger = logging.getLogger(__name__)


class HistoryManager:
    """
    Bounded past/future stacks of page-list snapshots.

    Recording a new state discards the redo stack. When the past stack is
    full the oldest state is dropped.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError(f"History limit must be at least 1, got {limit}")
        self.limit = limit
        self._past: Deque[List[Page]] = deque(maxlen=limit)
        self._future: Deque[List[Page]] = deque(maxlen=limit)

    @property
    def can_undo(self) -> bool:
        return len(self._past) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._future) > 0

    @property
    def depth(self) -> int:
        """Number of undoable states."""
        return len(self._past)

    def record(self, pages: List[Page]) -> None:
        """Push a snapshot of ``pages`` as the state to return to on undo."""
        self._past.append(copy.deepcopy(pages))
        self._future.clear()

    def undo(self, current: List[Page]) -> Optional[List[Page]]:
        """
        Step back one state.

        Args:
            current: The live page list, saved for redo.

        Returns:
            The restored page list, or None if there is nothing to undo.
        """
        if not self._past:
            logger.debug("Undo requested with empty history")
            return None
        self._future.append(copy.deepcopy(current))
        return self._past.pop()

    def redo(self, current: List[Page]) -> Optional[List[Page]]:
        """Step forward one state; the counterpart of :meth:`undo`."""
        if not self._future:
            logger.debug("Redo requested with empty future")
            return None
        self._past.append(copy.deepcopy(current))
        return self._future.pop()

    def clear(self) -> None:
        self._past.clear()
        self._future.clear()
