"""Bounded channel carrying mode selections to the frame loop."""

import logging
import queue
from typing import Optional

from session.mode import Mode

logger = logging.getLogger(__name__)


class ModeEvents:
    """Queue of pending mode selections, drained once per tick."""

    def __init__(self, maxsize: int = 8) -> None:
        self._queue = queue.Queue(maxsize=maxsize)

    def put(self, mode: Mode) -> bool:
        """Queue a selection.

        Returns:
            bool: False when the channel is full and the selection was dropped.
        """
        try:
            self._queue.put_nowait(mode)
        except queue.Full:
            logger.warning("Mode selection %s dropped, channel is full", mode.name)
            return False
        return True

    def poll(self) -> Optional[Mode]:
        """Return the latest pending selection, or None if there is none."""
        latest = None
        while True:
            try:
                latest = self._queue.get_nowait()
            except queue.Empty:
                return latest
