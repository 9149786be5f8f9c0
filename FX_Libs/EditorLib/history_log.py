"""
Undo history for FX Studio.

The log is an ordered list of snapshots plus a cursor. Committing while the
cursor is not at the tail discards every entry after it, so once a new
effect is committed after an undo the undone states are gone for good.
There is deliberately no redo.

Classes:
    HistoryEntry: Snapshot of the effect stack and the image it produced
    HistoryLog: Append/truncate log with undo
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from FX_Libs.EffectsLib.effect_settings import AppliedEffect
from FX_Libs.RasterLib.raster_buffer import RasterBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """One recorded editing state.

    Attributes:
        result_image: Rendered image for this state
        effects: Snapshot of the effect stack that produced result_image
        timestamp: Seconds since the epoch when the state was recorded
    """
    result_image: RasterBuffer
    effects: Tuple[AppliedEffect, ...]
    timestamp: float = field(default_factory=time.time)


class HistoryLog:
    """
    Append-only history with a current index.

    The index is -1 while the log is empty. Undo never moves below index 0,
    which holds the oldest retained state.
    """

    def __init__(self) -> None:
        self._entries: List[HistoryEntry] = []
        self._index = -1

    @property
    def index(self) -> int:
        """Position of the current entry, -1 while empty."""
        return self._index

    @property
    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def current(self) -> Optional[HistoryEntry]:
        """The entry at the current index, or None while empty."""
        if 0 <= self._index < len(self._entries):
            return self._entries[self._index]
        return None

    @property
    def can_undo(self) -> bool:
        """True when undo would move to an earlier entry."""
        return self._index > 0

    def commit(
        self,
        effects: Iterable[AppliedEffect],
        result_image: RasterBuffer,
        timestamp: Optional[float] = None,
    ) -> HistoryEntry:
        """
        Record a new state after the current index.

        Entries beyond the current index are discarded first.

        Args:
            effects: The effect stack that produced result_image
            result_image: Rendered image for that stack
            timestamp: Seconds since the epoch; defaults to now

        Returns:
            The appended entry
        """
        entry = HistoryEntry(
            result_image=result_image,
            effects=tuple(effects),
            timestamp=time.time() if timestamp is None else float(timestamp),
        )

        dropped = len(self._entries) - (self._index + 1)
        if dropped > 0:
            logger.debug(f"Discarding {dropped} history entries after index {self._index}")
        del self._entries[self._index + 1:]

        self._entries.append(entry)
        self._index = len(self._entries) - 1
        return entry

    def undo(self) -> Optional[HistoryEntry]:
        """
        Step back one entry.

        Returns:
            The entry at the new index, or None if already at index 0 (or empty)
        """
        if self._index <= 0:
            return None

        self._index -= 1
        return self._entries[self._index]

    def clear(self) -> None:
        """Drop every entry and reset the index to -1."""
        self._entries.clear()
        self._index = -1

    def __len__(self) -> int:
        return len(self._entries)
