from typing import Dict, NamedTuple, Sequence
from . import IndexedCard


class Progress(NamedTuple):
    total: int
    known: int
    pct: int


class ProgressTracker:
    """Known/unknown flags keyed by a card's stable index in the store."""

    def __init__(self):
        self.known: Dict[int, bool] = {}

    def is_known(self, index: int) -> bool:
        return self.known.get(index, False)

    def set_known(self, index: int, value: bool):
        if value:
            self.known[index] = True
        else:
            self.known.pop(index, None)

    def remove_index(self, index: int):
        """Drop the flag of a deleted card and shift later keys down by one."""
        self.known = {
            (k - 1 if k > index else k): v
            for k, v in self.known.items()
            if k != index
        }

    def clear(self):
        self.known = {}

    def progress(self, view: Sequence[IndexedCard]) -> Progress:
        total = len(view)
        known = sum(1 for ic in view if self.is_known(ic.index))
        return Progress(total, known, round(known / max(total, 1) * 100))
