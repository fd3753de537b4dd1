"""
Filtered, order-preserving view of the deck and the cursor moving through it.
"""

from typing import List, Optional, Sequence
from . import IndexedCard
from .text import normalize_query


class StudyNavigator:
    """Tracks the search query, the position in the filtered view and the flip state."""

    def __init__(self):
        self.query = ''
        self.position = 0
        self.flipped = False  # False: showing the term, True: showing the definition

    def filtered_view(self, cards: Sequence[IndexedCard]) -> List[IndexedCard]:
        """Cards whose text contains the query, in store order."""
        needle = normalize_query(self.query)
        if not needle:
            return list(cards)
        return [ic for ic in cards if needle in ic.card.search_text()]

    def set_query(self, query: str):
        self.query = query or ''
        self.position = 0
        self.flipped = False

    def set_position(self, position: int, view_size: int):
        self.position = min(max(position, 0), max(0, view_size - 1))
        self.flipped = False

    def move(self, delta: int, view_size: int):
        self.set_position(self.position + delta, view_size)

    def toggle_flip(self):
        self.flipped = not self.flipped

    def active(self, view: Sequence[IndexedCard]) -> Optional[IndexedCard]:
        if not view:
            return None
        if 0 <= self.position < len(view):
            return view[self.position]
        return view[0]

    def reset(self):
        self.set_query('')
