import logging
import random
import pandas as pd
from typing import Dict, List, Optional, Sequence, Any, Iterable
from dataclasses import dataclass, field
from .config import SEED_CARDS
from .text import clean_field, clean_tags, normalize_query

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Flashcard:
    term: str
    definition: str
    example: str = ''
    tags: tuple = field(default_factory=tuple)

    def search_text(self) -> str:
        """Text a search query is matched against, normalized like the query"""
        return normalize_query(' '.join([self.term, self.definition, self.example, ' '.join(self.tags)]))

    @classmethod
    def from_dict(cls, data: dict) -> Optional['Flashcard']:
        """Build a card from loose field values; None if term or definition is empty"""
        term = clean_field(data.get('term'))
        definition = clean_field(data.get('definition'))
        if not term or not definition:
            return None
        return cls(term, definition, clean_field(data.get('example')), clean_tags(data.get('tags')))

    def __str__(self):
        outstrs = [f'Term: {self.term}', f'Definition: {self.definition}']
        if self.example:
            outstrs.append(f'Example: {self.example}')
        if self.tags:
            outstrs.append(f'Tags: {", ".join(self.tags)}')
        return '\n\t'.join(outstrs)


@dataclass(frozen=True)
class IndexedCard:
    """A card paired with its stable index in the store"""
    index: int
    card: Flashcard


class CardStore:
    """Ordered, authoritative collection of flashcards"""

    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None):
        seed_cards = [Flashcard.from_dict(data) for data in (SEED_CARDS if seed is None else seed)]
        self.seed: List[Flashcard] = [card for card in seed_cards if card is not None]
        self.cards: List[Flashcard] = list(self.seed)

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def indexed(self) -> List[IndexedCard]:
        return [IndexedCard(i, card) for i, card in enumerate(self.cards)]

    def get_card(self, term: str) -> Optional[Flashcard]:
        """Get the first card with this term"""
        for card in self.cards:
            if card.term == term:
                return card
        return None

    def add(self, term: str, definition: str, example: str = '',
            tags: Sequence[str] = ()) -> Optional[Flashcard]:
        """Append a new card. Ignored when term or definition is blank."""
        card = Flashcard.from_dict({'term': term, 'definition': definition,
                                    'example': example, 'tags': tags})
        if card is None:
            logger.debug("Ignoring card with empty term or definition")
            return None

        self.cards.append(card)
        logger.debug("Added card %r at index %d", card.term, len(self.cards) - 1)
        return card

    def delete_at(self, index: int) -> Optional[Flashcard]:
        """Remove the card at a stable index. Returns it, or None if out of range."""
        if not 0 <= index < len(self.cards):
            return None
        card = self.cards.pop(index)
        logger.debug("Deleted card %r from index %d", card.term, index)
        return card

    def shuffle(self, rng: Optional[random.Random] = None):
        """Reorder the collection with a uniform Fisher-Yates shuffle"""
        (rng or random.Random()).shuffle(self.cards)
        logger.debug("Shuffled %d cards", len(self.cards))

    def reset_to_seed(self):
        self.cards = list(self.seed)
        logger.debug("Reset store to %d seed cards", len(self.cards))

    def load_from_table(self, filepath: str, sheet_name: Optional[str] = None):
        """
        Load a deck from a CSV or spreadsheet file and make it the new seed.

        The table needs 'term' and 'definition' columns; 'example' and 'tags'
        (comma-separated) are optional. Rows missing a term or definition are
        skipped.
        """
        if str(filepath).lower().endswith('.csv'):
            df = pd.read_csv(filepath, dtype=str)
        else:
            df = pd.read_excel(filepath, sheet_name=sheet_name or 0, dtype=str)

        df.columns = [str(col).strip().lower() for col in df.columns]
        missing = {'term', 'definition'} - set(df.columns)
        if missing:
            raise ValueError(f"Deck table {filepath} is missing columns: {', '.join(sorted(missing))}")

        cards = []
        for _, row in df.iterrows():
            card = Flashcard.from_dict(row.dropna().to_dict())
            if card is not None:
                cards.append(card)

        skipped = len(df) - len(cards)
        if skipped:
            logger.info("Skipped %d rows without term or definition in %s", skipped, filepath)
        logger.info("Loaded %d cards from %s", len(cards), filepath)

        self.seed = cards
        self.cards = list(cards)
