from typing import Dict, List, Optional, Any
from dataclasses import dataclass
import json


@dataclass(frozen=True)
class DeckConfig:
    """Configuration for a study deck and the quizzes generated from it"""
    name: str = "vocabulary"
    quiz_size: int = 5              # Questions per quiz
    max_options: int = 4            # Correct term plus distractors
    seed: Optional[int] = None      # Seed for the session's random source
    deck_path: Optional[str] = None  # Table file replacing the built-in seed deck

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'quiz_size': self.quiz_size,
            'max_options': self.max_options,
            'seed': self.seed,
            'deck_path': self.deck_path
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'DeckConfig':
        config = cls(**data)
        if config.quiz_size < 1:
            raise ValueError(f"quiz_size must be positive, got {config.quiz_size}")
        if config.max_options < 1:
            raise ValueError(f"max_options must be positive, got {config.max_options}")
        return config

    @classmethod
    def from_json(cls, filepath: str) -> 'DeckConfig':
        with open(filepath, encoding='utf-8') as f:
            return cls.from_dict(json.load(f))


# Built-in deck loaded at startup and on reset
SEED_CARDS: List[Dict[str, Any]] = [
    {
        'term': 'Ephemeral',
        'definition': 'Lasting for a very short time',
        'example': 'The ephemeral beauty of cherry blossoms draws crowds every spring.',
        'tags': ['adjective', 'time'],
    },
    {
        'term': 'Ubiquitous',
        'definition': 'Present, appearing, or found everywhere',
        'example': 'Smartphones have become ubiquitous in modern life.',
        'tags': ['adjective'],
    },
    {
        'term': 'Serendipity',
        'definition': 'The occurrence of events by chance in a happy or beneficial way',
        'example': 'Finding that rare book in a flea market was pure serendipity.',
        'tags': ['noun', 'luck'],
    },
    {
        'term': 'Pragmatic',
        'definition': 'Dealing with things sensibly and realistically',
        'example': 'She took a pragmatic approach to solving the budget problem.',
        'tags': ['adjective', 'attitude'],
    },
    {
        'term': 'Eloquent',
        'definition': 'Fluent or persuasive in speaking or writing',
        'example': 'His eloquent speech moved the entire audience.',
        'tags': ['adjective', 'communication'],
    },
    {
        'term': 'Resilient',
        'definition': 'Able to recover quickly from difficult conditions',
        'example': 'Children are often remarkably resilient after setbacks.',
        'tags': ['adjective', 'attitude'],
    },
    {
        'term': 'Meticulous',
        'definition': 'Showing great attention to detail; very careful and precise',
        'example': 'The watchmaker was meticulous about every tiny gear.',
        'tags': ['adjective'],
    },
    {
        'term': 'Ambiguous',
        'definition': 'Open to more than one interpretation',
        'example': 'The contract wording was ambiguous and led to a dispute.',
        'tags': ['adjective', 'communication'],
    },
    {
        'term': 'Candid',
        'definition': 'Truthful and straightforward; frank',
        'example': 'She gave a candid account of her mistakes.',
        'tags': ['adjective', 'communication'],
    },
    {
        'term': 'Benevolent',
        'definition': 'Well meaning and kindly',
        'example': 'A benevolent donor funded the new library wing.',
        'tags': ['adjective', 'character'],
    },
]
