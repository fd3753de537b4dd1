import random

import pytest

from vocabdeck import CardStore
from vocabdeck.config import DeckConfig
from vocabdeck.session import StudySession


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return CardStore()


@pytest.fixture
def small_deck():
    return [
        {'term': 'alpha', 'definition': 'first letter', 'example': 'alpha male', 'tags': ['greek']},
        {'term': 'beta', 'definition': 'second letter', 'tags': ['greek']},
        {'term': 'gimel', 'definition': 'third letter', 'example': 'hebrew script', 'tags': ['hebrew']},
    ]


@pytest.fixture
def session(rng):
    return StudySession(CardStore(), DeckConfig(seed=1234), rng=rng)
