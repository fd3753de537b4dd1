"""
Multiple-choice quiz generation and quiz session state.
"""

import logging
import random
from typing import Dict, List, NamedTuple, Optional, Sequence
from dataclasses import dataclass
from . import Flashcard

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = 'Which term matches this definition?\n"{definition}"'


@dataclass(frozen=True)
class QuizQuestion:
    id: str
    prompt: str
    options: tuple
    correct_index: int
    explanation: str = ''

    @property
    def answer(self) -> str:
        return self.options[self.correct_index]


def _distractors(card: Flashcard, cards: Sequence[Flashcard], rng: random.Random,
                 limit: int) -> List[str]:
    """Shuffled terms of other cards, never the card's own term and never twice."""
    pool = [other.term for other in cards if other.term != card.term]
    rng.shuffle(pool)

    picked = []
    for term in pool:
        if len(picked) >= limit:
            break
        if term not in picked:
            picked.append(term)
    return picked


def make_question(card: Flashcard, ordinal: int, cards: Sequence[Flashcard],
                  rng: random.Random, max_options: int = 4) -> QuizQuestion:
    """Build one question asking for the term of a card's definition."""
    options = [card.term] + _distractors(card, cards, rng, max(0, max_options - 1))
    rng.shuffle(options)

    return QuizQuestion(
        id=f"q{ordinal}-{card.term}",
        prompt=PROMPT_TEMPLATE.format(definition=card.definition),
        options=tuple(options),
        correct_index=options.index(card.term),
        explanation=card.example or ''
    )


def make_quiz(cards: Sequence[Flashcard], count: int = 5,
              rng: Optional[random.Random] = None, max_options: int = 4) -> List[QuizQuestion]:
    """
    Generate up to `count` questions from the full deck.

    Args:
        cards: Every card in the deck; search filters never shrink the pool
        count: Number of questions wanted
        rng: Random source, so tests can pin the output
        max_options: Options per question when enough distinct terms exist

    Returns:
        Questions in selection order. Small decks give fewer questions and
        fewer options; an empty deck gives an empty quiz.
    """
    rng = rng or random.Random()
    cards = list(cards)

    selected = list(cards)
    rng.shuffle(selected)
    selected = selected[:max(0, min(count, len(selected)))]

    questions = [make_question(card, ordinal, cards, rng, max_options)
                 for ordinal, card in enumerate(selected, 1)]
    logger.debug("Generated quiz with %d questions from %d cards", len(questions), len(cards))
    return questions


class QuizSession:
    """Question pointer, recorded answers and the results flag for one quiz."""

    def __init__(self, questions: Sequence[QuizQuestion]):
        self.questions: List[QuizQuestion] = list(questions)
        self.pointer = 0
        self.answers: Dict[str, int] = {}
        self.results_shown = False
        self._ids = {q.id for q in self.questions}

    @property
    def current(self) -> Optional[QuizQuestion]:
        if not self.questions:
            return None
        return self.questions[min(self.pointer, len(self.questions) - 1)]

    def selected_answer(self, question_id: str) -> Optional[int]:
        return self.answers.get(question_id)

    def record_answer(self, question_id: str, option_index: int) -> bool:
        if self.results_shown or question_id not in self._ids:
            return False
        self.answers[question_id] = option_index
        return True

    def advance(self) -> bool:
        if self.results_shown or not self.questions:
            return False
        if self.pointer >= len(self.questions) - 1:
            self.results_shown = True
            logger.debug("Quiz finished, showing results")
        else:
            self.pointer += 1
        return True

    def retreat(self) -> bool:
        if self.results_shown or self.pointer == 0:
            return False
        self.pointer -= 1
        return True

    def show_results_now(self) -> bool:
        if self.results_shown or not self.answers:
            return False
        self.results_shown = True
        logger.debug("Showing results early after %d answers", len(self.answers))
        return True


class Score(NamedTuple):
    correct: int
    total: int

    @property
    def pct(self) -> int:
        return round(self.correct / max(self.total, 1) * 100)


def score(session: QuizSession) -> Score:
    """Count answers matching the correct option; unanswered questions never count."""
    correct = sum(1 for q in session.questions
                  if session.answers.get(q.id) == q.correct_index)
    return Score(correct, len(session.questions))
