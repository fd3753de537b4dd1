"""
Study/quiz session: the single state object advanced by user intents.

Each intent method applies one transition and bumps `version` when the state
changed. Degenerate requests (blank cards, navigation in an empty view, an
early results request with no answers) are ignored rather than raised, so the
session always stays renderable. The presentation layer reads state only
through `snapshot()`.
"""

import logging
import random
from typing import Optional, Tuple
from dataclasses import dataclass
from . import CardStore, IndexedCard
from .config import DeckConfig
from .navigator import StudyNavigator
from .progress import Progress, ProgressTracker
from .quiz import QuizQuestion, QuizSession, Score, make_quiz, score
from .text import find_similar_terms, parse_tags

logger = logging.getLogger(__name__)

STUDY = 'study'
QUIZ = 'quiz'


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the session handed to the presentation layer"""
    mode: str
    version: int
    query: str
    active: Optional[IndexedCard]
    flipped: bool
    view_size: int
    position: int
    progress: Progress
    active_known: bool
    deck_name: str = ''
    suggestions: Tuple[str, ...] = ()   # Similar terms when a search matches nothing
    question: Optional[QuizQuestion] = None
    question_number: int = 0
    question_count: int = 0
    selected_answer: Optional[int] = None
    score: Optional[Score] = None
    results_shown: bool = False


class StudySession:

    INTENTS = (
        'add_card', 'delete_active', 'shuffle', 'reset', 'set_search', 'navigate',
        'toggle_flip', 'set_known', 'start_quiz', 'answer_question', 'next_question',
        'prev_question', 'show_results', 'new_quiz', 'back_to_study',
    )

    def __init__(self, store: Optional[CardStore] = None, config: Optional[DeckConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config if config is not None else DeckConfig()
        self.store = store if store is not None else CardStore()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.navigator = StudyNavigator()
        self.tracker = ProgressTracker()
        self.quiz: Optional[QuizSession] = None
        self.version = 0

    @property
    def mode(self) -> str:
        return QUIZ if self.quiz is not None else STUDY

    def view(self):
        return self.navigator.filtered_view(self.store.indexed())

    def active(self) -> Optional[IndexedCard]:
        return self.navigator.active(self.view())

    def _commit(self, changed: bool = True) -> bool:
        if changed:
            self.version += 1
        return changed

    def dispatch(self, intent: str, *args, **kwargs) -> bool:
        """Apply an intent by name. Returns whether the state changed."""
        if intent not in self.INTENTS:
            raise ValueError(f"Unknown intent: {intent}")
        return getattr(self, intent)(*args, **kwargs)

    # === Study intents ===

    def add_card(self, term: str, definition: str, example: str = '', tags_csv: str = '') -> bool:
        card = self.store.add(term, definition, example, parse_tags(tags_csv))
        return self._commit(card is not None)

    def delete_active(self) -> bool:
        active = self.active()
        if active is None:
            return False

        self.store.delete_at(active.index)
        self.tracker.remove_index(active.index)
        self.navigator.set_position(self.navigator.position, len(self.view()))
        return self._commit()

    def shuffle(self) -> bool:
        self.store.shuffle(self.rng)
        # Stable indices no longer point at the same cards
        self.tracker.clear()
        self.navigator.set_position(0, len(self.view()))
        return self._commit()

    def reset(self) -> bool:
        self.store.reset_to_seed()
        self.tracker.clear()
        self.navigator.reset()
        self.quiz = None
        return self._commit()

    def set_search(self, query: str) -> bool:
        self.navigator.set_query(query)
        return self._commit()

    def navigate(self, delta: int) -> bool:
        view_size = len(self.view())
        if view_size == 0:
            return False
        self.navigator.move(delta, view_size)
        return self._commit()

    def toggle_flip(self) -> bool:
        if self.active() is None:
            return False
        self.navigator.toggle_flip()
        return self._commit()

    def set_known(self, value: bool) -> bool:
        active = self.active()
        if active is None:
            return False
        self.tracker.set_known(active.index, value)
        return self._commit()

    # === Quiz intents ===

    def start_quiz(self) -> bool:
        questions = make_quiz(self.store.cards, self.config.quiz_size, self.rng,
                              self.config.max_options)
        self.quiz = QuizSession(questions)
        logger.debug("Started quiz with %d questions", len(questions))
        return self._commit()

    def new_quiz(self) -> bool:
        return self.start_quiz()

    def back_to_study(self) -> bool:
        if self.quiz is None:
            return False
        self.quiz = None
        return self._commit()

    def answer_question(self, question_id: str, option_index: int) -> bool:
        if self.quiz is None:
            return False
        return self._commit(self.quiz.record_answer(question_id, option_index))

    def next_question(self) -> bool:
        if self.quiz is None:
            return False
        return self._commit(self.quiz.advance())

    def prev_question(self) -> bool:
        if self.quiz is None:
            return False
        return self._commit(self.quiz.retreat())

    def show_results(self) -> bool:
        if self.quiz is None:
            return False
        return self._commit(self.quiz.show_results_now())

    # === Output ===

    def _suggestions(self, view) -> Tuple[str, ...]:
        if view or not self.navigator.query:
            return ()
        similar = find_similar_terms(self.navigator.query, (card.term for card in self.store))
        return tuple(term for term, _ in similar)

    def snapshot(self) -> Snapshot:
        view = self.view()
        active = self.navigator.active(view)
        study = dict(
            mode=self.mode,
            version=self.version,
            query=self.navigator.query,
            active=active,
            flipped=self.navigator.flipped,
            view_size=len(view),
            position=self.navigator.position if view else 0,
            progress=self.tracker.progress(view),
            active_known=active is not None and self.tracker.is_known(active.index),
            deck_name=self.config.name,
            suggestions=self._suggestions(view),
        )
        if self.quiz is None:
            return Snapshot(**study)

        question = self.quiz.current
        return Snapshot(
            question=question,
            question_number=self.quiz.pointer + 1 if question else 0,
            question_count=len(self.quiz.questions),
            selected_answer=self.quiz.selected_answer(question.id) if question else None,
            score=score(self.quiz),
            results_shown=self.quiz.results_shown,
            **study
        )
