"""
Interactive terminal front end for study and quiz sessions.
"""

from typing import Callable, List, Optional
from .session import StudySession, Snapshot, QUIZ

STUDY_HELP = """
  === Study Commands ===
  next / prev        : Move to the next / previous card
  n <delta>          : Move by several cards (e.g. n -3)
  flip               : Show the other side of the card
  known / unknown    : Mark the current card
  search [query]     : Filter cards (empty query clears the filter)
  add                : Add a new card
  delete             : Delete the current card
  shuffle            : Shuffle the deck (clears known marks)
  reset              : Restore the original deck
  quiz               : Start a multiple-choice quiz
  help               : Show this help
  quit               : Exit"""

QUIZ_HELP = """
  === Quiz Commands ===
  <number>           : Choose an option (1-based)
  next / prev        : Move between questions
  results            : Finish now and show the score
  new                : Start a new quiz
  study              : Back to study mode
  help               : Show this help
  quit               : Exit"""


class StudyShell:
    """Reads commands, turns them into session intents and prints the result."""

    def __init__(self, session: StudySession, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.session = session
        self.input = input_fn
        self.print = output_fn

    def run(self):
        self.print(f"📚 Welcome to vocabdeck ({self.session.snapshot().deck_name} deck)! Type 'help' for commands.")
        self.render()
        while True:
            prompt = "\nquiz> " if self.session.mode == QUIZ else "\nstudy> "
            try:
                command = self.input(prompt)
            except EOFError:
                break
            if self.handle(command) == 'quit':
                break
        self.print("Keep studying! 📚")

    def handle(self, command: str) -> Optional[str]:
        """Process one command line. Returns 'quit' when the user wants out."""
        parts = command.strip().split(maxsplit=1)
        if not parts:
            return None
        cmd = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else ''

        if cmd in ('quit', 'exit', 'q'):
            return 'quit'
        if cmd == 'help':
            self.print(QUIZ_HELP if self.session.mode == QUIZ else STUDY_HELP)
            return None

        if self.session.mode == QUIZ:
            handled = self._quiz_command(cmd, arg)
        else:
            handled = self._study_command(cmd, arg)

        if not handled:
            self.print(f"  Unknown command: {cmd} (type 'help')")
            return None
        self.render()
        return None

    def _study_command(self, cmd: str, arg: str) -> bool:
        s = self.session
        if cmd == 'next':
            s.navigate(1)
        elif cmd == 'prev':
            s.navigate(-1)
        elif cmd == 'n':
            try:
                s.navigate(int(arg))
            except ValueError:
                self.print("  Usage: n <delta>")
        elif cmd == 'flip':
            s.toggle_flip()
        elif cmd == 'known':
            s.set_known(True)
        elif cmd == 'unknown':
            s.set_known(False)
        elif cmd == 'search':
            s.set_search(arg)
        elif cmd == 'add':
            self._add_card()
        elif cmd == 'delete':
            s.delete_active()
        elif cmd == 'shuffle':
            s.shuffle()
        elif cmd == 'reset':
            s.reset()
        elif cmd == 'quiz':
            s.start_quiz()
        else:
            return False
        return True

    def _quiz_command(self, cmd: str, arg: str) -> bool:
        s = self.session
        if cmd.isdigit():
            question = s.snapshot().question
            if question is not None:
                choice = int(cmd) - 1
                if 0 <= choice < len(question.options):
                    s.answer_question(question.id, choice)
                else:
                    self.print(f"  Choose between 1 and {len(question.options)}")
        elif cmd == 'next':
            s.next_question()
        elif cmd == 'prev':
            s.prev_question()
        elif cmd == 'results':
            if not s.show_results():
                self.print("  Answer at least one question first.")
        elif cmd == 'new':
            s.new_quiz()
        elif cmd == 'study':
            s.back_to_study()
        else:
            return False
        return True

    def _add_card(self):
        term = self.input("  Term: ")
        definition = self.input("  Definition: ")
        example = self.input("  Example (optional): ")
        tags = self.input("  Tags, comma-separated (optional): ")
        if self.session.add_card(term, definition, example, tags):
            self.print(f"  Added card: {term.strip()}")
        else:
            self.print("  Term and definition are required; card not added.")

    # === Rendering ===

    def render(self):
        snap = self.session.snapshot()
        lines = self.render_quiz(snap) if snap.mode == QUIZ else self.render_study(snap)
        self.print('\n'.join(lines))

    def render_study(self, snap: Snapshot) -> List[str]:
        lines = []
        if snap.query:
            lines.append(f"🔍 Search: {snap.query}")

        if snap.active is None:
            lines.append("No cards match." if snap.query else "The deck is empty.")
            if snap.suggestions:
                lines.append(f"Did you mean: {', '.join(snap.suggestions)}?")
            return lines

        card = snap.active.card
        lines.append(f"--- Card {snap.position + 1}/{snap.view_size} ---")
        if snap.flipped:
            lines.append(f"Definition: {card.definition}")
            if card.example:
                lines.append(f"Example: {card.example}")
        else:
            lines.append(f"Term: {card.term}")
        if card.tags:
            lines.append(f"Tags: {', '.join(card.tags)}")
        if snap.active_known:
            lines.append("✅ Known")

        p = snap.progress
        lines.append(f"📈 Known {p.known}/{p.total} ({p.pct}%)")
        return lines

    def render_quiz(self, snap: Snapshot) -> List[str]:
        if snap.question_count == 0:
            return ["No questions available. Add some cards, then try 'new'."]

        if snap.results_shown:
            lines = ["\n📊 === Quiz Complete! ==="]
            lines.append(f"✅ Correct: {snap.score.correct}/{snap.score.total} ({snap.score.pct}%)")
            lines.append("Type 'new' for another quiz or 'study' to go back.")
            return lines

        q = snap.question
        lines = [f"--- Question {snap.question_number}/{snap.question_count} ---", q.prompt]
        for i, option in enumerate(q.options, 1):
            marker = '>' if snap.selected_answer == i - 1 else ' '
            lines.append(f" {marker} {i}. {option}")
        if snap.selected_answer is not None:
            if snap.selected_answer == q.correct_index:
                lines.append("🎯 Correct!")
            else:
                lines.append(f"❌ Answer: {q.answer}")
            if q.explanation:
                lines.append(f"📝 {q.explanation}")
        return lines


def start_interactive_study(session: StudySession):
    """Start an interactive study session in the terminal."""
    StudyShell(session).run()
