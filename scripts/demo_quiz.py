#!/usr/bin/env python3

import random

from vocabdeck import CardStore
from vocabdeck.quiz import make_quiz


def main():
    store = CardStore()
    print(f"Loaded {len(store)} seed cards\n")

    questions = make_quiz(store.cards, 3, rng=random.Random(7))
    by_term = {card.term: card for card in store}
    if not questions:
        print("No cards suitable for quiz found!")
        return

    print("=== Sample Quiz Questions ===")
    for question in questions:
        print(f"\n[{question.id}] {question.prompt}")
        for i, option in enumerate(question.options, 1):
            print(f"  {i}. {option}")
        print(f"Answer card:\n\t{by_term[question.answer]}")

    print("\nTo start studying, run:")
    print("  python scripts/start_study.py")


if __name__ == "__main__":
    main()
