#!/usr/bin/env python3

import logging
import os
import sys

from vocabdeck import CardStore
from vocabdeck.config import DeckConfig
from vocabdeck.session import StudySession
from vocabdeck.shell import start_interactive_study


def main():
    logging.basicConfig(
        level=os.environ.get("VOCABDECK_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Optional JSON config as the first argument
    config = DeckConfig.from_json(sys.argv[1]) if len(sys.argv) > 1 else DeckConfig()

    store = CardStore()
    if config.deck_path:
        print(f"Loading deck from {config.deck_path}...")
        store.load_from_table(config.deck_path)
    print(f"Loaded {len(store)} cards")

    start_interactive_study(StudySession(store, config))


if __name__ == "__main__":
    main()
