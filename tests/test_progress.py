from vocabdeck import CardStore
from vocabdeck.progress import Progress, ProgressTracker


def test_progress_over_view(store):
    tracker = ProgressTracker()
    tracker.set_known(0, True)
    tracker.set_known(4, True)
    tracker.set_known(4, False)
    tracker.set_known(7, True)

    view = store.indexed()
    assert tracker.progress(view) == Progress(total=10, known=2, pct=20)
    assert tracker.progress(view[:4]) == Progress(total=4, known=1, pct=25)


def test_progress_of_empty_view():
    assert ProgressTracker().progress([]) == Progress(0, 0, 0)


def test_progress_rounds_percentage(small_deck):
    tracker = ProgressTracker()
    tracker.set_known(0, True)
    assert tracker.progress(CardStore(small_deck).indexed()).pct == 33


def test_remove_index_renumbers_later_keys():
    tracker = ProgressTracker()
    for k in (0, 2, 3, 5):
        tracker.set_known(k, True)

    tracker.remove_index(2)

    assert tracker.known == {0: True, 2: True, 4: True}


def test_clear():
    tracker = ProgressTracker()
    tracker.set_known(1, True)
    tracker.clear()
    assert not tracker.is_known(1)
