from vocabdeck import CardStore
from vocabdeck.navigator import StudyNavigator


def test_empty_query_returns_everything_in_order(store):
    nav = StudyNavigator()
    view = nav.filtered_view(store.indexed())
    assert [ic.index for ic in view] == list(range(len(store)))


def test_query_matches_term_definition_example_and_tags(small_deck):
    cards = CardStore(small_deck).indexed()
    nav = StudyNavigator()

    for query, expected in [('BETA', [1]), ('letter', [0, 1, 2]), ('script', [2]),
                            ('greek', [0, 1]), ('  Hebrew ', [2])]:
        nav.set_query(query)
        assert [ic.index for ic in nav.filtered_view(cards)] == expected


def test_query_without_match_gives_empty_view(store):
    nav = StudyNavigator()
    nav.set_query('zzzz-not-there')
    view = nav.filtered_view(store.indexed())
    assert view == []
    assert nav.active(view) is None


def test_set_position_clamps_and_resets_flip():
    nav = StudyNavigator()
    nav.toggle_flip()
    nav.set_position(50, 4)
    assert nav.position == 3
    assert nav.flipped is False

    nav.set_position(-2, 4)
    assert nav.position == 0

    nav.set_position(3, 0)
    assert nav.position == 0


def test_move_is_relative():
    nav = StudyNavigator()
    nav.move(2, 5)
    nav.move(1, 5)
    assert nav.position == 3
    nav.move(-10, 5)
    assert nav.position == 0


def test_toggle_flip_keeps_position():
    nav = StudyNavigator()
    nav.set_position(2, 5)
    nav.toggle_flip()
    assert nav.flipped is True
    assert nav.position == 2


def test_active_falls_back_to_first_card(store):
    nav = StudyNavigator()
    view = nav.filtered_view(store.indexed())
    nav.position = 42
    assert nav.active(view) is view[0]


def test_set_query_resets_position():
    nav = StudyNavigator()
    nav.set_position(3, 5)
    nav.set_query('x')
    assert nav.position == 0


def test_query_whitespace_matches_card_whitespace():
    cards = CardStore([{'term': 'fruit', 'definition': 'red  apple'},
                       {'term': 'berry', 'definition': 'red\tcurrant'}]).indexed()
    nav = StudyNavigator()

    nav.set_query('red  apple')
    assert [ic.index for ic in nav.filtered_view(cards)] == [0]

    nav.set_query('red apple')
    assert [ic.index for ic in nav.filtered_view(cards)] == [0]

    nav.set_query('red currant')
    assert [ic.index for ic in nav.filtered_view(cards)] == [1]
