import random

from core.desktop.devtools.interface.tui_navigation import ListNavigator, move_vertical_selection


def test_next_wraps_from_last_to_first():
    nav = ListNavigator(3)
    nav.select(2)
    assert nav.next() == 0
    assert nav.scroll_position == 0


def test_previous_wraps_from_first_to_last():
    nav = ListNavigator(3)
    assert nav.selected == 0
    assert nav.previous() == 2
    assert nav.scroll_position == 2


def test_empty_list_navigation_is_noop():
    nav = ListNavigator(0)
    assert nav.selected is None
    assert nav.next() is None
    assert nav.previous() is None
    assert nav.selected is None and nav.scroll_position == 0


def test_random_walk_keeps_selection_in_range_and_synced():
    rng = random.Random(7)
    for count in range(1, 6):
        nav = ListNavigator(count)
        for _ in range(50):
            (nav.next if rng.random() < 0.5 else nav.previous)()
            assert 0 <= nav.selected < count
            assert nav.scroll_position == nav.selected


def test_select_ignores_out_of_range():
    nav = ListNavigator(2)
    nav.select(1)
    assert nav.select(5) == 1
    assert nav.select(None) == 1
    assert nav.selected == 1 and nav.scroll_position == 1


def test_set_count_clamps_selection():
    nav = ListNavigator(5)
    nav.select(4)
    nav.set_count(2)
    assert nav.selected == 1 and nav.scroll_position == 1
    nav.set_count(0)
    assert nav.selected is None
    nav.set_count(3)
    assert nav.selected == 0


def test_move_vertical_selection_steps_with_wrap():
    nav = ListNavigator(4)
    assert move_vertical_selection(nav, 3) == 3
    assert move_vertical_selection(nav, 1) == 0
    assert move_vertical_selection(nav, -2) == 2
