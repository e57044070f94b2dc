import math
import sys
from pathlib import Path

import pytest

# Ensure the project root is on the import path so ``pairrank`` can be imported
root_path = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root_path))

from pairrank.core.errors import DuplicateItemIdentity, NoPendingComparison, NothingToUndo
from pairrank.core.models import Choice, Item, make_items
from pairrank.core.ranking import UNDO, advance, build_ranking, insertion, start, start_session


def labels(items):
    return [item.label for item in items]


def run_always(session, choice):
    """Answer every matchup with ``choice``; return how many were asked."""
    asked = 0
    while not session.is_complete():
        assert session.current_matchup() is not None
        session.choose(choice)
        asked += 1
        assert asked < 100
    return asked


def test_always_left_puts_each_new_item_on_top():
    session = build_ranking(make_items(["D", "A", "C", "B"]))
    run_always(session, Choice.LEFT)
    assert labels(session.result()) == ["B", "C", "A", "D"]


def test_always_right_keeps_input_order():
    session = build_ranking(make_items(["D", "A", "C", "B"]))
    run_always(session, Choice.RIGHT)
    assert labels(session.result()) == ["D", "A", "C", "B"]


def test_first_matchup_probes_middle_of_order():
    existing = make_items(["A", "B", "C", "D", "E"])
    session = start_session(existing, make_items(["X"]))
    matchup = session.current_matchup()
    assert matchup.left.label == "X"
    assert matchup.right.label == "C"


@pytest.mark.parametrize("n", range(0, 17))
def test_comparison_bound_and_placement(n):
    bound = math.ceil(math.log2(n + 1))
    for target in range(n + 1):
        existing = [Item(i, f"item{i}") for i in range(n)]
        session = start_session(existing, [Item("new", "new")])
        asked = 0
        while not session.is_complete():
            probed = session.current_matchup().right.id
            session.choose(Choice.LEFT if target <= probed else Choice.RIGHT)
            asked += 1
        assert asked <= bound
        assert [item.id for item in session.result()].index("new") == target
        assert session.inserted_position() == target


def test_empty_queue_is_complete_immediately():
    existing = make_items(["A", "B", "C"])
    session = start_session(existing, [])
    assert session.is_complete()
    assert session.current_matchup() is None
    assert session.result() == existing


def test_inserting_into_empty_order_needs_no_comparison():
    session = start_session([], make_items(["Only"]))
    assert session.is_complete()
    assert labels(session.result()) == ["Only"]


def test_build_ranking_of_one_item_is_complete():
    session = build_ranking(make_items(["Solo"]))
    assert session.is_complete()
    assert labels(session.result()) == ["Solo"]


def test_duplicate_identity_across_inputs_is_rejected():
    with pytest.raises(DuplicateItemIdentity):
        start_session(make_items(["A", "B"]), make_items(["B"]))


def test_matchup_sides_are_never_the_same_item():
    session = build_ranking(make_items(["A", "B", "C", "D", "E", "F"]))
    while not session.is_complete():
        matchup = session.current_matchup()
        assert matchup.left != matchup.right
        session.choose(Choice.RIGHT)


def test_stray_choose_is_ignored():
    session = start_session(make_items(["A"]), [])
    before = session.state
    session.choose(Choice.LEFT)
    assert session.state is before


def test_strict_session_raises_on_stray_calls():
    session = start_session(make_items(["A"]), [], strict=True)
    with pytest.raises(NoPendingComparison):
        session.choose(Choice.LEFT)
    with pytest.raises(NothingToUndo):
        session.go_back()


def test_strict_mode_from_environment(monkeypatch):
    monkeypatch.setenv("PAIRRANK_STRICT", "1")
    session = start_session(make_items(["A"]), [])
    assert session.strict is True
    monkeypatch.setenv("PAIRRANK_STRICT", "0")
    assert start_session(make_items(["A"]), []).strict is False


def test_advance_is_pure():
    state = start(make_items(["A", "B"]), make_items(["C"]))
    after = advance(state, "l")
    assert state.current_matchup is not None
    assert after is not state
    assert labels(state.working_order) == ["A", "B"]
    assert advance(after, UNDO) == state


def test_advance_rejects_unknown_event():
    state = start(make_items(["A"]), make_items(["B"]))
    with pytest.raises(ValueError):
        advance(state, "sideways")


def test_choose_accepts_choice_values_and_rejects_others():
    state = start(make_items(["A"]), make_items(["B"]))
    assert labels(insertion.choose(state, "left").working_order) == ["B", "A"]
    assert labels(insertion.choose(state, "right").working_order) == ["A", "B"]
    with pytest.raises(ValueError):
        insertion.choose(state, "sideways")
