import sys
from pathlib import Path

import pytest

root_path = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root_path))

from pairrank.core.collaboration import CollaborativeList
from pairrank.core.errors import DuplicateItemIdentity, SessionIncomplete, UnknownItemIdentity
from pairrank.core.models import Choice, Contribution
from pairrank.core.ranking import build_ranking


def labels(items):
    return [item.label for item in items]


@pytest.fixture()
def movies():
    return CollaborativeList.from_labels("Movies", ["A", "B", "C"])


def test_same_person_replaces_rather_than_duplicates(movies):
    assert movies.upsert_contribution(Contribution("u1", ["A", "B", "C"]))
    assert movies.upsert_contribution(Contribution("u1", ["C", "B", "A"]))
    assert len(movies.contributions) == 1
    assert movies.contributions[0].ranking == ("C", "B", "A")
    assert labels(movies.consensus()) == ["C", "B", "A"]


def test_contributions_keep_first_submission_order(movies):
    movies.upsert_contribution(Contribution("u1", ["A"]))
    movies.upsert_contribution(Contribution("u2", ["B"]))
    movies.upsert_contribution(Contribution("u1", ["C"]))
    assert [c.person_id for c in movies.contributions] == ["u1", "u2"]


def test_consensus_follows_contributions(movies):
    assert labels(movies.consensus()) == ["A", "B", "C"]
    movies.upsert_contribution(Contribution("u1", ["A", "B", "C"]))
    movies.upsert_contribution(Contribution("u2", ["B", "C", "A"]))
    assert labels(movies.consensus())[0] == "B"


def test_single_contributor_consensus_matches_their_ranking(movies):
    movies.upsert_contribution(Contribution("u1", ["C", "A", "B"]))
    assert [item.id for item in movies.consensus()] == ["C", "A", "B"]


def test_non_collaborative_list_does_not_store(movies):
    movies.set_collaborative(False)
    assert not movies.upsert_contribution(Contribution("u1", ["B", "A", "C"]))
    assert movies.contributions == []


def test_disabling_collaboration_clears_contributions(movies):
    movies.upsert_contribution(Contribution("u1", ["A", "B", "C"]))
    movies.upsert_contribution(Contribution("u2", ["C", "B", "A"]))
    movies.set_collaborative(False)
    assert movies.contributions == []
    assert labels(movies.consensus()) == ["A", "B", "C"]

    movies.set_collaborative(True)
    assert movies.upsert_contribution(Contribution("u1", ["B", "A", "C"]))
    assert labels(movies.consensus()) == ["B", "A", "C"]


def test_empty_ranking_is_accepted(movies):
    assert movies.upsert_contribution(Contribution("u1", []))
    assert movies.contributions[0].ranking == ()


def test_bad_contribution_is_not_stored(movies):
    with pytest.raises(UnknownItemIdentity):
        movies.upsert_contribution(Contribution("u1", ["A", "Nope"]))
    assert movies.contributions == []


def test_record_finished_session(movies):
    session = build_ranking(movies.items)
    while not session.is_complete():
        session.choose(Choice.LEFT)
    assert movies.record_session("u1", session, display_name="Una")

    stored = movies.contributions[0]
    assert stored.display_name == "Una"
    assert stored.ranking == ("C", "B", "A")
    assert stored.updated_at is not None


def test_record_unfinished_session_raises(movies):
    session = build_ranking(movies.items)
    with pytest.raises(SessionIncomplete) as exc:
        movies.record_session("u1", session)
    assert exc.value.remaining == 2


def test_removing_item_strips_it_from_rankings(movies):
    movies.upsert_contribution(Contribution("u1", ["B", "A", "C"]))
    movies.remove_item("A")
    assert labels(movies.items) == ["B", "C"]
    assert movies.contributions[0].ranking == ("B", "C")
    assert labels(movies.consensus()) == ["B", "C"]


def test_add_and_remove_item_validate_identity(movies):
    movies.add_item("D")
    assert labels(movies.items) == ["A", "B", "C", "D"]
    with pytest.raises(DuplicateItemIdentity):
        movies.add_item("D")
    with pytest.raises(UnknownItemIdentity):
        movies.remove_item("Z")
