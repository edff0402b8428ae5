from datetime import timedelta

import pytest

from shared.models.models import (
    MatchEdge,
    Narrative,
    get_recent_matches,
    get_tags_by_narrative,
    narratives_with_tag,
    stored_score,
    utcnow,
    validate_narrative,
)


def _narrative(author_id=1, text="I was flying over mountains", language="en", tags=None):
    n = Narrative.create(author_id=author_id, text=text, language=language)
    if tags:
        n.set_tags(tags)
    return n


# ----------------------------
# Tags
# ----------------------------

def test_set_tags_normalizes_and_orders(db):
    n = _narrative()
    assert n.set_tags(["Flying", "flying", " Mountain ", ""]) == ["flying", "mountain"]
    assert n.get_tags() == ["flying", "mountain"]


def test_tags_are_immutable(db):
    n = _narrative(tags=["flying"])
    with pytest.raises(ValueError):
        n.set_tags(["mountain"])
    assert n.get_tags() == ["flying"]


def test_get_tags_by_narrative(db):
    a = _narrative(tags=["flying", "mountain"])
    b = _narrative(author_id=2, tags=["forest"])
    c = _narrative(author_id=3)
    assert get_tags_by_narrative() == {a.id: ["flying", "mountain"], b.id: ["forest"]}
    assert get_tags_by_narrative([b.id, c.id]) == {b.id: ["forest"]}
    assert get_tags_by_narrative([]) == {}


def test_narratives_with_tag(db):
    a = _narrative(tags=["flying", "mountain"])
    _narrative(author_id=2, tags=["forest"])
    b = _narrative(author_id=3, tags=["flying"])
    assert {n.id for n in narratives_with_tag("Flying")} == {a.id, b.id}
    assert narratives_with_tag("") == []


# ----------------------------
# Match edges
# ----------------------------

def test_link_writes_both_directions_once(db):
    a = _narrative(author_id=1)
    b = _narrative(author_id=2)

    assert MatchEdge.link(a.id, b.id, 72.5) is True
    assert MatchEdge.link(a.id, b.id, 72.5) is False
    assert MatchEdge.link(b.id, a.id, 90) is False

    edges = list(MatchEdge.select())
    assert len(edges) == 2
    assert {(e.narrative_id, e.matched_narrative_id) for e in edges} == {(a.id, b.id), (b.id, a.id)}
    assert {e.score for e in edges} == {73}


def test_recent_matches_window(db):
    a = _narrative(author_id=1)
    b = _narrative(author_id=2)
    MatchEdge.link(a.id, b.id, 80)

    assert [e.matched_narrative_id for e in get_recent_matches(1)] == [b.id]
    assert [e.matched_narrative_id for e in get_recent_matches(2)] == [a.id]

    MatchEdge.update(created_at=utcnow() - timedelta(days=3)).execute()
    assert get_recent_matches(1, hours=24) == []
    assert len(get_recent_matches(1, hours=96)) == 1


# ----------------------------
# Validation / score coercion
# ----------------------------

@pytest.mark.parametrize("value,expected", [
    (72.5, 73),
    (72.49, 72),
    (59.5, 60),
    (60, 60),
    (-3, 0),
    (150.2, 100),
    (float("nan"), 0),
    (float("inf"), 0),
    ("81.6", 82),
    ("high", 0),
    (None, 0),
])
def test_stored_score(value, expected):
    assert stored_score(value) == expected


def test_validate_narrative():
    assert validate_narrative(1, "I was flying", "en") == []
    assert validate_narrative(1, "I was flying", None) == []
    assert "author_id is required" in validate_narrative(None, "x", "en")
    assert "author_id must be an integer" in validate_narrative("1", "x", "en")
    assert "author_id must be an integer" in validate_narrative(True, "x", "en")
    assert "text is required" in validate_narrative(1, "   ", "en")
    assert len(validate_narrative(1, "x" * 10001, "en")) == 1
    assert "language must be a string" in validate_narrative(1, "x", 5)
