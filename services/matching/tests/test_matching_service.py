import pytest

from services.matching import matching_service
from services.matching.matching_core import MatchingConfig
from services.matching.matching_service import MatchingService
from shared.models.models import MatchEdge, Narrative, NarrativeTag

TEXT_A = "I was flying over snowy mountains and a dark forest near the ocean with my brother"
TEXT_B = "I was flying over snowy mountains and a dark forest near the river with my sister"


@pytest.fixture
def service(db, tagger):
    return MatchingService(tag_generator=tagger)


def _narrative(author_id, text, tags, language="en"):
    n = Narrative.create(author_id=author_id, text=text, language=language)
    n.set_tags(tags)
    return n


def _edges():
    return {(e.narrative_id, e.matched_narrative_id): e.score for e in MatchEdge.select()}


# ----------------------------
# on_narrative_created
# ----------------------------

def test_four_of_five_tags_creates_symmetric_edges(service):
    a = _narrative(1, TEXT_A, ["flying", "mountain", "forest", "ocean", "brother"])
    b = _narrative(2, TEXT_B, ["flying", "mountain", "forest", "river", "brother"])

    assert service.on_narrative_created(b.id) == 1

    edges = _edges()
    assert set(edges) == {(a.id, b.id), (b.id, a.id)}
    assert edges[(a.id, b.id)] == edges[(b.id, a.id)]
    assert edges[(a.id, b.id)] >= 60


def test_repeated_resolution_creates_no_duplicates(service):
    a = _narrative(1, TEXT_A, ["flying", "mountain", "forest", "ocean", "brother"])
    b = _narrative(2, TEXT_B, ["flying", "mountain", "forest", "river", "brother"])

    assert service.on_narrative_created(b.id) == 1
    assert service.on_narrative_created(b.id) == 0
    assert service.on_narrative_created(a.id) == 0
    assert MatchEdge.select().count() == 2


def test_same_author_never_matches(service):
    a = _narrative(1, TEXT_A, ["flying", "mountain", "forest"])
    b = _narrative(1, TEXT_A, ["flying", "mountain", "forest"])

    assert service.on_narrative_created(b.id) == 0
    assert service.on_narrative_created(a.id) == 0
    assert MatchEdge.select().count() == 0


def test_low_tag_overlap_is_skipped(service):
    _narrative(1, TEXT_A, ["flying", "mountain", "forest", "ocean", "brother"])
    b = _narrative(2, TEXT_A, ["flying", "cat", "dog", "castle", "sister"])

    assert service.on_narrative_created(b.id) == 0
    assert MatchEdge.select().count() == 0


def test_tag_only_coincidence_is_skipped(service):
    _narrative(1, "Volavo sopra le montagne", ["flying", "mountain", "forest"], language="it")
    b = _narrative(2, TEXT_A, ["flying", "mountain", "forest", "ocean", "brother"])

    # tag score 60, content near 0 -> final below 60
    assert service.on_narrative_created(b.id) == 0


def test_missing_or_untagged_narrative(service):
    assert service.on_narrative_created(9999) == 0

    n = Narrative.create(author_id=1, text=TEXT_A, language="en")
    assert service.on_narrative_created(n.id) == 0


def test_candidate_failure_is_logged_and_skipped(service, monkeypatch):
    _narrative(1, TEXT_A, ["flying", "mountain", "forest", "ocean", "brother"])
    b = _narrative(2, TEXT_B, ["flying", "mountain", "forest", "river", "brother"])

    def boom(*args, **kwargs):
        raise RuntimeError("scoring exploded")

    monkeypatch.setattr(matching_service, "evaluate_pair", boom)
    assert service.on_narrative_created(b.id) == 0
    assert service.stats["errors"] == 1
    assert MatchEdge.select().count() == 0


def test_custom_config(db, tagger):
    service = MatchingService(config=MatchingConfig(min_final_score=95.0), tag_generator=tagger)
    _narrative(1, TEXT_A, ["flying", "mountain", "forest", "ocean", "brother"])
    b = _narrative(2, TEXT_B, ["flying", "mountain", "forest", "river", "brother"])
    assert service.on_narrative_created(b.id) == 0


# ----------------------------
# recalculate_all_matches
# ----------------------------

def test_recalculate_on_empty_store(service):
    assert service.recalculate_all_matches() == 0
    assert MatchEdge.select().count() == 0


def test_recalculate_rebuilds_edges(service):
    a = _narrative(1, TEXT_A, ["flying", "mountain", "forest", "ocean", "brother"])
    b = _narrative(2, TEXT_B, ["flying", "mountain", "forest", "river", "brother"])
    c = _narrative(3, "A castle in the clouds", ["castle", "cloud"])

    # stale edge that no longer passes the thresholds
    MatchEdge.link(a.id, c.id, 99)

    assert service.recalculate_all_matches() == 1
    assert set(_edges()) == {(a.id, b.id), (b.id, a.id)}


# ----------------------------
# create_narrative / queries
# ----------------------------

def test_create_narrative_tags_and_matches(service):
    first = service.create_narrative(1, "I was flying over mountains", "en-US")
    assert first.language == "en"
    assert "flying" in first.get_tags()

    second = service.create_narrative(2, "I was flying over mountains", "en")
    assert second.get_tags() == first.get_tags()

    # identical tags (100) and identical text (84): 0.6 * 100 + 0.4 * 84
    matches = service.matches_for_narrative(first.id)
    assert [(m.matched_narrative_id, m.score) for m in matches] == [(second.id, 94)]


def test_create_narrative_rejects_invalid_input(service):
    with pytest.raises(ValueError):
        service.create_narrative(1, "   ", "en")
    with pytest.raises(ValueError):
        service.create_narrative(None, "I was flying", "en")
    assert Narrative.select().count() == 0


def test_create_narrative_rolls_back_when_resolution_fails(service, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(service, "_candidate_ids", boom)
    with pytest.raises(RuntimeError):
        service.create_narrative(1, "I was flying over mountains", "en")

    assert Narrative.select().count() == 0
    assert NarrativeTag.select().count() == 0
    assert MatchEdge.select().count() == 0


def test_create_narrative_same_author_no_match(service):
    first = service.create_narrative(1, "I was flying over mountains", "en")
    service.create_narrative(1, "I was flying over mountains", "en")
    assert service.matches_for_narrative(first.id) == []


def test_new_matches_for_author(service):
    a = _narrative(1, TEXT_A, ["flying", "mountain", "forest", "ocean", "brother"])
    b = _narrative(2, TEXT_B, ["mountain", "flying", "forest", "river", "brother"])
    service.on_narrative_created(b.id)

    matches = service.new_matches_for_author(1)
    assert len(matches) == 1
    m = matches[0]
    assert m["narrative_id"] == a.id
    assert m["matched_narrative_id"] == b.id
    assert m["matched_author_id"] == 2
    assert m["common_tag"] == "flying"
    assert m["score"] >= 60

    assert service.new_matches_for_author(2)[0]["common_tag"] == "mountain"
    assert service.new_matches_for_author(3) == []


def test_new_matches_default_common_tag(service):
    a = _narrative(1, TEXT_A, ["flying"])
    b = _narrative(2, TEXT_B, ["forest"])
    MatchEdge.link(a.id, b.id, 70)
    assert service.new_matches_for_author(1)[0]["common_tag"] == "dreams"


def test_narratives_with_tag(service):
    a = _narrative(1, TEXT_A, ["flying", "mountain"])
    _narrative(2, TEXT_B, ["forest"])
    assert [n.id for n in service.narratives_with_tag("flying")] == [a.id]
