import pytest

from services.tagging.consolidation import Consolidator, fallback_tags
from services.tagging.extractors import CandidatePool
from services.tagging.stemming import Stemmer, strip_suffix


def _pool(*entries) -> CandidatePool:
    pool = CandidatePool()
    for entry in entries:
        pool.add(*entry)
    return pool


# ----------------------------
# Stemming
# ----------------------------

@pytest.mark.parametrize("word,lang,expected", [
    ("mountains", "en", "mountain"),
    ("running", "en", "run"),
    ("flying", "en", "fly"),
    ("sleep", "en", "sleep"),
    ("falls", "en", "fall"),
    ("montagne", "it", "montagn"),
    ("montagna", "it", "montagn"),
    ("volavo", "it", "vol"),
    ("mountains", "xx", "mountain"),
    ("sea", "en", "sea"),
])
def test_strip_suffix(word, lang, expected):
    assert strip_suffix(word, lang) == expected


def test_stemmer_multi_word_phrase():
    assert Stemmer("en").stem("dark forests") == "dark forest"


# ----------------------------
# Garbage filter
# ----------------------------

@pytest.mark.parametrize("tag", [
    "ab",                          # too short
    "extraordinarily long",        # > 18 chars
    "dark deep forest",            # > 2 words
    "the forest",                  # article
    "was flying",                  # starts with auxiliary
    "something",                   # generic pronoun
    "forest 42",                   # digits
    "forest!",                     # punctuation
    "very",                        # stopword alone
])
def test_invalid_tags_are_rejected(tag):
    assert Consolidator().is_valid(tag, "en") is False


@pytest.mark.parametrize("tag,lang", [
    ("forest", "en"),
    ("dark forest", "en"),
    ("half-moon", "en"),
    ("montagna", "it"),
    ("città", "it"),
])
def test_valid_tags_are_kept(tag, lang):
    assert Consolidator().is_valid(tag, lang) is True


def test_italian_function_word_rejected():
    assert Consolidator().is_valid("sopra montagne", "it") is False


# ----------------------------
# Dedup / selection
# ----------------------------

def test_stem_dedup_keeps_shortest_with_best_score():
    pool = _pool(("mountains", 10.0, "landscape"), ("mountain", 5.0, "landscape"), ("flying", 8.0, "actions"))
    tags = Consolidator().consolidate(pool, "en")
    assert tags == ["mountain", "flying"]


def test_category_diversity_first():
    pool = _pool(
        ("flying", 10.0, "actions"),
        ("running", 9.0, "actions"),
        ("swimming", 8.0, "actions"),
        ("fear", 7.0, "emotions"),
        ("monster", 1.0, "characters"),
    )
    assert Consolidator(max_tags=3).consolidate(pool, "en") == ["flying", "fear", "monster"]


def test_remaining_slots_filled_by_score():
    pool = _pool(
        ("flying", 10.0, "actions"),
        ("running", 9.0, "actions"),
        ("swimming", 8.0, "actions"),
        ("fear", 7.0, "emotions"),
        ("monster", 1.0, "characters"),
        ("castle", 0.5),
    )
    assert Consolidator(max_tags=5).consolidate(pool, "en") == ["flying", "running", "swimming", "fear", "monster"]


def test_ties_keep_encounter_order():
    pool = _pool(("castle", 4.0), ("bridge", 4.0), ("garden", 4.0))
    assert Consolidator().consolidate(pool, "en") == ["castle", "bridge", "garden"]


def test_cap_respected():
    pool = _pool(*[(w, float(i)) for i, w in enumerate(
        ["castle", "bridge", "garden", "river", "ocean", "forest", "desert", "island"], start=1)])
    assert len(Consolidator(max_tags=5).consolidate(pool, "en")) == 5


# ----------------------------
# Fallback
# ----------------------------

@pytest.mark.parametrize("lang,expected", [
    ("en", ["dream", "mystery", "experience"]),
    ("it", ["sogno", "mistero", "esperienza"]),
    ("es", ["sueño", "misterio", "experiencia"]),
    ("fr", ["rêve", "mystère", "expérience"]),
    ("de", ["traum", "mysterium", "erfahrung"]),
    ("xx", ["dream", "mystery", "experience"]),
])
def test_fallback_tags(lang, expected):
    assert fallback_tags(lang) == expected


def test_only_garbage_yields_fallback():
    pool = _pool(("the", 10.0), ("something", 9.0), ("42", 8.0))
    assert Consolidator().consolidate(pool, "en") == fallback_tags("en")


def test_fallback_is_a_copy():
    tags = fallback_tags("en")
    tags.append("extra")
    assert fallback_tags("en") == ["dream", "mystery", "experience"]
