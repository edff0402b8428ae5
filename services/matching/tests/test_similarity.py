import math

import pytest

from services.matching.matching_core import (
    MatchingConfig,
    calculate_similarity,
    evaluate_pair,
    min_shared_tags,
    similarity_tokens,
)

TEXTS = [
    "I was flying over mountains",
    "Volavo sopra le montagne",
    "I was chased by a huge monster through a dark forest and I felt fear",
    "A monster chased me in the forest",
    "dark forest wolves",
    "",
    "a an the",
]


# ----------------------------
# calculate_similarity
# ----------------------------

def test_tokens_are_lowercased_and_filtered():
    assert similarity_tokens("The DARK forest, the dark sky!") == {"dark", "forest"}
    assert similarity_tokens("città è lontana") == {"città", "lontana"}


@pytest.mark.parametrize("a,b", [("", "forest"), ("forest", ""), (None, "forest"), (None, None)])
def test_empty_input_scores_zero(a, b):
    assert calculate_similarity(a, b) == 0.0


def test_no_qualifying_tokens_scores_zero():
    assert calculate_similarity("a an the", "a an the") == 0.0


def test_known_value():
    # jaccard 50, length 16/18, density 2/3 * 20
    expected = 0.65 * 50 + 0.15 * (16 / 18 * 100) + 0.20 * (2 / 3 * 20)
    assert calculate_similarity("dark forest wolves", "dark forest owls") == pytest.approx(expected)
    assert calculate_similarity("dark forest wolves", "dark forest owls") == pytest.approx(48.5)


def test_identical_text_reaches_ceiling():
    text = "I was flying over the dark mountains"
    assert calculate_similarity(text, text) == pytest.approx(84.0)


@pytest.mark.parametrize("a", TEXTS)
@pytest.mark.parametrize("b", TEXTS)
def test_symmetric_and_bounded(a, b):
    s = calculate_similarity(a, b)
    assert s == calculate_similarity(b, a)
    assert 0.0 <= s <= 100.0
    assert not math.isnan(s)


@pytest.mark.parametrize("b", TEXTS)
def test_identical_is_maximal(b):
    a = "I was chased by a huge monster through a dark forest and I felt fear"
    assert calculate_similarity(a, a) >= calculate_similarity(a, b)


def test_cross_language_similarity_is_low():
    # lexical only: no shared tokens, only the length term contributes
    s = calculate_similarity("I was flying over mountains", "Volavo sopra le montagne")
    assert s == pytest.approx(0.15 * 24 / 27 * 100)
    assert s < 20


# ----------------------------
# evaluate_pair
# ----------------------------

NEW_TAGS = ["flying", "mountain", "forest", "ocean", "brother"]
TEXT_A = "I was flying over snowy mountains and a dark forest near the ocean with my brother"
TEXT_B = "I was flying over snowy mountains and a dark forest near the river with my sister"


def test_min_shared_tags():
    config = MatchingConfig()
    assert min_shared_tags(5, config) == 2
    assert min_shared_tags(3, config) == 1
    assert min_shared_tags(1, config) == 1
    assert min_shared_tags(0, config) == 0
    assert min_shared_tags(10, config) == 3


def test_four_of_five_tags_accepted():
    other = ["flying", "mountain", "forest", "brother", "river"]
    d = evaluate_pair(NEW_TAGS, other, TEXT_A, TEXT_B)
    assert d.accepted
    assert d.match_count == 4
    assert d.tag_score == pytest.approx(80.0)
    assert d.content_score > 50
    assert d.final_score >= 60


def test_one_shared_tag_fails_overlap():
    d = evaluate_pair(NEW_TAGS, ["flying", "cat", "dog"], TEXT_A, TEXT_A)
    assert not d.accepted
    assert d.reason == "tag overlap"


def test_two_of_five_fails_tag_score():
    d = evaluate_pair(NEW_TAGS, ["flying", "mountain"], TEXT_A, TEXT_A)
    assert not d.accepted
    assert d.reason == "tag score"
    assert d.tag_score == pytest.approx(40.0)


def test_tag_only_coincidence_fails_final_score():
    d = evaluate_pair(NEW_TAGS, ["flying", "mountain", "forest"], TEXT_A, "Volavo sopra le montagne")
    assert not d.accepted
    assert d.reason == "final score"
    assert d.final_score < 60


def test_no_tags_never_matches():
    assert not evaluate_pair([], NEW_TAGS, TEXT_A, TEXT_A).accepted


def test_custom_thresholds():
    config = MatchingConfig(min_final_score=30.0)
    d = evaluate_pair(NEW_TAGS, ["flying", "mountain", "forest"], TEXT_A, "Volavo sopra le montagne", config)
    assert d.accepted
