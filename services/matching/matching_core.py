"""
Dream Matching Core - lexical text similarity + tag-overlap match decision.

Pure functions only (no database access):
- calculate_similarity: blended Jaccard / length-ratio / keyword-density score
- evaluate_pair: the thresholded tag-overlap + content decision for one pair

Similarity is lexical: narratives telling the same dream in two languages
share few tokens and score low.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Set

logger = logging.getLogger(__name__)

_RE_NON_WORD = re.compile(r"\W+")

MIN_TOKEN_LENGTH = 4

JACCARD_WEIGHT = 0.65
LENGTH_WEIGHT = 0.15
DENSITY_WEIGHT = 0.20
DENSITY_SCALE = 20.0


# ----------------------------
# Similarity
# ----------------------------

def similarity_tokens(text: Optional[str]) -> Set[str]:
    """Lower-cased word set, tokens shorter than MIN_TOKEN_LENGTH dropped."""
    if not text:
        return set()
    return {t for t in _RE_NON_WORD.split(text.lower()) if len(t) >= MIN_TOKEN_LENGTH}


def calculate_similarity(text_a: Optional[str], text_b: Optional[str]) -> float:
    """
    Symmetric lexical similarity in [0, 100].

        jaccard = |A∩B| / |A∪B| * 100
        length  = min(len a, len b) / max(len a, len b) * 100
        density = max(|A∩B| / |A|, |A∩B| / |B|) * 20
        score   = 0.65 jaccard + 0.15 length + 0.20 density

    Empty input or a text without qualifying tokens scores 0. Identical
    texts reach the formula's ceiling of 84.
    """
    if not text_a or not text_b:
        return 0.0

    a = similarity_tokens(text_a)
    b = similarity_tokens(text_b)
    if not a or not b:
        return 0.0

    common = len(a & b)
    jaccard = common / len(a | b) * 100.0

    la, lb = len(text_a), len(text_b)
    length = min(la, lb) / max(la, lb) * 100.0

    density = max(common / len(a), common / len(b)) * DENSITY_SCALE

    score = JACCARD_WEIGHT * jaccard + LENGTH_WEIGHT * length + DENSITY_WEIGHT * density
    if math.isnan(score):
        return 0.0
    return float(min(100.0, max(0.0, score)))


# ----------------------------
# Match decision
# ----------------------------

@dataclass
class MatchingConfig:
    min_tag_overlap_ratio: float = 0.3
    min_tag_score: float = 50.0
    min_final_score: float = 60.0
    tag_weight: float = 0.6
    content_weight: float = 0.4


@dataclass(frozen=True)
class MatchDecision:
    accepted: bool
    match_count: int
    tag_score: float = 0.0
    content_score: float = 0.0
    final_score: float = 0.0
    reason: str = ""


def min_shared_tags(tag_count: int, config: MatchingConfig) -> int:
    # 0.3 * 10 == 3.0000000000000004
    return int(math.ceil(round(config.min_tag_overlap_ratio * tag_count, 9)))


def evaluate_pair(
    new_tags: Iterable[str],
    other_tags: Iterable[str],
    new_text: str,
    other_text: str,
    config: Optional[MatchingConfig] = None,
) -> MatchDecision:
    """
    Decide whether the new narrative matches another one.

    Tag score is relative to the NEW narrative's tag count, so the decision is
    directional even though the stored match is symmetric.
    """
    config = config or MatchingConfig()
    new_set = set(new_tags)
    if not new_set:
        return MatchDecision(False, 0, reason="no tags")

    match_count = len(new_set & set(other_tags))
    if match_count < min_shared_tags(len(new_set), config):
        return MatchDecision(False, match_count, reason="tag overlap")

    tag_score = match_count / len(new_set) * 100.0
    if tag_score < config.min_tag_score:
        return MatchDecision(False, match_count, tag_score, reason="tag score")

    content_score = calculate_similarity(new_text, other_text)
    final = config.tag_weight * tag_score + config.content_weight * content_score
    if math.isnan(final) or final < config.min_final_score:
        return MatchDecision(False, match_count, tag_score, content_score, final, reason="final score")

    return MatchDecision(True, match_count, tag_score, content_score, final)
