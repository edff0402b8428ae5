"""
Candidate consolidation: stem dedup, garbage filter, category-diverse selection.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from services.tagging import lexicon
from services.tagging.extractors import CandidatePool
from services.tagging.language import DEFAULT_LANGUAGE
from services.tagging.stemming import Stemmer

logger = logging.getLogger(__name__)

# letters, single spaces, hyphen, apostrophe
_RE_VALID_CHARS = re.compile(r"^[^\W\d_]+(?:[ '’-][^\W\d_]+)*$")


@dataclass
class Candidate:
    text: str
    score: float
    order: int
    category: Optional[str] = None

    @property
    def words(self) -> int:
        return len(self.text.split())


def fallback_tags(lang: str) -> List[str]:
    """Localized generic tags; a fresh list every call."""
    return list(lexicon.FALLBACK_TAGS.get(lang) or lexicon.FALLBACK_TAGS[DEFAULT_LANGUAGE])


class Consolidator:
    def __init__(
        self,
        max_tags: int = 5,
        min_length: int = 3,
        max_length: int = 18,
        max_words: int = 2,
    ):
        self.max_tags = max_tags
        self.min_length = min_length
        self.max_length = max_length
        self.max_words = max_words

    # ----------------------------
    # Garbage filter
    # ----------------------------

    def is_valid(self, tag: str, lang: str) -> bool:
        if len(tag) < self.min_length or len(tag) > self.max_length:
            return False
        if not _RE_VALID_CHARS.match(tag):
            return False

        words = tag.split()
        if len(words) > self.max_words:
            return False

        function_words = lexicon.FUNCTION_WORDS.get(lang, set())
        if any(w in function_words for w in words):
            return False
        if words[0] in lexicon.AUXILIARY_VERBS.get(lang, set()):
            return False
        if tag in lexicon.GENERIC_PRONOUNS.get(lang, set()):
            return False
        # single-word stopwords ("very", "night") never stand alone
        if len(words) == 1 and tag in lexicon.stopwords(lang):
            return False
        return True

    # ----------------------------
    # Stem dedup
    # ----------------------------

    @staticmethod
    def _dedup(candidates: List[Candidate], stemmer: Stemmer) -> List[Candidate]:
        groups: Dict[str, List[Candidate]] = {}
        for c in candidates:
            groups.setdefault(stemmer.stem(c.text), []).append(c)

        out: List[Candidate] = []
        for stem, members in groups.items():
            rep = min(members, key=lambda c: (c.words, len(c.text), -c.score, c.order))
            by_score = sorted(members, key=lambda c: (-c.score, c.order))
            category = next((c.category for c in by_score if c.category), None)
            if len(members) > 1:
                logger.debug("Stem '%s' merged %s -> '%s'", stem, [c.text for c in members], rep.text)
            out.append(Candidate(
                text=rep.text,
                score=by_score[0].score,
                order=min(c.order for c in members),
                category=category,
            ))
        return out

    # ----------------------------
    # Selection
    # ----------------------------

    def _select(self, candidates: List[Candidate]) -> List[Candidate]:
        ranked = sorted(candidates, key=lambda c: (-c.score, c.order))

        picked: List[Candidate] = []
        seen_categories = set()
        for c in ranked:
            if len(picked) >= self.max_tags:
                break
            if c.category and c.category not in seen_categories:
                seen_categories.add(c.category)
                picked.append(c)

        for c in ranked:
            if len(picked) >= self.max_tags:
                break
            if c not in picked:
                picked.append(c)

        return sorted(picked, key=lambda c: (-c.score, c.order))

    def consolidate(self, pool: CandidatePool, lang: str, stemmer: Optional[Stemmer] = None) -> List[str]:
        stemmer = stemmer or Stemmer(lang)

        candidates = [
            Candidate(text=text, score=score, order=i, category=pool.category(text))
            for i, (text, score) in enumerate(pool.items())
            if score > 0
        ]
        merged = self._dedup(candidates, stemmer)
        valid = [c for c in merged if self.is_valid(c.text, lang)]
        if len(valid) < len(merged):
            logger.debug("Filtered %d/%d candidates", len(merged) - len(valid), len(merged))

        if not valid:
            return fallback_tags(lang)

        return [c.text for c in self._select(valid)]
