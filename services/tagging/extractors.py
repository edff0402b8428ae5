"""
Tag candidate extraction - independent strategies feeding one score pool.

Every strategy implements CandidateExtractor.extract(ctx, pool) and only ever
adds to the pool, so the same candidate found by several strategies
accumulates score. Strategies:
- LexiconExtractor: curated per-language keywords, multi-pass matching
- EntityExtractor: spaCy named entities and nouns
- KeywordExtractor: YAKE statistical keywords
- TfidfExtractor: sentence-level TF-IDF bonus (scikit-learn)
- FrequencyExtractor: repeated content words
- WordPairExtractor: adjacent content-word pairs
"""

from __future__ import annotations

import logging
import math
import re
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Pattern, Tuple

import numpy as np
import yake
from rapidfuzz import fuzz
from sklearn.feature_extraction.text import TfidfVectorizer

from services.tagging import lexicon

logger = logging.getLogger(__name__)

# ----------------------------
# Text helpers
# ----------------------------

_RE_SPACES = re.compile(r"\s+")
_RE_APOSTROPHE = re.compile(r"['’`]")
_RE_PUNCT_KEEP_HYPHEN = re.compile(r"[^\w\s-]")
_RE_WORD = re.compile(r"[^\W\d_]+")
_RE_CLAUSE = re.compile(r"[.!?;:,()\n\"]+")
_RE_SENTENCE = re.compile(r"[.!?;\n]+")

_EDGE_CHARS = " \t\n.,;:!?\"'()[]{}«»“”‘’-"


def normalize_text(text: str) -> str:
    """Lower-case, drop punctuation except hyphens, collapse whitespace."""
    t = (text or "").lower()
    t = _RE_APOSTROPHE.sub(" ", t)
    t = _RE_PUNCT_KEEP_HYPHEN.sub(" ", t)
    return _RE_SPACES.sub(" ", t).strip()


def tokenize(text: str) -> List[str]:
    return _RE_WORD.findall((text or "").lower())


def _word_regex(keyword: str) -> Pattern:
    return re.compile(r"(?<!\w)" + re.escape(keyword) + r"(?!\w)")


def _prefix_regex(prefix: str) -> Pattern:
    return re.compile(r"(?<!\w)" + re.escape(prefix))


# ----------------------------
# Data structures
# ----------------------------

class CandidatePool:
    """Candidate -> accumulated score, plus optional semantic category."""

    def __init__(self):
        self.scores: Dict[str, float] = {}
        self.categories: Dict[str, str] = {}

    @staticmethod
    def clean(text: str) -> str:
        t = _RE_SPACES.sub(" ", (text or "").lower()).strip(_EDGE_CHARS)
        return _RE_SPACES.sub(" ", t)

    def add(self, text: str, score: float, category: Optional[str] = None) -> Optional[str]:
        key = self.clean(text)
        if not key or not math.isfinite(score):
            return None
        self.scores[key] = self.scores.get(key, 0.0) + float(score)
        if category and key not in self.categories:
            self.categories[key] = category
        return key

    def boost(self, text: str, bonus: float) -> bool:
        """Add to an existing candidate only."""
        key = self.clean(text)
        if key not in self.scores or not math.isfinite(bonus):
            return False
        self.scores[key] += float(bonus)
        return True

    def category(self, key: str) -> Optional[str]:
        return self.categories.get(key)

    def items(self) -> Iterator[Tuple[str, float]]:
        return iter(self.scores.items())

    def __contains__(self, text: str) -> bool:
        return self.clean(text) in self.scores

    def __len__(self) -> int:
        return len(self.scores)

    def __repr__(self) -> str:
        top = sorted(self.scores.items(), key=lambda kv: -kv[1])[:5]
        return f"CandidatePool({len(self.scores)} candidates, top={top})"


@dataclass
class ExtractionContext:
    text: str
    lang: str
    lowered: str
    normalized: str
    tokens: List[str]
    clauses: List[List[str]]
    stopwords: set
    nlp: object = None
    _doc: object = field(default=None, repr=False)

    @classmethod
    def build(cls, text: str, lang: str, nlp=None) -> "ExtractionContext":
        lowered = (text or "").lower()
        clauses = [tokenize(c) for c in _RE_CLAUSE.split(lowered)]
        return cls(
            text=text or "",
            lang=lang,
            lowered=lowered,
            normalized=normalize_text(text),
            tokens=tokenize(lowered),
            clauses=[c for c in clauses if c],
            stopwords=lexicon.stopwords(lang),
            nlp=nlp,
        )

    @property
    def doc(self):
        """spaCy Doc, parsed on first use."""
        if self._doc is None and self.nlp is not None:
            self._doc = self.nlp(self.text)
        return self._doc

    def is_content_word(self, tok: str) -> bool:
        return len(tok) >= 3 and tok not in self.stopwords


# ----------------------------
# Strategy interface
# ----------------------------

class CandidateExtractor(ABC):
    name = "base"

    def __init__(self, weight: float = 1.0):
        self.weight = weight

    @abstractmethod
    def extract(self, ctx: ExtractionContext, pool: CandidatePool) -> None:
        ...

    def _add(self, pool: CandidatePool, text: str, score: float, category: Optional[str] = None):
        return pool.add(text, score * self.weight, category)

    def _boost(self, pool: CandidatePool, text: str, bonus: float) -> bool:
        return pool.boost(text, bonus * self.weight)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(weight={self.weight})"


# ----------------------------
# Curated lexicon
# ----------------------------

_LexEntry = Tuple[str, str, Pattern]
_lexicon_cache: Dict[str, List[_LexEntry]] = {}


def _lexicon_entries(lang: str) -> List[_LexEntry]:
    entries = _lexicon_cache.get(lang)
    if entries is None:
        entries = [(kw, cat, _word_regex(kw)) for kw, cat in lexicon.keyword_categories(lang).items()]
        _lexicon_cache[lang] = entries
    return entries


class LexiconExtractor(CandidateExtractor):
    """
    Keyword matching in decreasing-confidence passes:
      exact phrase (10) -> word boundary (8) -> verb conjugation (7) ->
      partial / fuzzy inflection (5) -> context rules (8-9) ->
      English lexicon fallback (4).
    The conjugation and partial passes only run while fewer than
    min_candidates_for_partial keywords were found; the English fallback
    only while fewer than min_candidates_for_english.
    """
    name = "lexicon"

    def __init__(self, weight: float = 1.0):
        super().__init__(weight)
        self.exact_score = 10.0
        self.boundary_score = 8.0
        self.conjugation_score = 7.0
        self.partial_score = 5.0
        self.english_score = 4.0

        self.min_candidates_for_partial = 5
        self.min_candidates_for_english = 4

        self.partial_min_length = 5
        self.fuzzy_threshold = 85
        self.max_root_suffix = 5

    def extract(self, ctx: ExtractionContext, pool: CandidatePool) -> None:
        entries = _lexicon_entries(ctx.lang)
        found: Dict[str, str] = {}

        def hit(kw: str, cat: str, score: float) -> None:
            found[kw] = cat
            self._add(pool, kw, score, cat)

        # 1) exact phrase on punctuation-normalized text
        padded = f" {ctx.normalized} "
        for kw, cat, _ in entries:
            if f" {kw} " in padded:
                hit(kw, cat, self.exact_score)

        # 2) word boundary on the raw lower-cased text
        for kw, cat, rx in entries:
            if kw not in found and rx.search(ctx.lowered):
                hit(kw, cat, self.boundary_score)

        # 3) inflection-aware passes, only when recall is poor
        if len(found) < self.min_candidates_for_partial:
            self._conjugations(ctx, entries, found, hit)
            self._partials(ctx, entries, found, hit)

        # 4) co-occurrence rules
        for triggers, requires, (tag, cat, score) in lexicon.CONTEXT_RULES.get(ctx.lang, []):
            if tag in found:
                continue
            if not any(_prefix_regex(t).search(ctx.lowered) for t in triggers):
                continue
            if requires and not any(_prefix_regex(r).search(ctx.lowered) for r in requires):
                continue
            hit(tag, cat, score)

        # 5) English vocabulary inside a non-English narrative
        if ctx.lang != "en" and len(found) < self.min_candidates_for_english:
            for kw, cat, rx in _lexicon_entries("en"):
                if kw not in found and rx.search(ctx.lowered):
                    hit(kw, cat, self.english_score)

        logger.debug("Lexicon matched %d keywords (%s)", len(found), ctx.lang)

    def _conjugations(self, ctx, entries, found, hit) -> None:
        endings = lexicon.INFINITIVE_ENDINGS.get(ctx.lang)
        if not endings:
            return
        for kw, cat, _ in entries:
            if cat != "actions" or kw in found or len(kw) < self.partial_min_length:
                continue
            for ending in endings:
                if not kw.endswith(ending):
                    continue
                root = kw[: -len(ending)]
                if len(root) < 3:
                    continue
                rx = re.compile(r"(?<!\w)" + re.escape(root) + r"[^\W\d_]{1,%d}(?!\w)" % self.max_root_suffix)
                if rx.search(ctx.lowered):
                    hit(kw, cat, self.conjugation_score)
                break

    def _partials(self, ctx, entries, found, hit) -> None:
        words = [t for t in set(ctx.tokens) if len(t) >= self.partial_min_length]
        if not words:
            return
        for kw, cat, _ in entries:
            if kw in found or " " in kw or len(kw) < self.partial_min_length:
                continue
            prefix = kw[:-1]
            if any(w.startswith(prefix) for w in words):
                hit(kw, cat, self.partial_score)
                continue
            if any(fuzz.ratio(w, kw) >= self.fuzzy_threshold for w in words):
                hit(kw, cat, self.partial_score)


# ----------------------------
# Named entities / nouns (spaCy)
# ----------------------------

_PERSON_LABELS = {"PERSON", "PER"}
_PLACE_LABELS = {"GPE", "LOC", "FAC"}


class EntityExtractor(CandidateExtractor):
    name = "entities"

    def __init__(self, weight: float = 1.0):
        super().__init__(weight)
        self.entity_score = 7.0
        self.noun_score = 6.0

    def extract(self, ctx: ExtractionContext, pool: CandidatePool) -> None:
        doc = ctx.doc
        if doc is None:
            return

        known = lexicon.keyword_categories(ctx.lang)

        for ent in getattr(doc, "ents", ()):
            if ent.label_ in _PERSON_LABELS:
                cat = "characters"
            elif ent.label_ in _PLACE_LABELS:
                cat = "places"
            else:
                continue
            val = ent.text.strip().lower()
            if len(val) < 3:
                continue
            self._add(pool, val, self.entity_score, cat)

        for tok in doc:
            if tok.pos_ not in ("NOUN", "PROPN") or not tok.is_alpha or tok.is_stop:
                continue
            lemma = (tok.lemma_ or tok.text).lower()
            if not ctx.is_content_word(lemma):
                continue
            self._add(pool, lemma, self.noun_score, known.get(lemma))


# ----------------------------
# YAKE keywords
# ----------------------------

class KeywordExtractor(CandidateExtractor):
    """YAKE scores are lower-is-better; inverted to 1/(1+s)."""
    name = "yake"

    def __init__(self, weight: float = 1.0, max_ngram: int = 2, top: int = 15):
        super().__init__(weight)
        self.max_ngram = max_ngram
        self.top = top
        self.existing_factor = 2.0
        self.new_factor = 4.0

    def extract(self, ctx: ExtractionContext, pool: CandidatePool) -> None:
        kw_extractor = yake.KeywordExtractor(
            lan=ctx.lang,
            n=self.max_ngram,
            dedupLim=0.9,
            top=self.top,
        )
        for kw, score in kw_extractor.extract_keywords(ctx.text):
            strength = 1.0 / (1.0 + max(float(score), 0.0))
            if not self._boost(pool, kw, self.existing_factor * strength):
                self._add(pool, kw, self.new_factor * strength)


# ----------------------------
# TF-IDF bonus
# ----------------------------

class TfidfExtractor(CandidateExtractor):
    """Sentences are the documents; summed term weight max-normalized to 0..max_bonus."""
    name = "tfidf"

    def __init__(self, weight: float = 1.0, max_bonus: float = 10.0):
        super().__init__(weight)
        self.max_bonus = max_bonus

    def extract(self, ctx: ExtractionContext, pool: CandidatePool) -> None:
        # stopword-only text leaves the vectorizer an empty vocabulary
        if not any(ctx.is_content_word(t) for t in ctx.tokens):
            return
        sentences = [s.strip() for s in _RE_SENTENCE.split(ctx.lowered) if s.strip()]
        if not sentences:
            return

        vectorizer = TfidfVectorizer(
            lowercase=True,
            token_pattern=r"(?u)\b[^\W\d_]{3,}\b",
            stop_words=sorted(w for w in ctx.stopwords if w.isalpha()) or None,
            ngram_range=(1, 2),
        )
        try:
            matrix = vectorizer.fit_transform(sentences)
        except ValueError as e:
            # "empty vocabulary" for tokens glued to digits, e.g. "abc123"
            logger.debug(f"TF-IDF skipped: {e}")
            return
        weights = np.asarray(matrix.sum(axis=0)).ravel()
        if weights.size == 0:
            return
        top = float(weights.max())
        if top <= 0:
            return

        for term, w in zip(vectorizer.get_feature_names_out(), weights):
            self._boost(pool, term, self.max_bonus * float(w) / top)


# ----------------------------
# Raw frequency
# ----------------------------

class FrequencyExtractor(CandidateExtractor):
    name = "frequency"

    def __init__(self, weight: float = 1.0, max_bonus: float = 3.0):
        super().__init__(weight)
        self.max_bonus = max_bonus

    def extract(self, ctx: ExtractionContext, pool: CandidatePool) -> None:
        counts = Counter(t for t in ctx.tokens if ctx.is_content_word(t))
        for tok, c in counts.items():
            if c > 1:
                self._add(pool, tok, min(float(c - 1), self.max_bonus))


# ----------------------------
# Adjacent word pairs
# ----------------------------

class WordPairExtractor(CandidateExtractor):
    name = "pairs"

    def __init__(self, weight: float = 1.0, max_length: int = 18):
        super().__init__(weight)
        self.max_length = max_length
        self.pair_score = 3.0
        self.known_word_bonus = 2.0

    def extract(self, ctx: ExtractionContext, pool: CandidatePool) -> None:
        for clause in ctx.clauses:
            for a, b in zip(clause, clause[1:]):
                if a == b or not ctx.is_content_word(a) or not ctx.is_content_word(b):
                    continue
                phrase = f"{a} {b}"
                if len(phrase) > self.max_length:
                    continue
                score = self.pair_score
                if a in pool or b in pool:
                    score += self.known_word_bonus
                self._add(pool, phrase, score)


def default_extractors() -> List[CandidateExtractor]:
    """Strategies in the order they must run (bonus passes need earlier candidates)."""
    return [
        LexiconExtractor(),
        EntityExtractor(),
        KeywordExtractor(),
        TfidfExtractor(),
        FrequencyExtractor(),
        WordPairExtractor(),
    ]
