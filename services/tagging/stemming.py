"""
Approximate word roots used to collapse inflected tag candidates.

Uses the spaCy lemma when the loaded pipeline has a lemmatizer, then strips
the longest matching suffix from a small per-language table.
"""

import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

MIN_STEM_LENGTH = 3

# Longest suffixes first; (suffix, replacement)
_SUFFIXES: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "en": (
        ("ingly", ""), ("edly", ""), ("ness", ""), ("ings", ""), ("ing", ""),
        ("ies", "y"), ("ied", "y"), ("ed", ""), ("s", ""),
    ),
    "it": (
        ("amento", ""), ("azione", ""), ("mente", ""), ("ando", ""), ("endo", ""),
        ("are", ""), ("ere", ""), ("ire", ""), ("avo", ""), ("ava", ""), ("evo", ""),
        ("ivo", ""), ("ato", ""), ("ata", ""), ("ati", ""), ("ate", ""), ("ito", ""),
        ("uto", ""), ("i", ""), ("e", ""), ("a", ""), ("o", ""),
    ),
    "es": (
        ("amiento", ""), ("ación", ""), ("mente", ""), ("iendo", ""), ("ando", ""),
        ("aba", ""), ("ado", ""), ("ada", ""), ("ido", ""), ("ida", ""), ("es", ""),
        ("ar", ""), ("er", ""), ("ir", ""), ("os", ""), ("as", ""), ("s", ""),
        ("o", ""), ("a", ""), ("e", ""),
    ),
    "fr": (
        ("ement", ""), ("ation", ""), ("aient", ""), ("ées", ""), ("ant", ""),
        ("ait", ""), ("ais", ""), ("ée", ""), ("és", ""), ("er", ""), ("ir", ""),
        ("re", ""), ("es", ""), ("é", ""), ("s", ""), ("e", ""),
    ),
    "de": (
        ("ungen", ""), ("ung", ""), ("heit", ""), ("keit", ""), ("en", ""),
        ("er", ""), ("es", ""), ("e", ""), ("n", ""), ("s", ""),
    ),
}

_KEEP_DOUBLE = {"ll", "ss", "zz", "ff"}


def strip_suffix(word: str, lang: str) -> str:
    """Heuristic affix stripping; unknown languages use the English table."""
    table = _SUFFIXES.get(lang) or _SUFFIXES["en"]
    for suffix, repl in table:
        if word.endswith(suffix) and len(word) - len(suffix) + len(repl) >= MIN_STEM_LENGTH:
            word = word[: len(word) - len(suffix)] + repl
            break

    # running -> runn -> run
    if lang == "en" and len(word) > MIN_STEM_LENGTH and word[-1] == word[-2] \
            and word[-2:] not in _KEEP_DOUBLE and word[-1].isalpha() and word[-1] not in "aeiouy":
        word = word[:-1]
    return word


class Stemmer:
    def __init__(self, lang: str, nlp=None):
        self.lang = lang
        self.nlp = nlp
        self._cache: Dict[str, str] = {}
        self._use_lemmas = False
        if nlp is not None:
            try:
                self._use_lemmas = nlp.has_pipe("lemmatizer")
            except Exception:
                self._use_lemmas = False

    def _lemma(self, word: str) -> Optional[str]:
        if not self._use_lemmas:
            return None
        try:
            doc = self.nlp(word)
            if len(doc) == 1 and doc[0].lemma_:
                return doc[0].lemma_.lower()
        except Exception as e:
            logger.debug(f"Lemmatizer failed for '{word}': {e}")
        return None

    def stem_word(self, word: str) -> str:
        w = word.lower()
        cached = self._cache.get(w)
        if cached is not None:
            return cached
        base = self._lemma(w) or w
        out = strip_suffix(base, self.lang)
        self._cache[w] = out
        return out

    def stem(self, phrase: str) -> str:
        """Stem every word of a (possibly multi-word) phrase."""
        return " ".join(self.stem_word(w) for w in phrase.split())
