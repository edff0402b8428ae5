"""
Word-level translation of a small shared dream vocabulary.

Not a machine translation service: only the words listed in VOCABULARY are
replaced, everything else is returned unchanged. Recent results are kept in a
bounded LRU cache keyed by (source, target, text).
"""

import logging
import re
from functools import lru_cache
from typing import Dict, List, Pattern, Tuple

from services.tagging.language import normalize_language

logger = logging.getLogger(__name__)

# concept -> word, per language
VOCABULARY: Dict[str, Dict[str, str]] = {
    "en": {
        "dream": "dream", "nightmare": "nightmare", "flying": "flying", "falling": "falling",
        "chased": "chased", "water": "water", "mountain": "mountain", "forest": "forest",
        "city": "city", "family": "family", "friend": "friend", "stranger": "stranger",
        "monster": "monster", "animal": "animal", "fear": "fear", "joy": "joy",
        "sadness": "sadness", "surprise": "surprise",
    },
    "it": {
        "dream": "sogno", "nightmare": "incubo", "flying": "volare", "falling": "cadere",
        "chased": "inseguito", "water": "acqua", "mountain": "montagna", "forest": "foresta",
        "city": "città", "family": "famiglia", "friend": "amico", "stranger": "sconosciuto",
        "monster": "mostro", "animal": "animale", "fear": "paura", "joy": "gioia",
        "sadness": "tristezza", "surprise": "sorpresa",
    },
    "es": {
        "dream": "sueño", "nightmare": "pesadilla", "flying": "volar", "falling": "caer",
        "chased": "perseguido", "water": "agua", "mountain": "montaña", "forest": "bosque",
        "city": "ciudad", "family": "familia", "friend": "amigo", "stranger": "extraño",
        "monster": "monstruo", "animal": "animal", "fear": "miedo", "joy": "alegría",
        "sadness": "tristeza", "surprise": "sorpresa",
    },
    "fr": {
        "dream": "rêve", "nightmare": "cauchemar", "flying": "voler", "falling": "tomber",
        "chased": "poursuivi", "water": "eau", "mountain": "montagne", "forest": "forêt",
        "city": "ville", "family": "famille", "friend": "ami", "stranger": "étranger",
        "monster": "monstre", "animal": "animal", "fear": "peur", "joy": "joie",
        "sadness": "tristesse", "surprise": "surprise",
    },
    "de": {
        "dream": "Traum", "nightmare": "Albtraum", "flying": "fliegen", "falling": "fallen",
        "chased": "verfolgt", "water": "Wasser", "mountain": "Berg", "forest": "Wald",
        "city": "Stadt", "family": "Familie", "friend": "Freund", "stranger": "Fremder",
        "monster": "Monster", "animal": "Tier", "fear": "Angst", "joy": "Freude",
        "sadness": "Traurigkeit", "surprise": "Überraschung",
    },
}

CACHE_SIZE = 4096


def get_supported_languages() -> List[str]:
    return list(VOCABULARY.keys())


@lru_cache(maxsize=None)
def _pattern(source: str, target: str) -> Tuple[Pattern, Dict[str, str]]:
    src, dst = VOCABULARY[source], VOCABULARY[target]
    mapping = {word.lower(): dst[concept] for concept, word in src.items() if concept in dst}
    # longest first so multi-letter overlaps resolve to the longer word
    words = sorted(mapping, key=len, reverse=True)
    rx = re.compile(r"(?<!\w)(?:" + "|".join(re.escape(w) for w in words) + r")(?!\w)", re.IGNORECASE)
    return rx, mapping


@lru_cache(maxsize=CACHE_SIZE)
def _translate(source: str, target: str, text: str) -> str:
    rx, mapping = _pattern(source, target)
    translated = rx.sub(lambda m: mapping[m.group(0).lower()], text)
    logger.debug("Translated %s->%s: %r -> %r", source, target, text[:40], translated[:40])
    return translated


def translate_text(text: str, source_lang: str, target_lang: str) -> str:
    """
    Replace known vocabulary words of ``source_lang`` with their
    ``target_lang`` equivalents (case-insensitive, whole words, one pass).

    The most recent CACHE_SIZE translations are cached.
    """
    source = normalize_language(source_lang)
    target = normalize_language(target_lang)
    if not text or source == target:
        return text
    return _translate(source, target, text)


def clear_cache() -> None:
    _translate.cache_clear()
