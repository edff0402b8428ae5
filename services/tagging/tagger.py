"""
Dream tag generation - runs the extraction strategies and consolidates.

    generate_tags("I was flying over mountains", "en-US")
    -> ["flying", "mountain"]
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from services.tagging.consolidation import Consolidator, fallback_tags
from services.tagging.extractors import (
    CandidateExtractor,
    CandidatePool,
    ExtractionContext,
    default_extractors,
)
from services.tagging.language import normalize_language
from services.tagging.stemming import Stemmer
from shared.utils.spacy_setup import load_pipeline

logger = logging.getLogger(__name__)


@dataclass
class TaggingConfig:
    max_tags: int = 5
    min_tag_length: int = 3
    max_tag_length: int = 18
    max_tag_words: int = 2


class TagGenerator:
    def __init__(
        self,
        config: Optional[TaggingConfig] = None,
        extractors: Optional[List[CandidateExtractor]] = None,
        nlp_loader: Callable[[str], object] = load_pipeline,
    ):
        self.config = config or TaggingConfig()
        self.extractors = extractors if extractors is not None else default_extractors()
        self.nlp_loader = nlp_loader
        self.consolidator = Consolidator(
            max_tags=self.config.max_tags,
            min_length=self.config.min_tag_length,
            max_length=self.config.max_tag_length,
            max_words=self.config.max_tag_words,
        )

    def _load_nlp(self, lang: str):
        try:
            return self.nlp_loader(lang)
        except Exception as e:
            logger.warning(f"spaCy pipeline unavailable for '{lang}': {e}")
            return None

    def collect_candidates(self, text: str, lang: str, nlp=None) -> CandidatePool:
        ctx = ExtractionContext.build(text, lang, nlp)
        pool = CandidatePool()
        for extractor in self.extractors:
            try:
                extractor.extract(ctx, pool)
            except Exception as e:
                logger.warning(f"Extractor '{extractor.name}' failed ({lang}): {e}")
        return pool

    def generate_tags(self, text: str, language: Optional[str] = None) -> List[str]:
        """
        Up to config.max_tags lower-case tags for a narrative.

        Never raises and never returns an empty list: empty input, no
        surviving candidates or an internal failure all yield the localized
        fallback tags.
        """
        lang = normalize_language(language)
        if not text or not str(text).strip():
            return fallback_tags(lang)

        try:
            nlp = self._load_nlp(lang)
            pool = self.collect_candidates(str(text), lang, nlp)
            logger.debug("Candidates for %s text: %r", lang, pool)

            tags = self.consolidator.consolidate(pool, lang, Stemmer(lang, nlp))
            return tags[: self.config.max_tags] or fallback_tags(lang)
        except Exception:
            logger.exception("Tag generation failed; using fallback tags")
            return fallback_tags(lang)


_default_generator: Optional[TagGenerator] = None


def get_tag_generator() -> TagGenerator:
    global _default_generator
    if _default_generator is None:
        _default_generator = TagGenerator()
    return _default_generator


def generate_tags(text: str, language: Optional[str] = None) -> List[str]:
    return get_tag_generator().generate_tags(text, language)
