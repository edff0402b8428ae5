"""
Dream Matching Service - Database operations and service layer
Creates narratives, resolves matches for new narratives and rebuilds the
match graph on demand.
"""

import logging
from typing import Dict, List, Optional

from peewee import fn

from shared.models.database import database, initialize_database
from shared.models.models import (
    MatchEdge,
    Narrative,
    NarrativeTag,
    get_recent_matches,
    get_tags_by_narrative,
    narratives_with_tag,
    validate_narrative,
)
from services.matching.matching_core import MatchingConfig, evaluate_pair, min_shared_tags
from services.tagging.language import normalize_language
from services.tagging.tagger import TagGenerator, get_tag_generator

logger = logging.getLogger(__name__)

DEFAULT_COMMON_TAG = "dreams"


class MatchingService:
    """
    Match resolution:
      - On a new narrative, scans narratives sharing enough tags (SQL prefilter)
      - Scores each candidate on tag overlap + content similarity
      - Stores accepted matches as two directed MatchEdge rows
    """

    def __init__(self, config: Optional[MatchingConfig] = None, tag_generator: Optional[TagGenerator] = None):
        self.config = config or MatchingConfig()
        self._tag_generator = tag_generator

        database.connect(reuse_if_open=True)
        initialize_database()

        self.stats: Dict[str, int] = {"evaluated": 0, "matched": 0, "errors": 0}

    @property
    def tag_generator(self) -> TagGenerator:
        if self._tag_generator is None:
            self._tag_generator = get_tag_generator()
        return self._tag_generator

    # ----------------------------
    # Narrative lifecycle
    # ----------------------------

    def create_narrative(self, author_id: int, text: str, language: Optional[str] = None) -> Narrative:
        """
        Validate, tag once, persist, then resolve matches inline.

        Narrative, tags and match edges commit together; a storage failure
        during match resolution rolls back the narrative as well.
        """
        errors = validate_narrative(author_id, text, language)
        if errors:
            raise ValueError("; ".join(errors))

        lang = normalize_language(language)
        tags = self.tag_generator.generate_tags(text, lang)

        with database.atomic():
            narrative = Narrative.create(author_id=author_id, text=text, language=lang)
            narrative.set_tags(tags)
            self.on_narrative_created(narrative.id)
        logger.info(f"Narrative {narrative.id} created by author {author_id} ({lang}): {tags}")

        return narrative

    def _candidate_ids(self, narrative: Narrative, tags: List[str]) -> List[int]:
        """Other narratives sharing at least the minimum number of tags."""
        needed = max(1, min_shared_tags(len(tags), self.config))
        shared = fn.COUNT(NarrativeTag.id)
        q = (
            NarrativeTag.select(NarrativeTag.narrative)
            .where((NarrativeTag.tag.in_(tags)) & (NarrativeTag.narrative != narrative.id))
            .group_by(NarrativeTag.narrative)
            .having(shared >= needed)
            .order_by(NarrativeTag.narrative)
        )
        return [row.narrative_id for row in q]

    def on_narrative_created(self, narrative_id: int) -> int:
        """
        Resolve matches for one narrative.

        Returns the number of new match pairs. A missing or untagged
        narrative is logged and yields 0.
        """
        narrative = Narrative.get_or_none(Narrative.id == narrative_id)
        if narrative is None:
            logger.warning("Narrative %s not found; skipping match resolution", narrative_id)
            return 0

        tags = narrative.get_tags()
        if not tags:
            logger.info("Narrative %s has no tags; nothing to match", narrative_id)
            return 0

        candidate_ids = self._candidate_ids(narrative, tags)
        if not candidate_ids:
            return 0

        others = {n.id: n for n in Narrative.select().where(Narrative.id.in_(candidate_ids))}
        other_tags = get_tags_by_narrative(candidate_ids)

        created = 0
        for other_id in candidate_ids:
            try:
                other = others.get(other_id)
                if other is None:
                    continue
                if other.author_id == narrative.author_id:
                    logger.debug("Skip %s -> %s: same author", narrative.id, other.id)
                    continue

                self.stats["evaluated"] += 1
                decision = evaluate_pair(tags, other_tags.get(other_id, []), narrative.text, other.text, self.config)
                if not decision.accepted:
                    logger.debug("Skip %s -> %s: %s (tag=%.1f content=%.1f final=%.1f)",
                                 narrative.id, other.id, decision.reason,
                                 decision.tag_score, decision.content_score, decision.final_score)
                    continue

                if MatchEdge.link(narrative.id, other.id, decision.final_score):
                    created += 1
                    self.stats["matched"] += 1
                    logger.debug("Match %s <-> %s score=%.1f", narrative.id, other.id, decision.final_score)
            except Exception:
                self.stats["errors"] += 1
                logger.exception("Error matching narrative id=%s with id=%s", narrative.id, other_id)

        if created:
            logger.info(f"Narrative {narrative.id}: {created} new matches")
        return created

    def recalculate_all_matches(self) -> int:
        """Drop every match edge and replay resolution for all narratives, oldest first."""
        with database.atomic():
            removed = MatchEdge.delete().execute()
        logger.info(f"Removed {removed} match edges; recalculating")

        total = 0
        for row in Narrative.select(Narrative.id).order_by(Narrative.id):
            total += self.on_narrative_created(row.id)

        logger.info(f"Recalculation done: {total} matches, stats={self.stats}")
        return total

    # ----------------------------
    # Queries
    # ----------------------------

    def matches_for_narrative(self, narrative_id: int) -> List[MatchEdge]:
        return list(
            MatchEdge.select()
            .where(MatchEdge.narrative == narrative_id)
            .order_by(MatchEdge.score.desc(), MatchEdge.id)
        )

    def new_matches_for_author(self, author_id: int, hours: int = 24) -> List[Dict]:
        """Recent matches of an author's narratives, with the first tag both sides share."""
        edges = get_recent_matches(author_id, hours)
        if not edges:
            return []

        ids = {e.narrative_id for e in edges} | {e.matched_narrative_id for e in edges}
        tag_map = get_tags_by_narrative(ids)
        authors = {n.id: n.author_id for n in Narrative.select(Narrative.id, Narrative.author_id)
                   .where(Narrative.id.in_(list(ids)))}

        out = []
        for e in edges:
            theirs = set(tag_map.get(e.matched_narrative_id, []))
            common = [t for t in tag_map.get(e.narrative_id, []) if t in theirs]
            out.append({
                "narrative_id": e.narrative_id,
                "matched_narrative_id": e.matched_narrative_id,
                "matched_author_id": authors.get(e.matched_narrative_id),
                "score": e.score,
                "common_tag": common[0] if common else DEFAULT_COMMON_TAG,
                "created_at": e.created_at,
            })
        return out

    def narratives_with_tag(self, tag: str, limit: int = 100) -> List[Narrative]:
        return narratives_with_tag(tag, limit)


_default_service: Optional[MatchingService] = None


def get_matching_service() -> MatchingService:
    global _default_service
    if _default_service is None:
        _default_service = MatchingService()
    return _default_service


def on_narrative_created(narrative_id: int) -> int:
    return get_matching_service().on_narrative_created(narrative_id)


def recalculate_all_matches() -> int:
    return get_matching_service().recalculate_all_matches()


def create_narrative(author_id: int, text: str, language: Optional[str] = None) -> Narrative:
    return get_matching_service().create_narrative(author_id, text, language)
