"""
Database models for the dream tagging and matching core.

This module defines the Peewee ORM models and the small query helpers used by
the matching service. Tables are created through initialize_database().
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional

# Helper function for timezone-aware datetime
def utcnow():
    return datetime.now(timezone.utc)

from peewee import (
    CharField, TextField, DateTimeField, IntegerField, ForeignKeyField
)

from .database import BaseModel, database

import logging
logger = logging.getLogger(__name__)


MAX_TEXT_LENGTH = 10000


# ============================================================================
# Database Models (Peewee ORM)
# ============================================================================

class Narrative(BaseModel):
    """A dream description posted by one author."""
    author_id = IntegerField(index=True)
    text = TextField()
    language = CharField(max_length=16, default='en')
    created_at = DateTimeField(default=utcnow, index=True)

    class Meta:
        table_name = 'narratives'

    def get_tags(self) -> List[str]:
        """Get tags in their stored order."""
        rows = (NarrativeTag
                .select(NarrativeTag.tag)
                .where(NarrativeTag.narrative == self.id)
                .order_by(NarrativeTag.position))
        return [r.tag for r in rows]

    def set_tags(self, tags: Iterable[str]) -> List[str]:
        """
        Attach the generated tags to this narrative.

        Tags are written once, at creation time. Calling this on a narrative
        that already has tags raises ValueError.
        """
        if NarrativeTag.select().where(NarrativeTag.narrative == self.id).exists():
            raise ValueError(f"Narrative {self.id} already has tags")

        ordered: List[str] = []
        for t in tags:
            t = (t or "").strip().lower()
            if t and t not in ordered:
                ordered.append(t)

        if ordered:
            with database.atomic():
                NarrativeTag.insert_many(
                    [{'narrative': self.id, 'tag': t, 'position': i} for i, t in enumerate(ordered)]
                ).execute()
        return ordered

    def __str__(self):
        return f"Narrative(id={self.id}, author={self.author_id}, text={self.text[:30] if self.text else None})"


class NarrativeTag(BaseModel):
    """One derived tag of a narrative."""
    narrative = ForeignKeyField(Narrative, backref='tag_rows', on_delete='CASCADE')
    tag = CharField(max_length=64, index=True)
    position = IntegerField(default=0)

    class Meta:
        table_name = 'narrative_tags'
        indexes = (
            (('narrative', 'tag'), True),  # unique constraint
        )

    def __str__(self):
        return f"NarrativeTag(narrative={self.narrative_id}, tag={self.tag})"


class MatchEdge(BaseModel):
    """
    Directed half of a match between two narratives.

    Every match is stored twice (A->B and B->A) with the same score.
    """
    narrative = ForeignKeyField(Narrative, backref='matches', on_delete='CASCADE')
    matched_narrative = ForeignKeyField(Narrative, backref='matched_by', on_delete='CASCADE')
    score = IntegerField()
    created_at = DateTimeField(default=utcnow, index=True)

    class Meta:
        table_name = 'match_edges'
        indexes = (
            (('narrative', 'matched_narrative'), True),  # unique constraint
        )

    @classmethod
    def link(cls, narrative_id: int, matched_id: int, score) -> bool:
        """
        Insert both directions of a match if absent.

        Returns True when the pair did not exist before this call.
        """
        stored = stored_score(score)
        now = utcnow()
        with database.atomic():
            existed = (cls.select()
                       .where((cls.narrative == narrative_id) &
                              (cls.matched_narrative == matched_id))
                       .exists())
            for src, dst in ((narrative_id, matched_id), (matched_id, narrative_id)):
                (cls.insert(narrative=src, matched_narrative=dst, score=stored, created_at=now)
                    .on_conflict_ignore()
                    .execute())
        return not existed

    def __str__(self):
        return f"MatchEdge({self.narrative_id}->{self.matched_narrative_id}, score={self.score})"


# ============================================================================
# Validation
# ============================================================================

def validate_narrative(author_id, text, language) -> List[str]:
    """
    Validate narrative input and return list of validation errors.

    Returns empty list if valid.
    """
    errors = []

    if author_id is None:
        errors.append("author_id is required")
    elif not isinstance(author_id, int) or isinstance(author_id, bool):
        errors.append("author_id must be an integer")

    if text is None or not str(text).strip():
        errors.append("text is required")
    elif len(text) > MAX_TEXT_LENGTH:
        errors.append(f"text must be at most {MAX_TEXT_LENGTH} characters")

    if language is not None and not isinstance(language, str):
        errors.append("language must be a string")

    return errors


def stored_score(value) -> int:
    """Coerce a computed score into the persisted integer range 0-100."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(v) or math.isinf(v):
        return 0
    v = min(100.0, max(0.0, v))
    return int(math.floor(v + 0.5))


# ============================================================================
# Utility functions
# ============================================================================

def get_tags_by_narrative(narrative_ids: Optional[Iterable[int]] = None) -> Dict[int, List[str]]:
    """Map narrative id -> ordered tag list."""
    q = NarrativeTag.select().order_by(NarrativeTag.narrative, NarrativeTag.position)
    if narrative_ids is not None:
        ids = list(narrative_ids)
        if not ids:
            return {}
        q = q.where(NarrativeTag.narrative.in_(ids))
    out: Dict[int, List[str]] = {}
    for row in q:
        out.setdefault(row.narrative_id, []).append(row.tag)
    return out


def narratives_with_tag(tag: str, limit: int = 100) -> List[Narrative]:
    """Narratives carrying a tag, newest first."""
    tag = (tag or "").strip().lower()
    if not tag:
        return []
    return list(Narrative
                .select()
                .join(NarrativeTag)
                .where(NarrativeTag.tag == tag)
                .order_by(Narrative.created_at.desc(), Narrative.id.desc())
                .limit(limit))


def get_recent_matches(author_id: int, hours: int = 24) -> List[MatchEdge]:
    """Edges created in the last ``hours`` from narratives of one author."""
    since = utcnow() - timedelta(hours=hours)
    return list(MatchEdge
                .select()
                .join(Narrative, on=(MatchEdge.narrative == Narrative.id))
                .where((Narrative.author_id == author_id) &
                       (MatchEdge.created_at >= since))
                .order_by(MatchEdge.created_at.desc(), MatchEdge.id.desc()))
