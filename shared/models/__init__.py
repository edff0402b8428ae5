"""Database models"""
from .models import (
    # Database models
    Narrative,
    NarrativeTag,
    MatchEdge,
    # Functions
    validate_narrative,
    stored_score,
    get_tags_by_narrative,
    narratives_with_tag,
    get_recent_matches,
)
from .database import database, BaseModel, init_database, initialize_database, close_database

__all__ = [
    'Narrative',
    'NarrativeTag',
    'MatchEdge',
    'validate_narrative',
    'stored_score',
    'get_tags_by_narrative',
    'narratives_with_tag',
    'get_recent_matches',
    'database',
    'BaseModel',
    'init_database',
    'initialize_database',
    'close_database',
]
