"""
Shared pytest fixtures.

Tests run against an in-memory SQLite database and blank spaCy pipelines, so
neither PostgreSQL nor downloaded spaCy models are required.
"""

from functools import lru_cache

import pytest
import spacy

from shared.models.database import close_database, database, init_database, initialize_database
from services.tagging.tagger import TagGenerator


@lru_cache(maxsize=None)
def blank_pipeline(lang: str):
    return spacy.blank(lang)


@pytest.fixture
def db():
    init_database("sqlite:///:memory:")
    database.connect(reuse_if_open=True)
    initialize_database()
    yield database
    close_database()


@pytest.fixture
def tagger():
    return TagGenerator(nlp_loader=blank_pipeline)
