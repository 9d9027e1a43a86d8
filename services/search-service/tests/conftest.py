"""
Test configuration and fixtures
"""

import pytest

from app.domain.entities import CatalogRecord
from app.search.fuzzy_matcher import FuzzyMatcher
from app.search.relevance_scorer import RelevanceScorer


@pytest.fixture
def matcher():
    """Fuzzy matcher with the built-in abbreviation table."""
    return FuzzyMatcher()


@pytest.fixture
def scorer():
    """Relevance scorer with the built-in abbreviation table."""
    return RelevanceScorer()


@pytest.fixture
def sample_catalog():
    """Small course catalog for ranking tests."""
    return [
        CatalogRecord(
            record_id="1",
            title="Mathematics 101",
            description="Intro course covering algebra and geometry",
            subject="Maths",
        ),
        CatalogRecord(
            record_id="2",
            title="Chemistry Senior 4",
            description="Organic and inorganic chemistry",
            subject="Chemistry",
        ),
        CatalogRecord(
            record_id="3",
            title="Biology Lab",
            description="Cells, genetics and a field trip",
            subject="Biology",
        ),
        CatalogRecord(
            record_id="4",
            title="English Literature",
            description="Poetry and prose, with some maths puzzles",
            subject="English",
        ),
        CatalogRecord(
            record_id="5",
            title="Maths",
            description="Senior 1 revision",
            subject="Maths",
        ),
    ]
