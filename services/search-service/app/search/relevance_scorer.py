"""
Relevance scoring system for catalog search results.

Scores a catalog record against a query by adding up independent signals:

- Title match: exact (100) or contains (90)
- Title word overlap: up to 70, proportional to the share of matching words
- Subject match: exact (80) or contains (75)
- Description contains query (40)
- Fuzzy bonus for typos/abbreviations in title or subject (20)

Scores are only meaningful relative to each other.
"""

import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import structlog

from ..config import settings
from ..domain.entities import CatalogRecord
from ..domain.exceptions import ValidationException
from ..metrics import rank_duration_seconds, rank_requests_total, rank_results
from .fuzzy_matcher import FuzzyMatcher, MatchRule

logger = structlog.get_logger(__name__)


@dataclass
class SearchMatch:
    """
    Container for a ranked catalog record.

    Attributes:
        record: The scored catalog record
        score: Relevance score (0-310)
        fuzzy_rule: Fuzzy rule that matched title and subject, if any
    """

    record: CatalogRecord
    score: float
    fuzzy_rule: Optional[MatchRule] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        result = self.record.to_dict()
        result["_relevance"] = {
            "score": round(self.score, 2),
            "fuzzy_rule": self.fuzzy_rule.value if self.fuzzy_rule else None,
        }
        return result


class RelevanceScorer:
    """
    Calculate relevance scores for catalog records.

    Title and subject each use an else-chain (exact beats contains, never
    both). Every other signal is added independently.
    """

    EXACT_TITLE_SCORE = 100.0
    PARTIAL_TITLE_SCORE = 90.0
    TITLE_WORD_WEIGHT = 70.0
    EXACT_SUBJECT_SCORE = 80.0
    PARTIAL_SUBJECT_SCORE = 75.0
    DESCRIPTION_SCORE = 40.0
    FUZZY_BONUS = 20.0

    # Shorter queries get no fuzzy bonus (too noisy)
    MIN_FUZZY_QUERY_LENGTH = 4

    def __init__(self, matcher: Optional[FuzzyMatcher] = None):
        """
        Initialize relevance scorer.

        Args:
            matcher: Fuzzy matcher used for the fuzzy bonus
                     (defaults to one using the built-in abbreviation table)
        """
        self.matcher = matcher or FuzzyMatcher()

    def calculate_match_score(
        self, query: str, title: str, description: str, subject: str
    ) -> float:
        """
        Calculate relevance score of one record for a query.

        Args:
            query: Search query
            title: Record title
            description: Record description
            subject: Record subject

        Returns:
            Relevance score (>= 0)
        """
        return self._score(query, title, description, subject)[0]

    def score(self, query: str, record: CatalogRecord) -> SearchMatch:
        """
        Score a catalog record.

        Args:
            query: Search query
            record: Catalog record

        Returns:
            SearchMatch with calculated score
        """
        total, fuzzy_rule = self._score(
            query, record.title, record.description, record.subject
        )
        return SearchMatch(record=record, score=total, fuzzy_rule=fuzzy_rule)

    def rank(
        self,
        query: str,
        records: Iterable[CatalogRecord],
        limit: Optional[int] = None,
        min_score: Optional[float] = None,
    ) -> List[SearchMatch]:
        """
        Score records and return the relevant ones, best first.

        Records scoring 0 or below min_score are dropped. Records with
        equal scores keep their input order.

        Args:
            query: Search query
            records: Candidate catalog records
            limit: Maximum results (defaults to RANK_MAX_RESULTS)
            min_score: Minimum score to keep (defaults to RANK_MIN_SCORE)

        Returns:
            List of SearchMatch objects sorted by score (descending)

        Raises:
            ValidationException: If limit < 1 or min_score < 0
        """
        if limit is None:
            limit = settings.RANK_MAX_RESULTS
        if min_score is None:
            min_score = settings.RANK_MIN_SCORE

        if limit < 1:
            rank_requests_total.labels(status="invalid").inc()
            raise ValidationException("limit", limit, "must be at least 1")
        if min_score < 0:
            rank_requests_total.labels(status="invalid").inc()
            raise ValidationException("min_score", min_score, "must not be negative")

        start_time = time.perf_counter()

        candidates = 0
        scored_matches = []
        for record in records:
            candidates += 1
            match = self.score(query, record)
            if match.score > 0 and match.score >= min_score:
                scored_matches.append(match)

        # Sort by score descending
        scored_matches.sort(key=lambda m: m.score, reverse=True)
        results = scored_matches[:limit]

        rank_duration_seconds.observe(time.perf_counter() - start_time)
        rank_requests_total.labels(status="success").inc()
        rank_results.observe(len(results))

        logger.debug(
            "catalog_ranked",
            query=query,
            candidates=candidates,
            matched=len(scored_matches),
            returned=len(results),
        )

        return results

    def _score(
        self, query: str, title: str, description: str, subject: str
    ) -> Tuple[float, Optional[MatchRule]]:
        """Return (score, fuzzy rule) for one record."""
        query_lower = query.lower().strip()
        title_lower = title.lower()
        subject_lower = subject.lower()

        score = 0.0

        if title_lower == query_lower:
            score += self.EXACT_TITLE_SCORE
        elif query_lower in title_lower:
            score += self.PARTIAL_TITLE_SCORE

        score += self._title_word_score(query_lower, title_lower)

        if subject_lower == query_lower:
            score += self.EXACT_SUBJECT_SCORE
        elif query_lower in subject_lower:
            score += self.PARTIAL_SUBJECT_SCORE

        if query_lower in description.lower():
            score += self.DESCRIPTION_SCORE

        fuzzy_rule = None
        if len(query_lower) >= self.MIN_FUZZY_QUERY_LENGTH:
            fuzzy_rule = self.matcher.match_rule(query, f"{title} {subject}")
            if fuzzy_rule is not None:
                score += self.FUZZY_BONUS

        return score, fuzzy_rule

    def _title_word_score(self, query_lower: str, title_lower: str) -> float:
        """
        Score the share of title words overlapping a query word.

        A title word overlaps when it contains a query word or is contained
        in one. An empty title scores 0.

        Examples:
            "calc" vs "calculus 1" -> 35.0 (1 of 2 words)
            "senior math" vs "math" -> 70.0
        """
        title_words = title_lower.split()
        if not title_words:
            return 0.0

        query_words = query_lower.split()
        match_count = sum(
            1
            for word in title_words
            if any(qw in word or word in qw for qw in query_words)
        )
        if match_count == 0:
            return 0.0

        return self.TITLE_WORD_WEIGHT * (match_count / len(title_words))

    def get_stats(self) -> dict:
        """
        Get scorer configuration.

        Returns:
            Dictionary with scorer weights and matcher settings
        """
        return {
            "weights": {
                "exact_title": self.EXACT_TITLE_SCORE,
                "partial_title": self.PARTIAL_TITLE_SCORE,
                "title_words": self.TITLE_WORD_WEIGHT,
                "exact_subject": self.EXACT_SUBJECT_SCORE,
                "partial_subject": self.PARTIAL_SUBJECT_SCORE,
                "description": self.DESCRIPTION_SCORE,
                "fuzzy_bonus": self.FUZZY_BONUS,
            },
            "matcher": self.matcher.get_stats(),
        }


_default_scorer = RelevanceScorer()


def calculate_match_score(
    query: str, title: str, description: str, subject: str
) -> float:
    """Calculate relevance score using the built-in abbreviation table."""
    return _default_scorer.calculate_match_score(query, title, description, subject)
