"""
Fuzzy matching engine for catalog search.

Decides whether a search term matches a piece of catalog text despite typos,
abbreviations ("maths", "bio", "s4") or partial phrasing. Rules are tried
in priority order and the first one that succeeds wins:

1. Exact substring
2. Forward abbreviation (term is an abbreviation, text has an expansion)
3. Reverse abbreviation (term is an expansion, text has the abbreviation)
4. Typo tolerance (edit distance <= 1 on words of 4+ characters)
"""

from enum import Enum
from typing import Iterable, Mapping, Optional, Union

import structlog

from .abbreviations import ABBREVIATIONS, freeze_abbreviations
from .edit_distance import levenshtein_distance

logger = structlog.get_logger(__name__)


class MatchRule(str, Enum):
    """Rule that produced a fuzzy match."""

    SUBSTRING = "substring"
    ABBREVIATION = "abbreviation"
    REVERSE_ABBREVIATION = "reverse_abbreviation"
    TYPO = "typo"


class FuzzyMatcher:
    """
    Typo and abbreviation tolerant matching for catalog text.

    Matching is case-insensitive. The search term is trimmed, the target
    text is not. Instances hold no mutable state and are safe to share
    between threads.
    """

    # Words shorter than this are never compared by edit distance
    MIN_WORD_LENGTH = 4
    # Largest edit distance still considered a typo
    MAX_TYPO_DISTANCE = 1
    # Largest word length difference worth comparing
    MAX_LENGTH_DIFFERENCE = 1

    def __init__(
        self, abbreviations: Optional[Mapping[str, Union[str, Iterable[str]]]] = None
    ):
        """
        Initialize fuzzy matcher.

        Args:
            abbreviations: Abbreviation -> expansions table
                           (defaults to the built-in subject table)

        Raises:
            ValidationException: If the table has a blank key or expansion
        """
        if abbreviations is None:
            self.abbreviations = ABBREVIATIONS
        else:
            self.abbreviations = freeze_abbreviations(abbreviations)
            logger.debug("custom_abbreviations_loaded", entries=len(self.abbreviations))

    def matches(self, search_term: str, target_text: str) -> bool:
        """
        Check if search term matches target text.

        Args:
            search_term: What the user typed (e.g., "chemisty")
            target_text: Catalog text (e.g., "Chemistry Senior 4")

        Returns:
            True if any matching rule succeeds
        """
        return self.match_rule(search_term, target_text) is not None

    def match_rule(self, search_term: str, target_text: str) -> Optional[MatchRule]:
        """
        Find the first rule under which search term matches target text.

        Args:
            search_term: What the user typed
            target_text: Catalog text

        Returns:
            The MatchRule that succeeded, or None if nothing matched
        """
        term = search_term.lower().strip()
        text = target_text.lower()

        if term in text:
            return MatchRule.SUBSTRING

        expansions = self.abbreviations.get(term, ())
        if any(expansion in text for expansion in expansions):
            return MatchRule.ABBREVIATION

        for abbreviation, expansions in self.abbreviations.items():
            if term in expansions and abbreviation in text:
                return MatchRule.REVERSE_ABBREVIATION

        if self._has_typo_match(term.split(), text.split()):
            return MatchRule.TYPO

        return None

    def _has_typo_match(
        self, term_words: Iterable[str], text_words: Iterable[str]
    ) -> bool:
        """
        Check if any significant term word is within one edit of a text word.

        Examples:
            "chemisty" vs "chemistry" -> True (one deletion)
            "bio" vs "bia" -> False (too short to compare)
        """
        candidates = [word for word in text_words if len(word) >= self.MIN_WORD_LENGTH]

        for term_word in term_words:
            if len(term_word) < self.MIN_WORD_LENGTH:
                continue
            for word in candidates:
                if abs(len(term_word) - len(word)) > self.MAX_LENGTH_DIFFERENCE:
                    continue
                if levenshtein_distance(term_word, word) <= self.MAX_TYPO_DISTANCE:
                    return True

        return False

    def get_stats(self) -> dict:
        """
        Get matcher configuration.

        Returns:
            Dictionary with matcher settings
        """
        return {
            "abbreviation_count": len(self.abbreviations),
            "min_word_length": self.MIN_WORD_LENGTH,
            "max_typo_distance": self.MAX_TYPO_DISTANCE,
            "max_length_difference": self.MAX_LENGTH_DIFFERENCE,
        }


_default_matcher = FuzzyMatcher()


def fuzzy_match(search_term: str, target_text: str) -> bool:
    """Check search term against target text using the built-in abbreviation table."""
    return _default_matcher.matches(search_term, target_text)

