"""
Search module for catalog matching.

Provides typo and abbreviation tolerant matching plus relevance scoring
for ranking catalog records.
"""
from .abbreviations import ABBREVIATIONS
from .edit_distance import levenshtein_distance
from .fuzzy_matcher import FuzzyMatcher, MatchRule, fuzzy_match
from .relevance_scorer import RelevanceScorer, SearchMatch, calculate_match_score

__all__ = [
    "ABBREVIATIONS",
    "FuzzyMatcher",
    "MatchRule",
    "RelevanceScorer",
    "SearchMatch",
    "calculate_match_score",
    "fuzzy_match",
    "levenshtein_distance",
]
