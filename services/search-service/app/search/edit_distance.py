"""
Edit distance for typo-tolerant catalog matching.

Computes the Levenshtein distance between two strings: the minimum number of
single-character insertions, deletions or substitutions needed to turn one
into the other.
"""

from typing import List


def levenshtein_distance(a: str, b: str) -> int:
    """
    Calculate the Levenshtein distance between two strings.

    Characters are compared exactly. Callers normalize case beforehand.

    Args:
        a: First string
        b: Second string

    Returns:
        Number of edits (0 when the strings are identical)

    Examples:
        "kitten" vs "sitting" -> 3
        "" vs "abc" -> 3
    """
    m = len(a)
    n = len(b)
    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1])

    return dp[m][n]
