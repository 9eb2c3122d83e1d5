"""
Alignment scorer for fuzzy subsequence matching.

Scores a query against one candidate with the two-matrix recurrence used by
interactive fuzzy finders:

    D[i][j]  best score of an alignment of query[:i+1] that matches query[i]
             at candidate[j]
    M[i][j]  best score of an alignment of query[:i+1] within candidate[:j+1],
             match at j not required (running maximum including gap penalties)

Matches earn the positional bonus of the candidate character (see
``rfc_fuzzy.bonus``) or, when they directly follow the previous match, a flat
consecutive bonus. Skipped candidate characters cost a small gap penalty.

Rows of D are computed with numpy in one shot; the running maximum that
produces each row of M is a scan and stays a loop so that gap penalties are
accumulated left to right.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from rfc_fuzzy.bonus import compute_bonus
from rfc_fuzzy.config import DEFAULT_CONFIG, SCORE_MAX, SCORE_MIN, ScoringConfig

if TYPE_CHECKING:
    from numpy.typing import NDArray


def _fold(text: str) -> NDArray[np.str_]:
    # Lowercase per character so positions line up with the bonus vector.
    return np.array([ch.lower() for ch in text], dtype=np.str_)


def is_unmatchable(query: str, candidate: str, config: ScoringConfig = DEFAULT_CONFIG) -> bool:
    """True when either string is empty or longer than ``config.max_match_length``."""
    n, m = len(query), len(candidate)
    return n == 0 or m == 0 or n > config.max_match_length or m > config.max_match_length


def compute(
    query: str,
    candidate: str,
    D: NDArray[np.float64],
    M: NDArray[np.float64],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> None:
    """
    Fill the score matrices for one (query, candidate) pair.

    Args:
        query: Query of length n (n >= 1).
        candidate: Candidate of length m (m >= 1).
        D: Scratch matrix of shape (n, m), overwritten.
        M: Scratch matrix of shape (n, m), overwritten.
        config: Weights.
    """
    n, m = len(query), len(candidate)
    bonus = compute_bonus(candidate, config)
    query_lower = [ch.lower() for ch in query]
    candidate_lower = _fold(candidate)
    leading = np.arange(m, dtype=np.float64) * config.gap_leading + bonus

    for i in range(n):
        gap = config.gap_trailing if i == n - 1 else config.gap_inner
        matches = candidate_lower == query_lower[i]

        if i == 0:
            scores = leading
        else:
            scores = np.full(m, SCORE_MIN, dtype=np.float64)
            scores[1:] = np.maximum(
                M[i - 1, :-1] + bonus[1:],
                D[i - 1, :-1] + config.match_consecutive,
            )
        D[i] = np.where(matches, scores, SCORE_MIN)

        # D is SCORE_MIN on mismatches, so max() reduces to prev_score + gap there.
        row = D[i].tolist()
        prev_score = SCORE_MIN
        for j in range(m):
            prev_score = max(row[j], prev_score + gap)
            row[j] = prev_score
        M[i] = row


def score(query: str, candidate: str, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    """
    Relevance of ``candidate`` for ``query``.

    Returns ``SCORE_MIN`` when either string is empty or too long, and
    ``SCORE_MAX`` whenever both strings have the same length, without looking
    at their contents. Otherwise returns ``M[n-1][m-1]``, which is
    ``SCORE_MIN`` when the query is not a subsequence of the candidate.
    """
    if is_unmatchable(query, candidate, config):
        return SCORE_MIN

    n, m = len(query), len(candidate)
    # Same length always counts as a perfect match; content is not compared.
    if n == m:
        return SCORE_MAX

    D = np.empty((n, m), dtype=np.float64)
    M = np.empty((n, m), dtype=np.float64)
    compute(query, candidate, D, M, config)

    return float(M[n - 1, m - 1])


__all__ = ["compute", "is_unmatchable", "score"]
