"""
Shared utilities for turning scored candidates into a ranked list.

This module provides:
1. RankedResult - the (candidate, score) record produced once per candidate
2. Stable descending sort - ties keep their original input order
3. Filtering - candidates scoring SCORE_MIN are dropped

Usage:
    from rfc_fuzzy.ranking_utils import RankedResult, sort_and_filter
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from rfc_fuzzy.config import SCORE_MIN


@dataclass(frozen=True)
class RankedResult:
    """
    Score of one candidate.

    Attributes:
        candidate: The candidate string.
        score: Relevance score, ``SCORE_MIN`` for no match.
        index: Position of the candidate in the caller's input, used as tie-break.
    """

    candidate: str
    score: float
    index: int

    @property
    def matched(self) -> bool:
        return self.score != SCORE_MIN


# =============================================================================
# Sorting
# =============================================================================


def sort_results(results: Iterable[RankedResult]) -> list[RankedResult]:
    """
    Sort by descending score, breaking ties by ascending input index.

    SCORE_MAX entries come first and SCORE_MIN entries last.
    """
    results = list(results)
    if not results:
        return []

    scores = np.fromiter((r.score for r in results), dtype=np.float64, count=len(results))
    indices = np.fromiter((r.index for r in results), dtype=np.int64, count=len(results))

    # lexsort uses the last key as primary
    order = np.lexsort((indices, -scores))
    return [results[k] for k in order]


# =============================================================================
# Filtering
# =============================================================================


def filter_matches(results: Iterable[RankedResult]) -> list[RankedResult]:
    """Drop every result that scored SCORE_MIN."""
    return [r for r in results if r.matched]


def sort_and_filter(results: Iterable[RankedResult]) -> list[str]:
    """
    Ordered candidate strings from a complete, unordered result set.

    Args:
        results: One RankedResult per candidate.

    Returns:
        Candidates that matched, best first.
    """
    return [r.candidate for r in filter_matches(sort_results(results))]


__all__ = [
    "RankedResult",
    "filter_matches",
    "sort_and_filter",
    "sort_results",
]
