"""
Fuzzy ranking engine.

Fans the alignment scorer out over a list of candidates, waits for every
candidate to be scored, then sorts and filters the results.

Scoring uses a ThreadPoolExecutor limited to ``config.pool_size`` workers,
which bounds how many score matrices are alive at once. Small lists are scored
sequentially. Every candidate is independent; the only synchronisation points
are pool admission and the final join.

Usage:
    from rfc_fuzzy.ranker import FuzzyRanker, rank

    rank("tls", ["rfc8446::The Transport Layer Security (TLS) Protocol", ...])

    ranker = FuzzyRanker(config)
    results = ranker.score_all("tls", candidates, deadline=0.5)
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from rfc_fuzzy.config import DEFAULT_CONFIG, SCORE_MIN, ScoringConfig
from rfc_fuzzy.ranking_utils import RankedResult, sort_and_filter
from rfc_fuzzy.scorer import score

logger = logging.getLogger(__name__)


class FuzzyRanker:
    """
    Ranks candidate strings against a query.

    Args:
        config: Weights and limits. Defaults to ``DEFAULT_CONFIG``.
    """

    def __init__(self, config: ScoringConfig | None = None):
        self.config = config if config is not None else DEFAULT_CONFIG

    def score(self, query: str, candidate: str) -> float:
        """Score a single candidate."""
        return score(query, candidate, self.config)

    def _score_task(
        self,
        query: str,
        candidate: str,
        index: int,
        expires_at: float | None,
    ) -> RankedResult | None:
        # None marks a candidate that was never admitted before the deadline
        if expires_at is not None and time.monotonic() >= expires_at:
            return None
        return RankedResult(candidate, score(query, candidate, self.config), index)

    def score_all(
        self,
        query: str,
        candidates: Sequence[str],
        deadline: float | None = None,
    ) -> list[RankedResult]:
        """
        Score every candidate.

        Args:
            query: Query string.
            candidates: Candidate strings.
            deadline: Optional time budget in seconds. Candidates not yet
                started when it runs out are reported as ``SCORE_MIN``.

        Returns:
            One RankedResult per candidate, in input order.
        """
        if not candidates:
            return []

        expires_at = None if deadline is None else time.monotonic() + deadline

        def score_single(item: tuple[int, str]) -> RankedResult | None:
            index, candidate = item
            return self._score_task(query, candidate, index, expires_at)

        items = list(enumerate(candidates))
        parallel = len(items) >= self.config.min_candidates_for_parallel
        logger.debug(
            "scoring %d candidates against query of length %d (%s)",
            len(items),
            len(query),
            "parallel" if parallel else "sequential",
        )

        if not parallel:
            scored = [score_single(item) for item in items]
        else:
            # map() yields in submission order; list() waits for all of them
            with ThreadPoolExecutor(max_workers=self.config.pool_size) as executor:
                scored = list(executor.map(score_single, items))

        skipped = sum(1 for result in scored if result is None)
        if skipped:
            logger.warning(
                "deadline of %.3fs exceeded, %d of %d candidates were not scored",
                deadline,
                skipped,
                len(items),
            )

        return [
            result if result is not None else RankedResult(candidate, SCORE_MIN, index)
            for (index, candidate), result in zip(items, scored)
        ]

    def rank(
        self,
        query: str,
        candidates: Sequence[str],
        deadline: float | None = None,
    ) -> list[str]:
        """
        Candidates that match ``query``, best first.

        Equal scores keep their input order. An empty query matches nothing.
        """
        results = self.score_all(query, candidates, deadline=deadline)
        ranked = sort_and_filter(results)
        logger.debug("%d of %d candidates matched", len(ranked), len(results))
        return ranked


def rank(
    query: str,
    candidates: Sequence[str],
    config: ScoringConfig | None = None,
    deadline: float | None = None,
) -> list[str]:
    """Rank ``candidates`` against ``query`` with a one-off FuzzyRanker."""
    return FuzzyRanker(config).rank(query, candidates, deadline=deadline)


__all__ = ["FuzzyRanker", "rank"]
