"""
Scoring configuration for the fuzzy ranking engine.

All tunables live on a single immutable ``ScoringConfig`` value that is handed
to the scorer and the ranker at construction time. Nothing in the package reads
module-level weights, so test suites can vary them freely.

Usage:
    from rfc_fuzzy.config import DEFAULT_CONFIG, ScoringConfig

    config = DEFAULT_CONFIG.replace(pool_size=4)
    config = ScoringConfig.from_env()  # RFC_FUZZY_POOL_SIZE=8 ...
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass

# =============================================================================
# Sentinel scores
# =============================================================================

# No match / excluded candidate. Sorts after every finite score.
SCORE_MIN = float("-inf")

# Same-length query and candidate. Sorts before every finite score.
SCORE_MAX = float("inf")

ENV_PREFIX = "RFC_FUZZY_"


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class ScoringConfig:
    """
    Immutable set of weights and limits used by the scorer and the ranker.

    Attributes:
        gap_leading: Penalty per candidate character skipped before the first match.
        gap_trailing: Penalty per candidate character skipped after the last query character.
        gap_inner: Penalty per candidate character skipped between matches.
        match_consecutive: Flat bonus for a match directly following another match.
        match_slash: Bonus for a match right after a path separator.
        match_word: Bonus for a match right after ``_``, ``-`` or a space.
        match_capital: Bonus for an uppercase match right after a lowercase character.
        match_dot: Bonus for a match right after ``.``.
        max_match_length: Longest query or candidate that is still scored.
        pool_size: Maximum number of candidates scored concurrently.
        min_candidates_for_parallel: Below this many candidates scoring runs
            sequentially in the calling thread.
    """

    gap_leading: float = -0.005
    gap_trailing: float = -0.005
    gap_inner: float = -0.01
    match_consecutive: float = 1.0
    match_slash: float = 0.9
    match_word: float = 0.8
    match_capital: float = 0.7
    match_dot: float = 0.6
    max_match_length: int = 1024
    pool_size: int = 20
    min_candidates_for_parallel: int = 10

    def __post_init__(self) -> None:
        if self.max_match_length < 1:
            raise ValueError(f"max_match_length must be >= 1, got {self.max_match_length}")
        if self.pool_size < 1:
            raise ValueError(f"pool_size must be >= 1, got {self.pool_size}")
        if self.min_candidates_for_parallel < 0:
            raise ValueError(
                f"min_candidates_for_parallel must be >= 0, got {self.min_candidates_for_parallel}"
            )

    def replace(self, **changes) -> "ScoringConfig":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, environ=None) -> "ScoringConfig":
        """
        Build a config from environment variables.

        Each field maps to ``<prefix><FIELD_NAME>`` in upper case, e.g.
        ``RFC_FUZZY_POOL_SIZE``. Unset variables keep their defaults.

        Args:
            prefix: Variable name prefix.
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            A validated ``ScoringConfig``.

        Raises:
            ValueError: If a variable cannot be parsed or the result is invalid.
        """
        env = os.environ if environ is None else environ
        values = {}
        for field in dataclasses.fields(cls):
            name = f"{prefix}{field.name.upper()}"
            raw = env.get(name)
            if raw is None or raw.strip() == "":
                continue
            convert = int if isinstance(field.default, int) else float
            try:
                values[field.name] = convert(raw.strip())
            except ValueError as e:
                raise ValueError(f"invalid value for {name}: {raw!r}") from e
        return cls(**values)


DEFAULT_CONFIG = ScoringConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "SCORE_MAX",
    "SCORE_MIN",
    "ScoringConfig",
]
