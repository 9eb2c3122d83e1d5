from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from rfc_fuzzy.config import DEFAULT_CONFIG, ScoringConfig

if TYPE_CHECKING:
    from numpy.typing import NDArray

PATH_SEPARATOR = "/"
WORD_SEPARATORS = frozenset("_- ")


def compute_bonus(
    candidate: str, config: ScoringConfig = DEFAULT_CONFIG
) -> NDArray[np.float64]:
    """
    Positional bonus for every character of a candidate.

    The bonus of position i depends on the character before it; position 0
    behaves as if it followed a path separator.

    Args:
        candidate: String to score against.
        config: Weights for the boundary bonuses.

    Returns:
        Array of shape (len(candidate),).
    """
    bonus = np.zeros(len(candidate), dtype=np.float64)
    last_char = PATH_SEPARATOR

    for i, this_char in enumerate(candidate):
        if last_char == PATH_SEPARATOR:
            bonus[i] = config.match_slash
        elif last_char in WORD_SEPARATORS:
            bonus[i] = config.match_word
        elif last_char == ".":
            bonus[i] = config.match_dot
        elif last_char.islower() and this_char.isupper():
            bonus[i] = config.match_capital
        last_char = this_char

    return bonus


__all__ = ["PATH_SEPARATOR", "WORD_SEPARATORS", "compute_bonus"]
