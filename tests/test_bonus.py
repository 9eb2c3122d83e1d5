import numpy as np
import pytest

from rfc_fuzzy.bonus import compute_bonus
from rfc_fuzzy.config import ScoringConfig


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("MyFile", [0.9, 0.0, 0.7, 0.0, 0.0, 0.0]),
        ("my_file", [0.9, 0.0, 0.0, 0.8, 0.0, 0.0, 0.0]),
        ("myfile", [0.9, 0.0, 0.0, 0.0, 0.0, 0.0]),
        ("a.b-c d/e", [0.9, 0.0, 0.6, 0.0, 0.8, 0.0, 0.8, 0.0, 0.9]),
        # uppercase after uppercase is not a camel-case boundary
        ("ABc", [0.9, 0.0, 0.0]),
        ("rfc8446::TLS", [0.9, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0]),
    ],
)
def test_compute_bonus(candidate, expected):
    bonus = compute_bonus(candidate)
    assert bonus.shape == (len(candidate),)
    assert np.allclose(bonus, expected)


def test_empty_candidate():
    assert compute_bonus("").shape == (0,)


def test_bonus_uses_config_weights():
    config = ScoringConfig(match_slash=0.5, match_word=0.25, match_capital=0.125, match_dot=0.0625)
    bonus = compute_bonus("a_bC.d", config)
    assert np.allclose(bonus, [0.5, 0.0, 0.25, 0.125, 0.0, 0.0625])


def test_boundary_ordering():
    """Slash beats word beats capital beats dot."""
    bonus = compute_bonus("/a_bcD.e")
    slash, word, capital, dot = bonus[1], bonus[3], bonus[5], bonus[7]
    assert slash > word > capital > dot > 0.0
