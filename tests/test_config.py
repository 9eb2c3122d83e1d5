import dataclasses

import pytest

from rfc_fuzzy.config import DEFAULT_CONFIG, SCORE_MAX, SCORE_MIN, ScoringConfig


def test_defaults():
    assert DEFAULT_CONFIG.gap_leading == -0.005
    assert DEFAULT_CONFIG.gap_trailing == -0.005
    assert DEFAULT_CONFIG.gap_inner == -0.01
    assert DEFAULT_CONFIG.match_consecutive == 1.0
    assert DEFAULT_CONFIG.match_slash == 0.9
    assert DEFAULT_CONFIG.match_word == 0.8
    assert DEFAULT_CONFIG.match_capital == 0.7
    assert DEFAULT_CONFIG.match_dot == 0.6
    assert DEFAULT_CONFIG.max_match_length == 1024
    assert DEFAULT_CONFIG.pool_size == 20


def test_sentinels_bracket_finite_scores():
    assert SCORE_MIN < -1e300 < 1e300 < SCORE_MAX


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.pool_size = 4


def test_replace_returns_copy():
    config = DEFAULT_CONFIG.replace(pool_size=4, gap_inner=-0.02)
    assert config.pool_size == 4
    assert config.gap_inner == -0.02
    assert DEFAULT_CONFIG.pool_size == 20


@pytest.mark.parametrize(
    "changes",
    [{"pool_size": 0}, {"max_match_length": 0}, {"min_candidates_for_parallel": -1}],
)
def test_invalid_values(changes):
    with pytest.raises(ValueError):
        ScoringConfig(**changes)


def test_from_env():
    environ = {
        "RFC_FUZZY_POOL_SIZE": "8",
        "RFC_FUZZY_GAP_INNER": "-0.02",
        "RFC_FUZZY_MATCH_WORD": "",
        "UNRELATED": "1",
    }
    config = ScoringConfig.from_env(environ=environ)
    assert config.pool_size == 8
    assert isinstance(config.pool_size, int)
    assert config.gap_inner == -0.02
    assert config.match_word == 0.8


def test_from_env_custom_prefix():
    config = ScoringConfig.from_env(prefix="FZY_", environ={"FZY_MAX_MATCH_LENGTH": "64"})
    assert config.max_match_length == 64


def test_from_env_invalid_value():
    with pytest.raises(ValueError, match="RFC_FUZZY_POOL_SIZE"):
        ScoringConfig.from_env(environ={"RFC_FUZZY_POOL_SIZE": "many"})


def test_from_env_validates():
    with pytest.raises(ValueError):
        ScoringConfig.from_env(environ={"RFC_FUZZY_POOL_SIZE": "0"})
