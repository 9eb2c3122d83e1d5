import random

from rfc_fuzzy.config import SCORE_MAX, SCORE_MIN
from rfc_fuzzy.ranking_utils import (
    RankedResult,
    filter_matches,
    sort_and_filter,
    sort_results,
)


def _results():
    return [
        RankedResult("b", 1.0, 0),
        RankedResult("a", 2.0, 1),
        RankedResult("c", SCORE_MIN, 2),
        RankedResult("d", SCORE_MAX, 3),
        RankedResult("e", 1.0, 4),
    ]


def test_sort_and_filter():
    assert sort_and_filter(_results()) == ["d", "a", "b", "e"]


def test_sort_results_puts_min_last():
    ordered = sort_results(_results())
    assert [r.candidate for r in ordered] == ["d", "a", "b", "e", "c"]


def test_ties_follow_input_index_regardless_of_arrival_order():
    results = [RankedResult(f"c{i}", 0.5, i) for i in range(50)]
    shuffled = results[:]
    random.Random(7).shuffle(shuffled)
    assert sort_and_filter(shuffled) == [f"c{i}" for i in range(50)]


def test_filter_matches():
    kept = filter_matches(_results())
    assert [r.candidate for r in kept] == ["b", "a", "d", "e"]
    assert all(r.matched for r in kept)


def test_empty():
    assert sort_results([]) == []
    assert sort_and_filter([]) == []


def test_all_min():
    results = [RankedResult("x", SCORE_MIN, 0), RankedResult("y", SCORE_MIN, 1)]
    assert sort_and_filter(results) == []
