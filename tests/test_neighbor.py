import numpy as np
import pytest

from AnnealTSP import InvalidOperationError, neighbor


class ScriptedRng:
    """Returns pre-baked integers so the retry path can be exercised."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def integers(self, bound):
        self.calls += 1
        return self.values.pop(0)


def test_swaps_exactly_two_positions_and_keeps_permutation():
    rng = np.random.default_rng(7)
    route = list(range(8))
    for _ in range(200):
        candidate = neighbor(route, rng)
        assert sorted(candidate) == route
        changed = [k for k in range(len(route)) if candidate[k] != route[k]]
        assert len(changed) == 2
        i, j = changed
        assert candidate[i] == route[j] and candidate[j] == route[i]


def test_returns_independent_copy():
    route = [3, 1, 2, 0]
    candidate = neighbor(route, np.random.default_rng(0))
    assert route == [3, 1, 2, 0]
    assert candidate is not route


def test_redraws_second_position_until_distinct():
    rng = ScriptedRng([1, 1, 1, 3])
    candidate = neighbor([10, 11, 12, 13], rng)
    assert candidate == [10, 13, 12, 11]
    assert rng.calls == 4


def test_two_vertex_route_always_swaps():
    rng = np.random.default_rng(3)
    for _ in range(20):
        assert neighbor([0, 1], rng) == [1, 0]


@pytest.mark.parametrize("route", [[], [0]])
def test_degenerate_routes_fail_fast(route):
    with pytest.raises(InvalidOperationError):
        neighbor(route, ScriptedRng([]))
