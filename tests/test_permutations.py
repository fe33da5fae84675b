import itertools
import math

import pytest

from tour_solver.services.permutations import iter_permutations, permute


def _collect(sequence):
    seen = []
    permute(sequence, lambda arrangement: seen.append(tuple(arrangement)))
    return seen


@pytest.mark.parametrize("n", range(1, 8))
def test_permute_visits_every_ordering_once(n):
    seen = _collect(list(range(n)))

    assert len(seen) == math.factorial(n)
    assert len(set(seen)) == len(seen)
    assert set(seen) == set(itertools.permutations(range(n)))


@pytest.mark.parametrize("n", range(2, 7))
def test_consecutive_arrangements_differ_by_one_swap(n):
    seen = _collect(list(range(n)))

    for previous, current in zip(seen, seen[1:]):
        changed = [i for i in range(n) if previous[i] != current[i]]
        assert len(changed) == 2
        i, j = changed
        assert previous[i] == current[j] and previous[j] == current[i]


def test_permute_order_for_three_elements():
    assert _collect(["a", "b", "c"]) == [
        ("a", "b", "c"),
        ("b", "a", "c"),
        ("c", "a", "b"),
        ("a", "c", "b"),
        ("b", "c", "a"),
        ("c", "b", "a"),
    ]


def test_equal_values_are_distinct_positions():
    seen = _collect([7, 7, 7])

    assert seen == [(7, 7, 7)] * 6


def test_single_element_is_observed_once():
    assert _collect(["only"]) == [("only",)]


def test_empty_sequence_is_rejected():
    with pytest.raises(ValueError):
        permute([], lambda arrangement: None)
    with pytest.raises(ValueError):
        iter_permutations([])


def test_observer_receives_shared_working_list_and_input_is_untouched():
    original = [1, 2, 3, 4]
    identities = set()
    permute(original, lambda arrangement: identities.add(id(arrangement)))

    assert len(identities) == 1
    assert original == [1, 2, 3, 4]


def test_iter_permutations_matches_permute_order():
    items = ["w", "x", "y", "z"]
    lazy = [tuple(arrangement) for arrangement in iter_permutations(items)]

    assert lazy == _collect(items)


def test_iter_permutations_yields_mutating_view():
    generator = iter_permutations([1, 2])
    first = next(generator)
    snapshot = list(first)
    second = next(generator)

    assert first is second
    assert snapshot == [1, 2]
    assert second == [2, 1]
