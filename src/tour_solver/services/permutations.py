"""In-place permutation generation (Heap's minimal-swap scheme).

Every ordering of the input positions is produced exactly once, and
consecutive arrangements differ by a single transposition. The arrangement
handed to the caller is the working list itself and is mutated between
calls; copy it to keep it.
"""

from __future__ import annotations

from typing import Callable, Iterator, MutableSequence, Sequence, TypeVar

T = TypeVar("T")


def _swap(items: MutableSequence[T], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def _advance(items: MutableSequence[T], k: int, i: int) -> None:
    if k % 2 == 0:
        _swap(items, i, k - 1)
    else:
        _swap(items, 0, k - 1)


def _working_copy(sequence: Sequence[T]) -> list[T]:
    working = list(sequence)
    if not working:
        raise ValueError("Cannot permute an empty sequence.")
    return working


def _permute_inner(k: int, items: list[T], observe: Callable[[list[T]], None]) -> None:
    if k == 1:
        observe(items)
        return
    for i in range(k - 1):
        _permute_inner(k - 1, items, observe)
        _advance(items, k, i)
    _permute_inner(k - 1, items, observe)


def permute(sequence: Sequence[T], observe: Callable[[list[T]], None]) -> None:
    """Call ``observe`` once for each of the ``len(sequence)!`` orderings.

    The input is copied into a private working list; ``observe`` receives that
    list and must not retain it past the call.

    Raises:
        ValueError: if ``sequence`` is empty.
    """
    working = _working_copy(sequence)
    _permute_inner(len(working), working, observe)


def _iter_inner(k: int, items: list[T]) -> Iterator[list[T]]:
    if k == 1:
        yield items
        return
    for i in range(k - 1):
        yield from _iter_inner(k - 1, items)
        _advance(items, k, i)
    yield from _iter_inner(k - 1, items)


def iter_permutations(sequence: Sequence[T]) -> Iterator[list[T]]:
    """Lazily yield the same arrangements, in the same order, as :func:`permute`.

    Each item is the shared working list. Restart by calling again.
    """
    working = _working_copy(sequence)
    return _iter_inner(len(working), working)
