"""
Combination Generator:
    Enumerate every unique unordered subset of size n from the item universe.
    -> Sort the universe into a canonical order.
    -> Walk the n-combinations of the ordered items; each subset appears exactly once,
       so no duplicate check is needed.

>> from skumine.freq_itemset import generate_combinations
>> generate_combinations({3, 1, 2}, 2)
[frozenset({1, 2}), frozenset({1, 3}), frozenset({2, 3})]
"""
from itertools import combinations
from typing import Iterable, List, Hashable, FrozenSet

__all__ = [
    "canonical_order", "generate_combinations"
]


def canonical_order(universe: Iterable[Hashable]) -> List[Hashable]:
    """
    Sort items into a fixed order.
    Items which can't be compared with each other (e.g. mixed int and str) are ordered by repr.
    """
    items = list(universe)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=lambda item: (type(item).__name__, repr(item)))


def generate_combinations(universe: Iterable[Hashable], n: int) -> List[FrozenSet[Hashable]]:
    """
    :param universe: set<item>, the distinct items.
    :param n: the size of the combinations, n >= 1.
    :return: list<frozenset<item>>, empty if n is larger than the universe.
    """
    if n < 1:
        raise ValueError("The size of combinations should be at least 1, got {0}.".format(n))
    ordered = canonical_order(set(universe))
    if n > len(ordered):
        return list()
    return [frozenset(combination) for combination in combinations(ordered, n)]
