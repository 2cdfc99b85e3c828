"""
Helpers on transactions (buckets) of items.
    -> A transaction is a set of hashable items, kept as frozenset.
    -> The item universe is the union of all transactions.
"""
from collections import defaultdict
from typing import Iterable, List, Hashable, Dict, FrozenSet

__all__ = [
    "as_transactions", "item_universe", "count_items"
]


def as_transactions(data: Iterable[Iterable[Hashable]]) -> List[FrozenSet[Hashable]]:
    """
    Normalize the input buckets into a list of frozenset.
    Duplicated items in one bucket are counted once.

    :param data: the iterable instance, like List<List<item>> or List<Set<item>>
    :return: List<FrozenSet<item>>
    """
    return [frozenset(bucket) for bucket in data]


def item_universe(transactions: Iterable[Iterable[Hashable]]) -> FrozenSet[Hashable]:
    universe = set()
    for bucket in transactions:
        universe.update(bucket)
    return frozenset(universe)


def count_items(transactions: Iterable[Iterable[Hashable]]) -> Dict[Hashable, int]:
    """
    Count the support of every single item.

    :return: dict<item, number of transactions containing the item>
    """
    count_map = defaultdict(int)
    for bucket in transactions:
        for item in set(bucket):
            count_map[item] += 1
    return dict(count_map)
