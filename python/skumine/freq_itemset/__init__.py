"""
This module is to find frequent item-sets with given support value.
    -> The input is a list of transactions, like:
    [
        {itemA, itemB, ...},
        {itemA, itemC, ...},
        ...
    ]
    Each transaction is a bucket of items bought together.

    -> The output result is a list of frequent item-sets with size >= 2, like:
    [
        frozenset({itemA, itemB}),
        ...
    ]
    in the order of the rounds which found them.

    The item-set is presented in frozenset.
"""

from .apriori import BruteForceAPriori, FreqItemset, mine
from .combination import generate_combinations
from .support import count_and_filter, count_support, count_supports

__all__ = [
    "BruteForceAPriori", "FreqItemset", "mine",
    "generate_combinations", "count_and_filter",
    "count_support", "count_supports"
]
