"""
Brute-Force A-Priori Algorithm:
    Every round counts all combinations of one size, instead of joining the frequent item-sets of the last round.

    Pass1 (optional):
        -> Count occurrence of each item.
        -> Drop the items below the threshold from the universe.
    Pass2:
        -> Generate every pair of items in the universe.
        -> Count pairs.
        -> Keep all frequent pairs.
    Pass3:
        -> Generate every triple of items in the universe.
        -> Count triples.
        -> Keep all frequent triples.
    Pass4 or more:
        -> ....
    Stop after a round keeping at most one item-set.

>> from skumine.freq_itemset import BruteForceAPriori
>> apriori = BruteForceAPriori(support=3)
>> frequent_itemsets = apriori.predict(iterable<set<item>>).frequent_itemsets()
"""
import logging
from collections import namedtuple
from typing import Iterable, List, Hashable, Dict, FrozenSet

from skumine.freq_itemset.combination import generate_combinations
from skumine.freq_itemset.support import get_counter
from skumine.utils import as_transactions, item_universe, count_items, check_threshold, check_set_size

__all__ = [
    "FreqItemset", "BruteForceAPriori", "mine", "STOP_RULES"
]

logger = logging.getLogger(__name__)

FreqItemset = namedtuple("FreqItemset", ["items", "freq"])

# Name of the stop rule -> the largest number of survivors which ends the mining.
STOP_RULES = {
    "at_most_one": 1,
    "empty": 0
}


class BruteForceAPriori(object):
    """
    Brute-force implementation of A-Priori Algorithm, for small universes of items.
    """
    def __init__(self, support: int, max_set_size: int=float("inf"),
                 stop_rule: str="at_most_one", prune_items: bool=False,
                 counter: str="scan", **counter_kwargs):
        """
        :param support: The threshold of frequent itemset, inclusive.
        :param max_set_size: Maximum size of Item-sets.
        :param stop_rule: "at_most_one" stops after a round with at most one frequent item-set,
            "empty" stops after a round with none.
        :param prune_items: Drop infrequent single items before generating combinations.
        :param counter: The way to count supports, "scan", "matrix" or "spark".
        :param counter_kwargs: Parameters of the counter, like spark_context and num_partitions.
        """
        if stop_rule not in STOP_RULES:
            raise ValueError("Unknown stop rule {0}, expected one of {1}.".format(stop_rule, sorted(STOP_RULES)))
        if counter == "spark" and counter_kwargs.get("spark_context") is None:
            raise ValueError("A SparkContext is required to count supports with Spark.")
        self._support = check_threshold(support)
        self._max_set_size = check_set_size(max_set_size)
        self._stop_rule = stop_rule
        self._prune_items = prune_items
        self._count = get_counter(counter)
        self._counter_kwargs = counter_kwargs
        self._freq_itemsets = None
        self.rounds_ = 0

    def predict(self, data: Iterable[Iterable[Hashable]]):
        freq_itemsets = list()
        for item_sets in self.iter_predict(data):
            freq_itemsets.extend([
                FreqItemset(items=items, freq=freq) for items, freq in item_sets.items()
            ])
        self._freq_itemsets = freq_itemsets
        logger.info("Found %d frequent item-sets in %d rounds with support %d",
                    len(freq_itemsets), self.rounds_, self._support)
        return self

    def frequent_itemsets(self) -> List[FreqItemset]:
        return self._freq_itemsets

    def itemsets(self) -> List[FrozenSet[Hashable]]:
        return [itemset.items for itemset in self._freq_itemsets]

    def iter_predict(self, data: Iterable[Iterable[Hashable]]) -> Iterable[Dict[FrozenSet[Hashable], int]]:
        """
        Output frequent item-sets round by round.
        Rounds without frequent item-sets are not yielded.

        :param data: the iterable instance.
            = The instance with implemented __iter__(), like List<Set<item>>
        :return: dict<frequent set, frequency> of one size per round.
        """
        transactions = as_transactions(data)
        universe = self._build_universe(transactions)
        max_survivors = STOP_RULES[self._stop_rule]

        self.rounds_ = 0
        set_length = 2
        while set_length <= self._max_set_size:
            item_sets = self._count_one_round(transactions, universe, set_length)
            self.rounds_ += 1
            if len(item_sets) > 0:
                yield item_sets
            if len(item_sets) <= max_survivors:
                break
            set_length += 1

    def _build_universe(self, transactions: List[FrozenSet[Hashable]]) -> FrozenSet[Hashable]:
        universe = item_universe(transactions)
        if self._prune_items:
            count_map = count_items(transactions)
            pruned = frozenset(item for item in universe if count_map[item] >= self._support)
            logger.debug("Pruned %d infrequent items from the universe", len(universe) - len(pruned))
            universe = pruned
        return universe

    def _count_one_round(self, transactions: List[FrozenSet[Hashable]],
                         universe: FrozenSet[Hashable], set_length: int) -> Dict[FrozenSet[Hashable], int]:
        """
        Generate all combinations of one size, count them and keep the frequent ones.
        """
        candidates = generate_combinations(universe, set_length)
        counts = self._count(candidates, transactions, **self._counter_kwargs)
        item_sets = {
            candidate: count for candidate, count in zip(candidates, counts) if count >= self._support
        }
        logger.debug("Round of size %d: %d candidates, %d frequent",
                     set_length, len(candidates), len(item_sets))
        return item_sets


def mine(transactions: Iterable[Iterable[Hashable]], threshold: int, **kwargs) -> List[FrozenSet[Hashable]]:
    """
    Find all item-sets of size >= 2 appearing in at least `threshold` transactions.
    The result is in the order of rounds; sort it by size if needed.

    :param transactions: the transactions, like List<Set<item>>
    :param threshold: the minimum support, a non-negative integer.
    :param kwargs: other parameters of BruteForceAPriori.
    :return: list<frozenset<item>>
    """
    return BruteForceAPriori(support=threshold, **kwargs).predict(transactions).itemsets()


if __name__ == '__main__':
    apriori = BruteForceAPriori(3)
    result = apriori.predict([
        {1, 2, 3, 4},
        {1, 2, 4},
        {1, 2},
        {2, 3, 4},
        {2, 3},
        {3, 4},
        {2, 4}
    ])
    [print(items) for items in result.frequent_itemsets()]
