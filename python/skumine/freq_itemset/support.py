"""
Support Counter & Filter:
    The support of a candidate is the number of transactions which are supersets of it.
    -> Every candidate is counted independently, with no pruning from the counts of smaller item-sets.
    -> Candidates with support >= threshold are kept, in their original order.

Three ways to count:
    1. Scan:
        Check each candidate against each transaction with pure python.
        -> O(|candidates| * |transactions| * |candidate|)
    2. Incidence Matrix:
        Keep a boolean matrix, where (row i, col j) tells if transaction i contains item j.
        -> The support of a candidate is the number of rows whose candidate columns are all True.
        -> The total memory cost is |transactions| * |items| Bytes
    3. Spark:
        Parallelize the transactions, emit (candidate index, 1) for each contained candidate and reduce by key.
        The counts are merged back into the candidates' order on the driver.
"""
import logging
from typing import Iterable, List, Hashable, FrozenSet, Sequence, Callable

import numpy as np
from pyspark import SparkContext

from skumine.utils import as_transactions, check_threshold

__all__ = [
    "count_support", "count_supports", "count_supports_matrix", "count_supports_spark",
    "count_and_filter", "get_counter", "COUNTERS"
]

logger = logging.getLogger(__name__)


def count_support(candidate: FrozenSet[Hashable], transactions: Iterable[FrozenSet[Hashable]]) -> int:
    return sum(1 for bucket in transactions if candidate.issubset(bucket))


def count_supports(candidates: Sequence[FrozenSet[Hashable]],
                   transactions: Sequence[FrozenSet[Hashable]], **kwargs) -> List[int]:
    """
    :param candidates: list<frozenset<item>>
    :param transactions: list<frozenset<item>>
    :return: list<int>, the support of each candidate.
    """
    return [count_support(candidate, transactions) for candidate in candidates]


def count_supports_matrix(candidates: Sequence[FrozenSet[Hashable]],
                          transactions: Sequence[FrozenSet[Hashable]], **kwargs) -> List[int]:
    if len(candidates) == 0:
        return list()

    index = dict()
    for bucket in transactions:
        for item in bucket:
            if item not in index:
                index[item] = len(index)

    matrix = np.zeros((len(transactions), len(index)), dtype=bool)
    for row, bucket in enumerate(transactions):
        if bucket:
            matrix[row, [index[item] for item in bucket]] = True

    counts = list()
    for candidate in candidates:
        if any(item not in index for item in candidate):
            # an item never bought can't be in any transaction
            counts.append(0)
            continue
        columns = [index[item] for item in candidate]
        counts.append(int(matrix[:, columns].all(axis=1).sum()))
    return counts


def count_supports_spark(candidates: Sequence[FrozenSet[Hashable]],
                         transactions: Sequence[FrozenSet[Hashable]],
                         spark_context: SparkContext=None,
                         num_partitions: int=None, **kwargs) -> List[int]:
    """
    Count the supports with Spark.

    :param spark_context: the SparkContext to run the job.
    :param num_partitions: number of partitions of the transactions RDD.
    """
    if spark_context is None:
        raise ValueError("A SparkContext is required to count supports with Spark.")
    if len(candidates) == 0:
        return list()

    indexed_candidates = list(enumerate(candidates))
    counts = spark_context.parallelize(transactions, num_partitions)\
        .flatMap(lambda bucket: _count_candidates_in_bucket(bucket, indexed_candidates))\
        .reduceByKey(lambda x, y: x + y)\
        .collectAsMap()
    return [counts.get(idx, 0) for idx in range(len(candidates))]


def _count_candidates_in_bucket(bucket, indexed_candidates):
    for idx, candidate in indexed_candidates:
        if candidate.issubset(bucket):
            yield (idx, 1)


COUNTERS = {
    "scan": count_supports,
    "matrix": count_supports_matrix,
    "spark": count_supports_spark
}


def get_counter(name: str) -> Callable:
    if name not in COUNTERS:
        raise ValueError("Unknown counter {0}, expected one of {1}.".format(name, sorted(COUNTERS)))
    return COUNTERS[name]


def count_and_filter(candidates: Iterable[Iterable[Hashable]],
                     transactions: Iterable[Iterable[Hashable]],
                     threshold: int, counter: str="scan", **kwargs) -> List[FrozenSet[Hashable]]:
    """
    Keep the candidates appearing in at least `threshold` transactions.

    :param candidates: the candidate item-sets.
    :param transactions: the transactions (buckets).
    :param threshold: the minimum support, inclusive.
    :param counter: "scan", "matrix" or "spark".
    :param kwargs: other parameters of the counter, like spark_context.
    :return: list<frozenset<item>>, the frequent candidates in their original order.
    """
    threshold = check_threshold(threshold)
    candidates = as_transactions(candidates)
    transactions = as_transactions(transactions)
    counts = get_counter(counter)(candidates, transactions, **kwargs)
    logger.debug("Counted %d candidates over %d transactions", len(candidates), len(transactions))
    return [
        candidate for candidate, count in zip(candidates, counts) if count >= threshold
    ]
