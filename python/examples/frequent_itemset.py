"""
Example of Brute-Force A-Priori Algorithm.

A supermarket tracks sales by stock-keeping unit (SKU): each item, such as "butter" or "bread",
is identified by a numerical SKU, and each transaction is a set of SKUs bought together.

    $ python frequent_itemset.py                  # the hardcoded transactions below
    $ python frequent_itemset.py buckets.txt 70   # one comma-separated bucket per line
"""
from skumine.freq_itemset import mine
import logging
import time
import sys


TRANSACTIONS = [
    {1, 2, 3, 4},
    {1, 2, 4},
    {1, 2},
    {2, 3, 4},
    {2, 3},
    {3, 4},
    {2, 4},
]


class DataPrepare(object):
    def __init__(self, path=None):
        self.input_path = path
        self.iterable = self.read_data() if path is not None else TRANSACTIONS

    def read_data(self):
        with open(self.input_path, "r") as file:
            iterable = [
                {int(item) for item in line.strip().split(",")}
                for line in file if line.strip()
            ]
        return iterable

    def __iter__(self):
        yield from self.iterable


class Configuration(object):
    def __init__(self, input_path=None, support=3):
        self.input_path = input_path
        self.support = support

    def __call__(self, func):
        def run(*args, **kwargs):
            start = time.time()
            func(self.input_path, self.support, *args, **kwargs)
            end = time.time()
            print("Duration:", (end - start))
        return run


def model(input_path, support, **kwargs):
    data = DataPrepare(input_path)
    associations = mine(data, support, **kwargs)
    associations.sort(key=len)
    for itemset in associations:
        print("(%s)" % ",".join([str(i) for i in sorted(itemset)]))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    conf = Configuration(
        input_path=sys.argv[1] if len(sys.argv) > 1 else None,
        support=int(sys.argv[2]) if len(sys.argv) > 2 else 3
    )
    conf(model)()
