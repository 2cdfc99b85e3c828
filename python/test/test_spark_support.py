import os
import shutil
import unittest

import numpy as np

HAS_JAVA = shutil.which("java") is not None or bool(os.environ.get("JAVA_HOME"))


@unittest.skipUnless(HAS_JAVA, "Spark needs a Java runtime")
class TestSparkSupportCounter(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        from pyspark import SparkContext
        cls.sc = SparkContext.getOrCreate()

    @classmethod
    def tearDownClass(cls):
        cls.sc.stop()

    def test_random_data(self):
        from skumine.freq_itemset.support import count_supports, count_supports_spark
        random_state = np.random.RandomState(0)
        transactions = [
            frozenset(random_state.randint(0, 10, random_state.randint(1, 6)).tolist())
            for _ in range(300)
        ]
        candidates = [
            frozenset(random_state.randint(0, 10, random_state.randint(2, 4)).tolist())
            for _ in range(50)
        ]
        self.assertEqual(
            count_supports_spark(candidates, transactions, spark_context=self.sc, num_partitions=4),
            count_supports(candidates, transactions)
        )

    def test_mine_with_spark(self):
        from skumine.freq_itemset import mine
        transactions = [{1, 2, 3, 4}, {1, 2, 4}, {1, 2}, {2, 3, 4}, {2, 3}, {3, 4}, {2, 4}]
        self.assertEqual(
            mine(transactions, 3, counter="spark", spark_context=self.sc),
            mine(transactions, 3)
        )


class TestSparkArguments(unittest.TestCase):
    def test_requires_spark_context(self):
        from skumine.freq_itemset.support import count_supports_spark
        with self.assertRaises(ValueError):
            count_supports_spark([frozenset({1, 2})], [frozenset({1, 2})])


if __name__ == '__main__':
    unittest.main()
