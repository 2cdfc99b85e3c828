import unittest


class TestItemHelpers(unittest.TestCase):
    def test_universe_and_counts(self):
        from skumine.utils import as_transactions, item_universe, count_items
        transactions = as_transactions([[1, 2, 2], (2, 3), set()])
        self.assertEqual(transactions, [frozenset({1, 2}), frozenset({2, 3}), frozenset()])
        self.assertEqual(item_universe(transactions), frozenset({1, 2, 3}))
        self.assertEqual(count_items([[1, 2, 2], [2, 3]]), {1: 1, 2: 2, 3: 1})
        self.assertEqual(item_universe([]), frozenset())

    def test_check_threshold(self):
        from skumine.utils import check_threshold
        import numpy as np
        self.assertEqual(check_threshold(0), 0)
        self.assertEqual(check_threshold(np.int64(3)), 3)
        self.assertRaises(ValueError, check_threshold, -2)
        self.assertRaises(TypeError, check_threshold, "3")
        self.assertRaises(TypeError, check_threshold, False)

    def test_check_set_size(self):
        from skumine.utils import check_set_size
        self.assertEqual(check_set_size(float("inf")), float("inf"))
        self.assertEqual(check_set_size(4), 4)
        self.assertRaises(ValueError, check_set_size, 1)


if __name__ == '__main__':
    unittest.main()
