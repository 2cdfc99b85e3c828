from .items import as_transactions, item_universe, count_items
from .validation import check_threshold, check_set_size

__all__ = [
    "as_transactions", "item_universe", "count_items",
    "check_threshold", "check_set_size"
]
