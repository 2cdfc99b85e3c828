"""
Argument checks shared by the miners.
"""
from numbers import Integral, Number

__all__ = [
    "check_threshold", "check_set_size"
]


def check_threshold(threshold) -> int:
    """
    The support threshold is a count of transactions, so it should be a non-negative integer.
    """
    if isinstance(threshold, bool) or not isinstance(threshold, Integral):
        raise TypeError("The support threshold should be an integer, got {0}.".format(type(threshold)))
    if threshold < 0:
        raise ValueError("The support threshold should be non-negative, got {0}.".format(threshold))
    return int(threshold)


def check_set_size(max_set_size, minimum: int=2):
    if isinstance(max_set_size, bool) or not isinstance(max_set_size, Number):
        raise TypeError("The maximum set size should be a number, got {0}.".format(type(max_set_size)))
    if max_set_size < minimum:
        raise ValueError("The maximum set size should be at least {0}, got {1}.".format(minimum, max_set_size))
    return max_set_size
