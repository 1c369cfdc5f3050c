"""Exact integer functions that size the feature space of a product line."""
import typing as tp


def product(from_value: int, to_value: int) -> int:
    """
    Product of all numbers in the range [from_value, to_value].

    Returns 0 if either bound is 0.
    """
    if from_value == 0 or to_value == 0:
        return 0
    result = 1
    while from_value <= to_value:
        result *= to_value
        to_value -= 1
    return result


def factorial(n: int) -> int:
    """Returns the factorial of n."""
    return 1 if n == 0 else product(1, n)


def combinations(n: int, k: int) -> int:
    """Number of combinations of n items with sample size k."""
    return product(n + 1 - k, n) // factorial(k)


def sum_of_combinations(n: int, k: int) -> int:
    """Sum of the combinations of n items for all sample sizes in [k, n]."""
    result = 0
    while k <= n:
        result += combinations(n, k)
        k += 1
    return result


def power(base: int, exponent: int) -> int:
    """Returns base to the power of exponent."""
    result = 1
    while exponent > 0:
        result *= base
        exponent -= 1
    return result


def power2(exponent: int) -> int:
    return power(2, exponent)


def ceil_div(dividend: int, divisor: int) -> int:
    """Integer division rounded to the next upper integer."""
    return dividend // divisor + bool(dividend % divisor)


def negate(ids: tp.Collection[int], n: int) -> tp.List[int]:
    """
    Complement of ids with respect to the range [1, n].

    Example:
        >>> negate([1], 3)
        [2, 3]
    """
    return [i for i in range(1, n + 1) if i not in ids]


def unsigned_to_ids(value: int) -> tp.List[int]:
    """
    Ids of all set bits of value, where bit i corresponds to id i + 1.

    Example:
        >>> unsigned_to_ids(0b101)
        [1, 3]
    """
    result = []
    bit = 0
    while value >> bit:
        if value & (1 << bit):
            result.append(bit + 1)
        bit += 1
    return result
