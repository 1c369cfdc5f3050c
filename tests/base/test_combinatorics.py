"""Test module for the combinatorics utilities."""
import unittest

from featureloc.base.combinatorics import (
    ceil_div,
    combinations,
    factorial,
    negate,
    power,
    power2,
    product,
    sum_of_combinations,
    unsigned_to_ids,
)


class TestProduct(unittest.TestCase):
    """Test products, factorials and combinations."""

    def test_product_of_range(self) -> None:
        self.assertEqual(product(3, 5), 60)
        self.assertEqual(product(4, 4), 4)

    def test_product_with_zero_bound(self) -> None:
        """A zero bound always yields zero."""
        self.assertEqual(product(0, 5), 0)
        self.assertEqual(product(1, 0), 0)

    def test_product_of_empty_range(self) -> None:
        self.assertEqual(product(5, 3), 1)

    def test_factorial(self) -> None:
        self.assertEqual(factorial(0), 1)
        self.assertEqual(factorial(1), 1)
        self.assertEqual(factorial(5), 120)

    def test_combinations(self) -> None:
        self.assertEqual(combinations(5, 2), 10)
        self.assertEqual(combinations(4, 4), 1)
        self.assertEqual(combinations(4, 1), 4)
        self.assertEqual(combinations(20, 10), 184756)

    def test_sum_of_combinations(self) -> None:
        """Sums of combinations size the dependent feature categories."""
        self.assertEqual(sum_of_combinations(1, 2), 0)
        self.assertEqual(sum_of_combinations(2, 2), 1)
        self.assertEqual(sum_of_combinations(3, 2), 4)
        self.assertEqual(sum_of_combinations(4, 2), 11)
        self.assertEqual(sum_of_combinations(4, 1), 15)


class TestPower(unittest.TestCase):
    """Test power functions."""

    def test_power(self) -> None:
        self.assertEqual(power(3, 4), 81)
        self.assertEqual(power(5, 0), 1)

    def test_power2(self) -> None:
        self.assertEqual(power2(0), 1)
        self.assertEqual(power2(10), 1024)

    def test_no_overflow_for_large_exponents(self) -> None:
        self.assertEqual(power2(power2(7)), 2**128)


class TestHelpers(unittest.TestCase):
    """Test helpers for ids and divisions."""

    def test_ceil_div(self) -> None:
        self.assertEqual(ceil_div(5, 2), 3)
        self.assertEqual(ceil_div(4, 2), 2)
        self.assertEqual(ceil_div(1, 4), 1)

    def test_negate(self) -> None:
        self.assertEqual(negate([1], 3), [2, 3])
        self.assertEqual(negate([], 2), [1, 2])
        self.assertEqual(negate([1, 2], 2), [])

    def test_unsigned_to_ids(self) -> None:
        self.assertEqual(unsigned_to_ids(0), [])
        self.assertEqual(unsigned_to_ids(0b101), [1, 3])
        self.assertEqual(unsigned_to_ids(0b1111), [1, 2, 3, 4])
