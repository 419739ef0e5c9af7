"""
Tests for the distribution module.
"""

import unittest
import numpy as np

from value_iteration.distribution import Categorical, Constant, FiniteDistribution


class TestDistribution(unittest.TestCase):
    """Test cases for the distribution module."""

    def test_categorical(self):
        """Test Categorical distribution."""
        c = Categorical([('a', 0.2), ('b', 0.3), ('c', 0.5)])

        self.assertEqual(len(c), 3)
        self.assertAlmostEqual(c.probability('c'), 0.5)
        self.assertAlmostEqual(c.total_probability(), 1.0)

    def test_categorical_keeps_order_and_duplicates(self):
        """Test that the outcome table is not merged or reordered."""
        pairs = [('b', 0.8), ('a', 0.1), ('b', 0.1)]
        c = Categorical(pairs)

        self.assertEqual(list(c), pairs)
        self.assertEqual(len(c), 3)
        self.assertAlmostEqual(c.probability('b'), 0.9)
        self.assertEqual(c.probability('z'), 0)

    def test_categorical_accepts_generators(self):
        c = Categorical((n, 0.5) for n in range(2))
        self.assertEqual(c.table(), ((0, 0.5), (1, 0.5)))

    def test_categorical_empty(self):
        """Test that an empty table is rejected."""
        with self.assertRaises(ValueError):
            Categorical([])

    def test_malformed_probabilities_are_not_rejected(self):
        """Probabilities are reported as given, not normalized."""
        c = Categorical([('a', 0.5), ('b', 0.4)])
        self.assertAlmostEqual(c.total_probability(), 0.9)
        self.assertFalse(np.isclose(c.total_probability(), 1.0))

    def test_constant(self):
        """Test Constant distribution."""
        c = Constant(42)

        self.assertEqual(c.value, 42)
        self.assertEqual(list(c), [(42, 1.0)])
        self.assertEqual(c.total_probability(), 1.0)
        self.assertIsInstance(c, FiniteDistribution)

    def test_equality(self):
        self.assertEqual(Constant('x'), Categorical([('x', 1.0)]))
        self.assertNotEqual(Categorical([('x', 0.5), ('y', 0.5)]),
                            Categorical([('y', 0.5), ('x', 0.5)]))
        self.assertEqual(len({Constant('x'), Categorical([('x', 1.0)])}), 1)


if __name__ == '__main__':
    unittest.main()
