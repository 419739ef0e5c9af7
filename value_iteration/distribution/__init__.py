"""
Distribution module for the value_iteration library.

This module provides finite outcome tables that can be returned as
transition outcomes.
"""

from value_iteration.distribution.discrete import FiniteDistribution, Categorical, Constant

__all__ = [
    'FiniteDistribution',
    'Categorical',
    'Constant'
]
