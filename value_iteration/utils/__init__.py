"""
Utility functions for the value_iteration library.

This module provides the aggregation helpers used by the Bellman backup.
"""

from value_iteration.utils.aggregate import set_max, set_sum

__all__ = [
    'set_max',
    'set_sum'
]
