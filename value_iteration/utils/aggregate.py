"""
Aggregation utilities for Bellman backups.

This module provides the two reducers the utility evaluator is built from:
a best-value selector and a sum accumulator. Both walk the whole input
once, in order, and return None when the input is empty.
"""

from typing import TypeVar, Callable, Iterable, Optional

# Type variables for elements and their values
E = TypeVar('E')
V = TypeVar('V')

def set_max(candidates: Iterable[E], value: Callable[[E], V]) -> Optional[V]:
    """
    Return the highest value that any candidate maps to.
    
    Only the value is returned, not the candidate that produced it. When two
    candidates map to the same maximum, the first one seen is kept (strict >).
    
    Args:
        candidates: Elements to evaluate
        value: Function giving the value of a single element
        
    Returns:
        The maximum value, or None if there were no candidates
    """
    best = None
    
    for candidate in candidates:
        v = value(candidate)
        
        if best is None or v > best:
            best = v
    
    return best


def set_sum(elements: Iterable[E], value: Callable[[E], V]) -> Optional[V]:
    """
    Add up the values of every element.
    
    The sum starts from the first mapped value rather than zero, so any type
    supporting + can be accumulated.
    
    Args:
        elements: Elements to evaluate
        value: Function giving the value of a single element
        
    Returns:
        The sum of all values, or None if there were no elements
    """
    total = None
    
    for element in elements:
        v = value(element)
        
        if total is None:
            total = v
        else:
            total = total + v
    
    return total
