"""
State contract for Markov Decision Processes.

This module provides the abstract base class a domain state type must
implement to be evaluated by a MarkovDecisionProcess.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Sequence

# Type variable for actions
A = TypeVar('A')

class State(ABC, Generic[A]):
    """
    Base class for states in a Markov Decision Process.
    
    States are compared by value: the cycle guard looks states up in the
    visited path with ==, so two states describing the same configuration
    must be equal and hash the same. Frozen dataclasses satisfy this
    without extra code:
    
        @dataclass(frozen=True)
        class Cell(State[Move]):
            n: int
    
    States should be immutable; the evaluator stores them in the visited
    path without copying.
    """
    
    @abstractmethod
    def is_final(self) -> bool:
        """
        Check whether this state is terminal.
        
        Returns:
            True if no further transitions are evaluated from this state
        """
        pass
    
    @abstractmethod
    def possible_actions(self) -> Sequence[A]:
        """
        Return the actions available from this state.
        
        The sequence must be non-empty for any non-terminal state the
        evaluator can reach.
        
        Returns:
            Ordered sequence of actions
        """
        pass
