"""
Finite discrete probability distributions.

These distributions keep their outcomes as an ordered table of
(outcome, probability) pairs and iterate over that table, so they can be
returned directly from MarkovDecisionProcess.transition.
"""

from typing import TypeVar, Generic, Iterable, Iterator, Tuple

# Type variable for distribution outcomes
T = TypeVar('T')

class FiniteDistribution(Generic[T]):
    """
    A distribution over a finite, ordered table of outcomes.
    
    The table is kept exactly as given: order is preserved and the same
    outcome may appear more than once. Probabilities are not normalized or
    validated; use total_probability to inspect them.
    """
    
    def __init__(self, pairs: Iterable[Tuple[T, float]]):
        """
        Initialize the distribution from (outcome, probability) pairs.
        
        Args:
            pairs: Outcomes and their probabilities, in evaluation order
        """
        self._table = tuple((outcome, probability) for outcome, probability in pairs)
    
    def table(self) -> Tuple[Tuple[T, float], ...]:
        """
        Return the (outcome, probability) table.
        
        Returns:
            Tuple of pairs in insertion order
        """
        return self._table
    
    def probability(self, outcome: T) -> float:
        """
        Return the total probability assigned to an outcome.
        
        Args:
            outcome: Outcome to look up
            
        Returns:
            Sum of the probabilities of every entry equal to outcome
        """
        return sum(p for x, p in self._table if x == outcome)
    
    def total_probability(self) -> float:
        """
        Return the sum of all probabilities in the table.
        
        Returns:
            Total probability mass (1.0 for a well-formed distribution)
        """
        return sum(p for _, p in self._table)
    
    def __iter__(self) -> Iterator[Tuple[T, float]]:
        return iter(self._table)
    
    def __len__(self) -> int:
        return len(self._table)
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, FiniteDistribution):
            return NotImplemented
        return self._table == other._table
    
    def __hash__(self) -> int:
        return hash(self._table)


class Categorical(FiniteDistribution[T]):
    """
    General finite distribution over an explicit table of outcomes.
    """
    
    def __init__(self, pairs: Iterable[Tuple[T, float]]):
        """
        Initialize a categorical distribution.
        
        Args:
            pairs: Outcomes and their probabilities, in evaluation order
            
        Raises:
            ValueError: If no outcomes are given
        """
        super().__init__(pairs)
        
        if not self._table:
            raise ValueError("Outcome table cannot be empty")
    
    def __repr__(self) -> str:
        """
        Return a string representation of the distribution.
        
        Returns:
            String representation
        """
        if len(self._table) <= 5:
            table_str = ', '.join(f"{x}: {p}" for x, p in self._table)
        else:
            table_str = f"{', '.join(f'{x}: {p}' for x, p in self._table[:3])}, ..., {self._table[-1][0]}: {self._table[-1][1]}"
        return f"Categorical({{{table_str}}})"


class Constant(FiniteDistribution[T]):
    """
    A distribution with a single outcome that has probability 1.
    
    Useful for deterministic transitions, such as a terminal state that
    only leads back to itself.
    """
    
    def __init__(self, value: T):
        """
        Initialize a constant distribution.
        
        Args:
            value: The only outcome
        """
        super().__init__([(value, 1.0)])
        self.value = value
    
    def __repr__(self) -> str:
        return f"Constant({self.value})"
