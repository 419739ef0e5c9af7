"""
Visited path used by the utility evaluator to detect cycles.
"""

from typing import TypeVar, Generic, Iterable, Iterator, List, Optional

# Type variable for states
S = TypeVar('S')

class VisitedPath(Generic[S]):
    """
    Ordered record of the states explored by one top-level utility call.
    
    Create one per top-level call and pass it down by reference; the
    evaluator appends and removes states as it goes. Membership is tested
    by value equality.
    """
    
    def __init__(self, states: Optional[Iterable[S]] = None):
        """
        Initialize the path, optionally seeded with states.
        
        Args:
            states: States already on the path, oldest first
        """
        self._states: List[S] = list(states) if states is not None else []
    
    def append(self, state: S) -> None:
        self._states.append(state)
    
    def remove(self, state: S) -> None:
        """
        Remove the first occurrence of a state.
        
        Raises:
            ValueError: If the state is not on the path
        """
        self._states.remove(state)
    
    def clear(self) -> None:
        self._states.clear()
    
    def copy(self) -> 'VisitedPath[S]':
        return VisitedPath(self._states)
    
    def __contains__(self, state: object) -> bool:
        return state in self._states
    
    def __len__(self) -> int:
        return len(self._states)
    
    def __iter__(self) -> Iterator[S]:
        return iter(self._states)
    
    def __getitem__(self, index: int) -> S:
        return self._states[index]
    
    def __repr__(self) -> str:
        if len(self._states) <= 5:
            states_str = ', '.join(str(s) for s in self._states)
        else:
            states_str = f"{', '.join(str(s) for s in self._states[:3])}, ..., {self._states[-1]}"
        return f"VisitedPath([{states_str}])"
