"""
Action contract for Markov Decision Processes.
"""

from abc import ABC
from collections.abc import Hashable

class Action(ABC):
    """
    Marker for values that can be used as decision actions.
    
    Actions are compared and stored in sets and dicts, so any immutable,
    hashable type qualifies. Enums are the usual choice:
    
        class Move(Enum):
            UP = 0
            DOWN = 1
        
        isinstance(Move.UP, Action)  # True
    
    Subclassing Action explicitly is also allowed.
    """
    
    @classmethod
    def __subclasshook__(cls, C):
        if cls is Action:
            return issubclass(C, Hashable)
        return NotImplemented
