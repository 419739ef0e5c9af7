"""
Value Iteration Library.

This library computes the optimal expected utility of states in Markov
Decision Processes by recursively expanding the Bellman optimality equation.
"""

__version__ = '0.1.0'

# Import submodules to make them available through the package
from value_iteration import distribution
from value_iteration import mdp
from value_iteration import utils

from value_iteration.mdp import (
    Action,
    State,
    VisitedPath,
    MarkovDecisionProcess,
    EmptyCandidateSetError
)

__all__ = [
    'distribution',
    'mdp',
    'utils',
    'Action',
    'State',
    'VisitedPath',
    'MarkovDecisionProcess',
    'EmptyCandidateSetError'
]
