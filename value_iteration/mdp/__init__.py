"""
Markov Decision Process (MDP) module for the value_iteration library.

This module provides the contracts a caller implements to describe a
decision problem (actions, states and the MDP itself), and the recursive
utility evaluator built on top of them.
"""

from value_iteration.mdp.action import Action
from value_iteration.mdp.state import State
from value_iteration.mdp.path import VisitedPath
from value_iteration.mdp.process import MarkovDecisionProcess, EmptyCandidateSetError

__all__ = [
    'Action',
    'State',
    'VisitedPath',
    'MarkovDecisionProcess',
    'EmptyCandidateSetError'
]
