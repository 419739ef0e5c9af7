"""
Markov Decision Process classes.

This module provides the abstract MarkovDecisionProcess a domain model
implements, and the recursive Bellman evaluator that computes the utility
of a state from the model's reward and transition functions.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Iterable, Tuple, MutableSequence, Union

from value_iteration.mdp.path import VisitedPath
from value_iteration.utils.aggregate import set_max, set_sum
from value_iteration.logging import log_cycle_closure, log_state_utility, log_empty_candidates

# Type variables for state and action
S = TypeVar('S')
A = TypeVar('A')

Path = Union[VisitedPath[S], MutableSequence[S]]

class EmptyCandidateSetError(ValueError):
    """
    Raised when a Bellman backup has nothing to aggregate over.
    
    This happens when a non-terminal state offers no actions, or when an
    action has no outcomes. Both are modeling errors in the caller's MDP;
    there is no sensible default utility to fall back on.
    """


class MarkovDecisionProcess(ABC, Generic[S, A]):
    """
    Base class for Markov Decision Processes.
    
    A Markov Decision Process (MDP) is defined by:
    - A set of states S, each knowing whether it is terminal and which
      actions it allows
    - A set of actions A
    - A transition function P(s'|s,a) that gives the probability of transitioning
      to state s' when taking action a in state s
    - A reward function R(s,a,s') that gives the reward for transitioning from
      state s to state s' by taking action a
    
    Subclasses supply reward and transition; utility is provided.
    """
    
    @abstractmethod
    def reward(self, state: S, action: A, next_state: S) -> float:
        """
        Return the immediate reward for a transition.
        
        Args:
            state: The current state
            action: The action taken
            next_state: The state reached
            
        Returns:
            Reward for the transition
        """
        pass
    
    @abstractmethod
    def transition(self, state: S, action: A) -> Iterable[Tuple[S, float]]:
        """
        Return the outcome distribution for taking an action in a state.
        
        Outcomes are (next_state, probability) pairs and are evaluated in the
        order given. Probabilities are expected to sum to 1 but this is not
        checked.
        
        Args:
            state: The current state
            action: The action to take
            
        Returns:
            Iterable of (next_state, probability) pairs
        """
        pass
    
    def utility(self, state: S, gamma: float, visited: Path) -> float:
        """
        Compute the expected utility of a state under the optimal policy.
        
        The Bellman optimality equation is expanded recursively without
        memoization. Recursion stops at terminal states and at next states
        already on the visited path; such a cycle closure counts only the
        immediate reward.
        
        The visited path must be created by the caller (empty, or seeded
        with the start state) and is mutated in place. Every explored
        outcome appends the current state. A cycle closure removes the
        first occurrence of the current state, not of the revisited one.
        
        Args:
            state: The state to evaluate
            gamma: Discount factor applied to future utility
            visited: States explored so far by this top-level call
            
        Returns:
            Maximum over actions of the expected reward plus discounted utility
            
        Raises:
            EmptyCandidateSetError: If a reachable non-terminal state has no
                actions, or an action has no outcomes
        """
        actions = state.possible_actions()
        
        def action_value(action: A) -> float:
            """Expected value of taking action in state."""
            
            def outcome_value(outcome: Tuple[S, float]) -> float:
                """Probability-weighted value of one outcome."""
                next_state, probability = outcome
                reward = self.reward(state, action, next_state)
                
                visited.append(state)
                
                if next_state.is_final():
                    return probability * reward
                elif next_state in visited:
                    # Cycle closure: no future utility
                    visited.remove(state)
                    log_cycle_closure(state, next_state, len(visited))
                    return probability * reward
                else:
                    next_utility = gamma * self.utility(next_state, gamma, visited)
                    return probability * (reward + next_utility)
            
            value = set_sum(self.transition(state, action), outcome_value)
            
            if value is None:
                log_empty_candidates("outcomes", state, action)
                raise EmptyCandidateSetError(
                    f"Action {action!r} has no outcomes from state {state!r}"
                )
            
            return value
        
        best = set_max(actions, action_value)
        
        if best is None:
            log_empty_candidates("actions", state)
            raise EmptyCandidateSetError(f"State {state!r} has no possible actions")
        
        log_state_utility(state, best, len(actions))
        
        return best
