"""
Runtime package for the machine model and the fixed-point solver.

Architecture:
- Transition graph with incoming-transition index
- Reactive machine delegating zone computation to its assembly
- Solver driving the fixed-point iteration
"""

from .config import SolverConfig
from .graph import TransitionGraph
from .machine import ReactiveMachine
from .solver import SemanticsSolver, SolveResult, compute_all_state_semantics

__all__ = [
    "SolverConfig",
    "TransitionGraph",
    "ReactiveMachine",
    "SemanticsSolver",
    "SolveResult",
    "compute_all_state_semantics",
]
