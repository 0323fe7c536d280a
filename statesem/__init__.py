"""statesem: fixed-point state semantics for reactive state machines

This package computes, for every state of a reactive state machine, a symbolic
value describing the configurations of its sub-machine assembly that can be
reached in that state.

Responsibilities:
    - Machine model: states, a seed pseudostate, triggerable and reactive transitions
    - Guard propositions and post-transition actions
    - Fixed-point iteration with convergence detection and an iteration cap
    - Reference configuration-set lattice and assembly

Interactions:
    - Client code supplies a lattice and an assembly through the protocols in
      statesem.interfaces.abc
    - Logging system for diagnostics

Cross-cutting Concerns:
    Error Handling:
        - Malformed machines fail fast with ValidationError
        - Non-convergence is reported, not raised
        - Lattice errors propagate unchanged

    Logging:
        - Standard library logging, one logger per module
        - Per-transition tracing opt-in through SolverConfig
"""

from statesem.core import (
    Action,
    ExitZone,
    Predicate,
    Proposition,
    SeedState,
    SemanticsError,
    State,
    StateNotFoundError,
    Transition,
    TrueProposition,
    ValidationError,
    Validator,
)
from statesem.runtime import ReactiveMachine, SemanticsSolver, SolveResult, SolverConfig, compute_all_state_semantics

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ExitZone",
    "Predicate",
    "Proposition",
    "ReactiveMachine",
    "SeedState",
    "SemanticsError",
    "SemanticsSolver",
    "SolveResult",
    "SolverConfig",
    "State",
    "StateNotFoundError",
    "Transition",
    "TrueProposition",
    "ValidationError",
    "Validator",
    "compute_all_state_semantics",
]
