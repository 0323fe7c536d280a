"""
Core package providing the machine model types.

Architecture:
- States, transitions, guard propositions, actions and exit zones
- Precondition validation of machine models
- Error taxonomy shared by all packages
"""

# Import order matters to avoid circular dependencies
from .errors import SemanticsError, StateNotFoundError, ValidationError
from .states import SeedState, State
from .propositions import Predicate, Proposition, TrueProposition
from .actions import Action
from .zones import ExitZone
from .transitions import Transition
from .validations import Validator

__all__ = [
    # Errors
    "SemanticsError",
    "StateNotFoundError",
    "ValidationError",
    # Model
    "State",
    "SeedState",
    "Predicate",
    "Proposition",
    "TrueProposition",
    "Action",
    "ExitZone",
    "Transition",
    "Validator",
]
