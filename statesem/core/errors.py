# statesem/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class SemanticsError(Exception):
    """
    Base exception class for errors raised while computing state semantics.
    """


class ValidationError(SemanticsError):
    """
    Raised when a machine model violates a precondition of the solver, such as
    a missing or duplicated seed state.
    """


class StateNotFoundError(ValidationError):
    """
    Raised when a transition references a state that does not belong to the machine.
    """
