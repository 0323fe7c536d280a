# statesem/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING

from statesem.core.actions import Action
from statesem.core.errors import StateNotFoundError, ValidationError
from statesem.core.propositions import Predicate, TrueProposition
from statesem.core.states import State
from statesem.core.transitions import Transition

if TYPE_CHECKING:
    from statesem.interfaces.abc import AbstractMachine


class Validator:
    """
    Checks that a machine model satisfies the solver's preconditions before a
    solve starts, so a malformed model fails fast instead of producing an
    incomplete semantics map.
    """

    def __init__(self) -> None:
        """
        Initialize the validator with the default rules.
        """
        self._rules_engine = _ValidationRulesEngine()

    def validate_machine(self, machine: "AbstractMachine") -> State:
        """
        Check the machine's states and transitions for consistency.

        :param machine: The machine to validate.
        :return: The machine's unique seed state.
        :raises ValidationError: If validation fails.
        """
        return self._rules_engine.validate_machine(machine)

    def validate_transition(self, transition: "Transition") -> None:
        """
        Check that a given transition is well-formed.

        :param transition: The transition to validate.
        :raises ValidationError: If validation fails.
        """
        self._rules_engine.validate_transition(transition)


class _ValidationRulesEngine:
    """
    Internal engine applying the validation rules to machines and transitions.
    """

    def __init__(self) -> None:
        self._default_rules = _DefaultValidationRules

    def validate_machine(self, machine: "AbstractMachine") -> State:
        return self._default_rules.validate_machine(machine)

    def validate_transition(self, transition: "Transition") -> None:
        self._default_rules.validate_transition(transition)


class _DefaultValidationRules:
    """
    Built-in rules:
    - Exactly one seed state.
    - Every transition is well-formed and connects states of the machine.
    """

    @staticmethod
    def validate_machine(machine: "AbstractMachine") -> State:
        states = list(machine.get_states())
        seeds = [s for s in states if s.is_seed]
        if not seeds:
            raise ValidationError(f"Machine '{machine.name}' has no seed state.")
        if len(seeds) > 1:
            raise ValidationError(
                f"Machine '{machine.name}' has {len(seeds)} seed states {[s.name for s in seeds]}; exactly one is required."
            )

        known = set(states)
        for t in machine.get_transitions():
            _DefaultValidationRules.validate_transition(t)
            if t.source not in known:
                raise StateNotFoundError(f"State {t.source.name} is referenced in transition but not in machine.")
            if t.target not in known:
                raise StateNotFoundError(f"State {t.target.name} is referenced in transition but not in machine.")
        return seeds[0]

    @staticmethod
    def validate_transition(transition: "Transition") -> None:
        if transition.source is None or transition.target is None:
            raise ValidationError("Transition must have a valid source and target state.")
        if not isinstance(transition.guard, (TrueProposition, Predicate)):
            raise ValidationError("Transition guard must be a TrueProposition or a Predicate.")
        for a in transition.actions:
            if not isinstance(a, Action):
                raise ValidationError("Transition actions must be Action instances.")
