# statesem/runtime/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import FrozenSet, List, Optional

from statesem.core.errors import ValidationError
from statesem.core.states import State
from statesem.core.transitions import Transition
from statesem.core.validations import Validator
from statesem.core.zones import ExitZone
from statesem.interfaces.abc import AbstractAssembly, AbstractSemantics
from statesem.runtime.graph import TransitionGraph


class ReactiveMachine:
    """
    A reactive state machine over an assembly of sub-machines. Uses
    TransitionGraph as the sole source of truth for states and transitions,
    and delegates reactive-zone computation to the assembly.
    """

    def __init__(self, name: str, assembly: AbstractAssembly, validator: Optional[Validator] = None) -> None:
        """
        :param name: Name used in diagnostics.
        :param assembly: The assembly that defines the machine's semantics.
        :param validator: Optional validator for structure checks.
        """
        self._name = name
        self._assembly = assembly
        self._graph = TransitionGraph()
        self._validator = validator or Validator()

    @property
    def name(self) -> str:
        return self._name

    @property
    def assembly(self) -> AbstractAssembly:
        return self._assembly

    @property
    def seed_state(self) -> Optional[State]:
        """The machine's seed state, or None if none was added yet."""
        return self._graph.get_seed_state()

    def add_state(self, state: State) -> State:
        """
        Add a state to the underlying graph and return it.
        """
        self._graph.add_state(state)
        return state

    def add_transition(self, transition: Transition) -> Transition:
        """
        Add a transition to the graph and return it.
        The graph enforces that source/target states exist.
        """
        self._validator.validate_transition(transition)
        self._graph.add_transition(transition)
        return transition

    def get_states(self) -> List[State]:
        """Get all states from the graph."""
        return self._graph.get_all_states()

    def get_transitions(self) -> List[Transition]:
        """Get all transitions from the graph."""
        return self._graph.get_all_transitions()

    def get_incoming_transitions(self, state: State) -> List[Transition]:
        return self._graph.get_incoming_transitions(state)

    def compute_reactive_zones(self, value: AbstractSemantics) -> FrozenSet[ExitZone]:
        """Return the exit zones the assembly derives from a semantics value."""
        return frozenset(self._assembly.compute_reactive_zones(value))

    def validate(self) -> List[str]:
        """
        Return a list of structural problems. An empty list means the machine
        satisfies the solver's preconditions.
        """
        try:
            self._validator.validate_machine(self)
        except ValidationError as e:
            return [str(e)]
        return self._graph.validate()

    def __repr__(self) -> str:
        return f"ReactiveMachine({self._name!r}, states={len(self._graph.get_all_states())})"
