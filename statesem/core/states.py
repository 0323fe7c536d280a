# statesem/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from statesem.core.base import StateBase


class State(StateBase):
    """
    Represents a state of a reactive machine. The solver attaches a semantics
    value and a set of reactive zones to each state, but keeps both in its own
    working maps rather than on the state object.
    """

    is_seed: bool = False

    def __init__(self, name: str) -> None:
        """
        Initialize a state with its name.

        :param name: Name identifying this state within its machine.
        """
        super().__init__(name=name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class SeedState(State):
    """
    The distinguished initial pseudostate of a machine. Its semantics is fixed
    to the assembly's initial semantics and is never recomputed from incoming
    transitions.
    """

    is_seed: bool = True

    def __init__(self, name: str = "initial") -> None:
        super().__init__(name=name)
