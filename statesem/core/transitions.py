# statesem/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from statesem.core.actions import Action
from statesem.core.propositions import Proposition, TrueProposition
from statesem.core.states import State


class Transition:
    """
    Defines a path from one state to another. A triggerable transition is fired
    by an external trigger and filters its source semantics through its guard;
    a reactive transition fires when an internal sub-machine transition makes
    its guard true. Either kind may carry actions that are applied afterwards.
    """

    def __init__(
        self,
        source: "State",
        target: "State",
        guard: Optional[Proposition] = None,
        actions: Optional[Iterable[Action]] = None,
        triggerable: bool = True,
    ) -> None:
        """
        Initialize a transition with a source and target state, an optional
        guard and ordered actions.

        :param source: The origin State of this transition.
        :param target: The destination State of this transition.
        :param guard: Guard proposition; defaults to the always-true guard.
        :param actions: Actions applied, in order, to the transition's contribution.
        :param triggerable: False for reactive (autonomous) transitions.
        """
        self._source = source
        self._target = target
        self._guard = guard if guard is not None else TrueProposition()
        self._actions = tuple(actions) if actions else ()
        self._triggerable = triggerable

    @property
    def source(self) -> "State":
        """
        The source state of the transition.
        """
        return self._source

    @property
    def target(self) -> "State":
        """
        The target state of the transition.
        """
        return self._target

    @property
    def guard(self) -> Proposition:
        """The guard proposition of this transition."""
        return self._guard

    @property
    def actions(self) -> Tuple[Action, ...]:
        """The actions applied after this transition fires."""
        return self._actions

    @property
    def triggerable(self) -> bool:
        """Whether the transition is fired by an external trigger."""
        return self._triggerable

    def is_triggerable(self) -> bool:
        """
        Return True if the transition contributes through its guard. Transitions
        leaving the seed state always do, whatever their own flag says.
        """
        return self._triggerable or (self._source is not None and self._source.is_seed)

    def __repr__(self) -> str:
        kind = "triggerable" if self._triggerable else "reactive"
        source = self._source.name if self._source is not None else None
        target = self._target.name if self._target is not None else None
        return f"Transition({source!r} -> {target!r}, {kind}, guard={self._guard})"
