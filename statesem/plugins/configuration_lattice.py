# statesem/plugins/configuration_lattice.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Reference semantic lattice: explicit sets of assembly configurations.

A configuration records the local state of every sub-machine of an assembly, as
a tuple of ``(submachine_id, local_state)`` pairs sorted by sub-machine id. A
semantics value is a finite set of configurations, so AND is intersection, OR
is union and bottom is the empty set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, List, Optional, Tuple

from statesem.interfaces.types import AssemblyID, EventID, SubmachineID, TransitionID

if TYPE_CHECKING:
    from statesem.plugins.assembly import Assembly

Configuration = Tuple[Tuple[SubmachineID, str], ...]


@dataclass(frozen=True)
class SubmachineTransition:
    """A transition of a sub-machine. Transitions without an event are autonomous."""

    transition_id: TransitionID
    source: str
    target: str
    event: Optional[EventID] = None

    @property
    def autonomous(self) -> bool:
        return self.event is None


@dataclass(frozen=True)
class Submachine:
    """A flat finite automaton taking part in an assembly."""

    submachine_id: SubmachineID
    states: Tuple[str, ...]
    initial: str
    transitions: Tuple[SubmachineTransition, ...] = ()
    _by_id: Dict[TransitionID, SubmachineTransition] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", tuple(self.states))
        object.__setattr__(self, "transitions", tuple(self.transitions))
        if self.initial not in self.states:
            raise ValueError(f"Initial state '{self.initial}' is not a state of sub-machine '{self.submachine_id}'")
        by_id = {}
        for t in self.transitions:
            if t.source not in self.states or t.target not in self.states:
                raise ValueError(
                    f"Transition '{t.transition_id}' of sub-machine '{self.submachine_id}' "
                    f"connects unknown states '{t.source}' -> '{t.target}'"
                )
            if t.transition_id in by_id:
                raise ValueError(f"Duplicate transition id '{t.transition_id}' in sub-machine '{self.submachine_id}'")
            by_id[t.transition_id] = t
        object.__setattr__(self, "_by_id", by_id)

    def transition(self, transition_id: TransitionID) -> SubmachineTransition:
        """Look up a transition by id."""
        try:
            return self._by_id[transition_id]
        except KeyError:
            raise KeyError(f"Sub-machine '{self.submachine_id}' has no transition '{transition_id}'") from None

    @property
    def events(self) -> FrozenSet[EventID]:
        return frozenset(t.event for t in self.transitions if t.event is not None)

    def transitions_on(self, event_id: EventID, local_state: str) -> List[SubmachineTransition]:
        """Transitions fired by an event from the given local state."""
        return [t for t in self.transitions if t.event == event_id and t.source == local_state]

    def autonomous_from(self, local_state: str) -> List[SubmachineTransition]:
        """Autonomous transitions enabled in the given local state."""
        return [t for t in self.transitions if t.autonomous and t.source == local_state]


def _replace(configuration: Configuration, submachine_id: SubmachineID, local_state: str) -> Configuration:
    return tuple((sid, local_state if sid == submachine_id else st) for sid, st in configuration)


def _local_state(configuration: Configuration, submachine_id: SubmachineID) -> str:
    for sid, st in configuration:
        if sid == submachine_id:
            return st
    raise KeyError(f"Configuration has no sub-machine '{submachine_id}'")


class ConfigurationSet:
    """
    A set of assembly configurations.

    Values are immutable; every operation returns a new set. Two values are
    equal when they belong to the same assembly and hold the same configurations.
    """

    __slots__ = ("_assembly_id", "_configurations")

    def __init__(self, assembly_id: AssemblyID, configurations: Iterable[Configuration] = ()) -> None:
        self._assembly_id = assembly_id
        self._configurations: FrozenSet[Configuration] = frozenset(configurations)

    @classmethod
    def bottom(cls, assembly_id: AssemblyID) -> "ConfigurationSet":
        """The empty set of configurations."""
        return cls(assembly_id)

    @property
    def assembly_id(self) -> AssemblyID:
        return self._assembly_id

    @property
    def configurations(self) -> FrozenSet[Configuration]:
        return self._configurations

    def is_bottom(self) -> bool:
        return not self._configurations

    def _check_compatible(self, other: "ConfigurationSet") -> None:
        if self._assembly_id != other._assembly_id:
            raise ValueError(
                f"Cannot combine semantics of assembly '{self._assembly_id}' with assembly '{other._assembly_id}'"
            )

    def __and__(self, other: "ConfigurationSet") -> "ConfigurationSet":
        if not isinstance(other, ConfigurationSet):
            return NotImplemented
        self._check_compatible(other)
        return ConfigurationSet(self._assembly_id, self._configurations & other._configurations)

    def __or__(self, other: "ConfigurationSet") -> "ConfigurationSet":
        if not isinstance(other, ConfigurationSet):
            return NotImplemented
        self._check_compatible(other)
        return ConfigurationSet(self._assembly_id, self._configurations | other._configurations)

    def __le__(self, other: "ConfigurationSet") -> bool:
        """Lattice order: self is below other when self | other == other."""
        if not isinstance(other, ConfigurationSet):
            return NotImplemented
        self._check_compatible(other)
        return self._configurations <= other._configurations

    def transform_by_transition(
        self, submachine_id: SubmachineID, transition_id: TransitionID, assembly: "Assembly"
    ) -> "ConfigurationSet":
        """
        Fire one sub-machine transition in every configuration where it is
        enabled. Configurations in which it is not enabled are dropped.
        """
        transition = assembly.submachine(submachine_id).transition(transition_id)
        moved = [
            _replace(c, submachine_id, transition.target)
            for c in self._configurations
            if _local_state(c, submachine_id) == transition.source
        ]
        return ConfigurationSet(self._assembly_id, moved)

    def transform_by_event(
        self, submachine_id: SubmachineID, event_id: EventID, assembly: "Assembly"
    ) -> "ConfigurationSet":
        """
        Deliver an event to one sub-machine. Configurations where the event
        enables transitions move to each of their targets; the others are kept
        unchanged.
        """
        submachine = assembly.submachine(submachine_id)
        if event_id not in submachine.events:
            raise KeyError(f"Sub-machine '{submachine_id}' does not handle event '{event_id}'")
        result = set()
        for c in self._configurations:
            enabled = submachine.transitions_on(event_id, _local_state(c, submachine_id))
            if not enabled:
                result.add(c)
            for t in enabled:
                result.add(_replace(c, submachine_id, t.target))
        return ConfigurationSet(self._assembly_id, result)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigurationSet):
            return NotImplemented
        return self._assembly_id == other._assembly_id and self._configurations == other._configurations

    def __hash__(self) -> int:
        return hash((self._assembly_id, self._configurations))

    def __len__(self) -> int:
        return len(self._configurations)

    def __iter__(self):
        return iter(sorted(self._configurations))

    def __contains__(self, configuration: object) -> bool:
        return configuration in self._configurations

    def __repr__(self) -> str:
        if not self._configurations:
            return "{}"
        parts = [", ".join(f"{sid}={st}" for sid, st in c) for c in sorted(self._configurations)]
        return "{" + "; ".join(f"({p})" for p in parts) + "}"
