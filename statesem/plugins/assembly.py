# statesem/plugins/assembly.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from itertools import product
from typing import Dict, FrozenSet, Iterable, Optional, Sequence, Type

from statesem.core.propositions import Predicate
from statesem.core.zones import ExitZone
from statesem.interfaces.types import AssemblyID, PredicateValue, SubmachineID
from statesem.plugins.configuration_lattice import Configuration, ConfigurationSet, Submachine


class Assembly:
    """
    A parallel composition of sub-machines, interpreted with the
    ConfigurationSet lattice.

    Predicates are ``(submachine_id, local_state)`` pairs that hold in every
    configuration where that sub-machine is in that local state. Reactive zones
    are the autonomous sub-machine transitions enabled in a value, each guarded
    by the predicate its target state makes true.
    """

    def __init__(self, assembly_id: AssemblyID, submachines: Iterable[Submachine]) -> None:
        """
        :param assembly_id: Identifier carried by every semantics value of this assembly.
        :param submachines: The sub-machines; ids must be unique.
        """
        self._assembly_id = assembly_id
        self._submachines: Dict[SubmachineID, Submachine] = {}
        for sm in sorted(submachines, key=lambda s: s.submachine_id):
            if sm.submachine_id in self._submachines:
                raise ValueError(f"Duplicate sub-machine id '{sm.submachine_id}' in assembly '{assembly_id}'")
            self._submachines[sm.submachine_id] = sm
        self._top: Optional[ConfigurationSet] = None

    @property
    def assembly_id(self) -> AssemblyID:
        return self._assembly_id

    @property
    def semantics_type(self) -> Type[ConfigurationSet]:
        return ConfigurationSet

    def submachine(self, submachine_id: SubmachineID) -> Submachine:
        """Look up a sub-machine by id."""
        try:
            return self._submachines[submachine_id]
        except KeyError:
            raise KeyError(f"Assembly '{self._assembly_id}' has no sub-machine '{submachine_id}'") from None

    def initial_semantics(self) -> ConfigurationSet:
        """The single configuration with every sub-machine in its initial state."""
        initial: Configuration = tuple((sid, sm.initial) for sid, sm in self._submachines.items())
        return ConfigurationSet(self._assembly_id, [initial])

    def top_semantics(self) -> ConfigurationSet:
        """Every configuration of the assembly. Built once, then reused."""
        if self._top is None:
            self._top = self._product({sid: sm.states for sid, sm in self._submachines.items()})
        return self._top

    def predicate_semantics(self, value: PredicateValue) -> ConfigurationSet:
        """
        Interpret a ``(submachine_id, local_state)`` predicate.

        :raises ValueError: If the value is not such a pair.
        :raises KeyError: If the sub-machine or local state is unknown.
        """
        if not (isinstance(value, tuple) and len(value) == 2):
            raise ValueError(f"Predicate value must be a (submachine_id, local_state) pair, got {value!r}")
        submachine_id, local_state = value
        if local_state not in self.submachine(submachine_id).states:
            raise KeyError(f"Sub-machine '{submachine_id}' has no state '{local_state}'")
        choices = {sid: sm.states for sid, sm in self._submachines.items()}
        choices[submachine_id] = (local_state,)
        return self._product(choices)

    def _product(self, choices: Dict[SubmachineID, Sequence[str]]) -> ConfigurationSet:
        ids = list(choices)
        combos = product(*(choices[sid] for sid in ids))
        return ConfigurationSet(self._assembly_id, (tuple(zip(ids, combo)) for combo in combos))

    def compute_reactive_zones(self, value: ConfigurationSet) -> FrozenSet[ExitZone]:
        """Exit zones of the autonomous transitions enabled somewhere in the value."""
        zones = set()
        for configuration in value.configurations:
            for submachine_id, local_state in configuration:
                for t in self.submachine(submachine_id).autonomous_from(local_state):
                    zones.add(ExitZone(Predicate((submachine_id, t.target)), submachine_id, t.transition_id))
        return frozenset(zones)

    def __repr__(self) -> str:
        return f"Assembly({self._assembly_id!r}, submachines={list(self._submachines)})"
