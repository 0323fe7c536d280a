# statesem/core/zones.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass

from statesem.core.propositions import Proposition
from statesem.interfaces.types import SubmachineID, TransitionID


@dataclass(frozen=True)
class ExitZone:
    """
    Links a guard proposition to the sub-machine transition that makes it true.

    Exit zones are recomputed by the machine model from a state's current
    semantics on every solver iteration, and are consumed by the reactive
    transitions leaving that state.
    """

    target: Proposition
    submachine_id: SubmachineID
    transition_id: TransitionID
