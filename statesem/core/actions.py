# statesem/core/actions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass

from statesem.interfaces.types import EventID, SubmachineID


@dataclass(frozen=True)
class Action:
    """
    A post-transition action: sends an event to one sub-machine of the assembly.
    Applied to the semantics a transition produced, in the order listed on the
    transition.
    """

    submachine_id: SubmachineID
    event_id: EventID
