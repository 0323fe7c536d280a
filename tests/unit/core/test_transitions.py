# tests/unit/core/test_transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from statesem.core.actions import Action
from statesem.core.propositions import Predicate, TrueProposition
from statesem.core.states import SeedState, State
from statesem.core.transitions import Transition
from statesem.core.zones import ExitZone


def test_transition_defaults():
    a, b = State("a"), State("b")
    t = Transition(a, b)

    assert t.source is a
    assert t.target is b
    assert t.guard == TrueProposition()
    assert t.actions == ()
    assert t.triggerable is True
    assert t.is_triggerable()


def test_transition_keeps_action_order():
    actions = [Action("door", "open"), Action("lamp", "toggle"), Action("door", "close")]
    t = Transition(State("a"), State("b"), actions=actions)

    assert t.actions == tuple(actions)
    actions.append(Action("lamp", "toggle"))
    assert len(t.actions) == 3


def test_reactive_transition():
    t = Transition(State("a"), State("b"), guard=Predicate("p"), triggerable=False)

    assert t.triggerable is False
    assert not t.is_triggerable()


def test_transition_from_seed_is_always_triggerable():
    t = Transition(SeedState(), State("b"), triggerable=False)

    assert t.triggerable is False
    assert t.is_triggerable()


def test_transition_attributes_are_read_only():
    t = Transition(State("a"), State("b"))
    with pytest.raises(AttributeError):
        t.guard = Predicate("p")


def test_transition_repr():
    t = Transition(State("a"), State("b"), guard=Predicate("p"), triggerable=False)
    assert repr(t) == "Transition('a' -> 'b', reactive, guard=p)"


def test_states_compare_by_identity():
    a1, a2 = State("a"), State("a")

    assert a1 != a2
    assert a1 == a1
    assert len({a1, a2}) == 2


def test_seed_state_flag():
    assert SeedState().is_seed
    assert SeedState().name == "initial"
    assert not State("x").is_seed
    assert repr(SeedState("s0")) == "SeedState('s0')"


def test_action_and_zone_are_values():
    assert Action("door", "open") == Action("door", "open")
    z1 = ExitZone(Predicate(("door", "open")), "door", "t_done")
    z2 = ExitZone(Predicate(("door", "open")), "door", "t_done")
    assert z1 == z2
    assert len({z1, z2}) == 1
