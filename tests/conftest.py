# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property of the fixed-point computation")
    config.addinivalue_line("markers", "scenario: mark test as an end-to-end machine scenario")


@pytest.fixture
def door():
    """A door sub-machine: opened by an event, finishes opening on its own."""
    from statesem.plugins import Submachine, SubmachineTransition

    return Submachine(
        submachine_id="door",
        states=("closed", "opening", "open"),
        initial="closed",
        transitions=(
            SubmachineTransition("t_open", "closed", "opening", event="open"),
            SubmachineTransition("t_done", "opening", "open"),
            SubmachineTransition("t_close", "open", "closed", event="close"),
        ),
    )


@pytest.fixture
def lamp():
    """A lamp sub-machine toggled by a single event."""
    from statesem.plugins import Submachine, SubmachineTransition

    return Submachine(
        submachine_id="lamp",
        states=("off", "on"),
        initial="off",
        transitions=(
            SubmachineTransition("t_on", "off", "on", event="toggle"),
            SubmachineTransition("t_off", "on", "off", event="toggle"),
        ),
    )


@pytest.fixture
def assembly(door, lamp):
    """The door and lamp composed in one assembly."""
    from statesem.plugins import Assembly

    return Assembly("house", [door, lamp])


@pytest.fixture
def machine_factory(assembly):
    """Returns a factory creating an empty reactive machine with its seed state."""
    from statesem.core.states import SeedState
    from statesem.runtime.machine import ReactiveMachine

    def _factory(name="machine", asm=None):
        m = ReactiveMachine(name, asm or assembly)
        m.add_state(SeedState("initial"))
        return m

    return _factory


@pytest.fixture
def solver():
    """A solver with default settings."""
    from statesem.runtime.solver import SemanticsSolver

    return SemanticsSolver()


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from statesem.core.errors import SemanticsError, StateNotFoundError, ValidationError

    return (SemanticsError, StateNotFoundError, ValidationError)
