# tests/unit/plugins/test_assembly.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from statesem.core.propositions import Predicate
from statesem.core.zones import ExitZone
from statesem.plugins.assembly import Assembly
from statesem.plugins.configuration_lattice import ConfigurationSet


def test_identity_and_semantics_type(assembly):
    assert assembly.assembly_id == "house"
    assert assembly.semantics_type is ConfigurationSet


def test_initial_semantics(assembly):
    initial = assembly.initial_semantics()

    assert list(initial) == [(("door", "closed"), ("lamp", "off"))]
    assert initial.assembly_id == "house"


def test_top_semantics_is_full_product(assembly):
    assert len(assembly.top_semantics()) == 3 * 2


def test_predicate_semantics(assembly):
    lit = assembly.predicate_semantics(("lamp", "on"))

    assert len(lit) == 3
    assert all(("lamp", "on") in c for c in lit)


def test_predicate_semantics_matches_filtered_top(assembly):
    top = assembly.top_semantics()

    for value in [("door", "opening"), ("lamp", "off")]:
        expected = {c for c in top if value in c}
        assert set(assembly.predicate_semantics(value)) == expected


def test_top_semantics_built_once(assembly):
    first = assembly.top_semantics()
    assembly.predicate_semantics(("door", "open"))

    assert assembly.top_semantics() is first


@pytest.mark.parametrize("value", ["lamp", ("lamp",), ("lamp", "on", "extra")])
def test_predicate_semantics_rejects_malformed_values(assembly, value):
    with pytest.raises(ValueError, match="pair"):
        assembly.predicate_semantics(value)


def test_predicate_semantics_unknown_state(assembly):
    with pytest.raises(KeyError, match="no state 'dim'"):
        assembly.predicate_semantics(("lamp", "dim"))


def test_reactive_zones(assembly):
    value = ConfigurationSet(
        "house",
        [(("door", "opening"), ("lamp", "off")), (("door", "closed"), ("lamp", "on"))],
    )

    assert assembly.compute_reactive_zones(value) == frozenset(
        {ExitZone(Predicate(("door", "open")), "door", "t_done")}
    )
    assert assembly.compute_reactive_zones(assembly.initial_semantics()) == frozenset()


def test_duplicate_submachines_rejected(door):
    with pytest.raises(ValueError, match="Duplicate sub-machine id 'door'"):
        Assembly("twice", [door, door])


def test_repr(assembly):
    assert repr(assembly) == "Assembly('house', submachines=['door', 'lamp'])"
