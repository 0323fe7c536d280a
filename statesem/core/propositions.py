# statesem/core/propositions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Guard propositions.

A guard is one of two cases: the distinguished always-true proposition, or a
predicate carrying an opaque value that only the assembly can interpret.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from statesem.interfaces.types import PredicateValue

if TYPE_CHECKING:
    from statesem.interfaces.abc import AbstractAssembly, AbstractSemantics


@dataclass(frozen=True)
class TrueProposition:
    """The guard that always holds."""

    def to_semantics(self, assembly: "AbstractAssembly") -> "AbstractSemantics":
        """Return the lattice top of the assembly."""
        return assembly.top_semantics()

    def __str__(self) -> str:
        return "true"


@dataclass(frozen=True)
class Predicate:
    """A guard over an assembly-defined predicate value."""

    value: PredicateValue

    def to_semantics(self, assembly: "AbstractAssembly") -> "AbstractSemantics":
        """Return the configurations in which the predicate holds."""
        return assembly.predicate_semantics(self.value)

    def __str__(self) -> str:
        return str(self.value)


Proposition = Union[TrueProposition, Predicate]


def is_always_true(proposition: Proposition) -> bool:
    """Return True if the proposition is the always-true guard."""
    return isinstance(proposition, TrueProposition)
