# statesem/interfaces/abc.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING, AbstractSet, Iterable, List, Protocol, Type, TypeVar, runtime_checkable

from statesem.interfaces.types import AssemblyID, EventID, PredicateValue, SubmachineID, TransitionID

if TYPE_CHECKING:
    from statesem.core.states import State
    from statesem.core.transitions import Transition
    from statesem.core.zones import ExitZone

S = TypeVar("S", bound="AbstractSemantics")


@runtime_checkable
class AbstractSemantics(Protocol):
    """
    Protocol for semantic lattice values.

    Runtime Invariants:
    - Values are immutable; operations return new values
    - ``|`` is commutative, associative and idempotent with ``bottom`` as identity
    - Equality is by value, not identity
    """

    @classmethod
    def bottom(cls: Type[S], assembly_id: AssemblyID) -> S: ...

    def __and__(self: S, other: S) -> S: ...

    def __or__(self: S, other: S) -> S: ...

    def __eq__(self, other: object) -> bool: ...

    def transform_by_transition(
        self: S, submachine_id: SubmachineID, transition_id: TransitionID, assembly: "AbstractAssembly"
    ) -> S: ...

    def transform_by_event(self: S, submachine_id: SubmachineID, event_id: EventID, assembly: "AbstractAssembly") -> S: ...


@runtime_checkable
class AbstractAssembly(Protocol):
    """
    Protocol for the assembly that composes the sub-machines of a reactive machine.

    Runtime Invariants:
    - ``initial_semantics`` is deterministic
    - Reactive zones depend only on the given value
    """

    @property
    def assembly_id(self) -> AssemblyID: ...

    @property
    def semantics_type(self) -> Type[AbstractSemantics]: ...

    def initial_semantics(self) -> AbstractSemantics: ...

    def top_semantics(self) -> AbstractSemantics: ...

    def predicate_semantics(self, value: PredicateValue) -> AbstractSemantics: ...

    def compute_reactive_zones(self, value: AbstractSemantics) -> Iterable["ExitZone"]: ...


@runtime_checkable
class AbstractMachine(Protocol):
    """
    Protocol for the machine model consumed by the solver.

    Runtime Invariants:
    - States and transitions do not change during a solve
    - Exactly one seed state
    """

    @property
    def name(self) -> str: ...

    @property
    def assembly(self) -> AbstractAssembly: ...

    def get_states(self) -> List["State"]: ...

    def get_transitions(self) -> List["Transition"]: ...

    def compute_reactive_zones(self, value: AbstractSemantics) -> Iterable["ExitZone"]: ...


@runtime_checkable
class AbstractSolverHook(Protocol):
    """
    Protocol for solver hooks. Every method is optional; the solver only calls
    the ones a hook defines.

    Runtime Invariants:
    - Hooks don't modify the working map
    - Hook failures propagate to the caller
    """

    def on_iteration(self, iteration: int, changed_states: AbstractSet["State"]) -> None: ...

    def on_converged(self, iterations: int) -> None: ...

    def on_iteration_cap(self, iterations: int) -> None: ...
