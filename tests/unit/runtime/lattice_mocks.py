from typing import Callable, Dict, FrozenSet, Iterable, List, Optional

from statesem.core.states import State
from statesem.core.transitions import Transition
from statesem.core.zones import ExitZone


class TokenSet:
    """Finite-set lattice over string tokens. Transforms tag every token."""

    def __init__(self, tokens: Iterable[str] = (), assembly_id: str = "test"):
        self.tokens = frozenset(tokens)
        self.assembly_id = assembly_id

    @classmethod
    def bottom(cls, assembly_id):
        return cls((), assembly_id)

    def __and__(self, other):
        return TokenSet(self.tokens & other.tokens, self.assembly_id)

    def __or__(self, other):
        return TokenSet(self.tokens | other.tokens, self.assembly_id)

    def transform_by_transition(self, submachine_id, transition_id, assembly):
        return TokenSet({f"{t}/{submachine_id}.{transition_id}" for t in self.tokens}, self.assembly_id)

    def transform_by_event(self, submachine_id, event_id, assembly):
        return TokenSet({f"{t}!{submachine_id}.{event_id}" for t in self.tokens}, self.assembly_id)

    def __eq__(self, other):
        if not isinstance(other, TokenSet):
            return NotImplemented
        return self.tokens == other.tokens

    def __hash__(self):
        return hash(self.tokens)

    def __repr__(self):
        return f"TokenSet({sorted(self.tokens)})"


class MockAssembly:
    """Assembly for TokenSet values with a fixed universe and predicate table."""

    def __init__(
        self,
        initial: Iterable[str] = ("init",),
        universe: Iterable[str] = ("init", "a", "b", "c"),
        predicates: Optional[Dict[str, Iterable[str]]] = None,
        zones_fn: Optional[Callable[[TokenSet], Iterable[ExitZone]]] = None,
        assembly_id: str = "test",
    ):
        self.assembly_id = assembly_id
        self.semantics_type = TokenSet
        self._initial = frozenset(initial)
        self._universe = frozenset(universe)
        self._predicates = {k: frozenset(v) for k, v in (predicates or {}).items()}
        self._zones_fn = zones_fn
        self.initial_calls = 0

    def initial_semantics(self):
        self.initial_calls += 1
        return TokenSet(self._initial, self.assembly_id)

    def top_semantics(self):
        return TokenSet(self._universe, self.assembly_id)

    def predicate_semantics(self, value):
        return TokenSet(self._predicates[value], self.assembly_id)

    def compute_reactive_zones(self, value) -> FrozenSet[ExitZone]:
        if self._zones_fn is None:
            return frozenset()
        return frozenset(self._zones_fn(value))


class CountingSemantics:
    """Violates the semilattice laws: OR adds counts, so it is not idempotent."""

    def __init__(self, count: int = 0):
        self.count = count

    @classmethod
    def bottom(cls, assembly_id):
        return cls(0)

    def __and__(self, other):
        return self

    def __or__(self, other):
        return CountingSemantics(self.count + other.count)

    def transform_by_transition(self, submachine_id, transition_id, assembly):
        return self

    def transform_by_event(self, submachine_id, event_id, assembly):
        return self

    def __eq__(self, other):
        if not isinstance(other, CountingSemantics):
            return NotImplemented
        return self.count == other.count

    def __hash__(self):
        return hash(self.count)

    def __repr__(self):
        return f"CountingSemantics({self.count})"


class CountingAssembly:
    assembly_id = "counting"
    semantics_type = CountingSemantics

    def initial_semantics(self):
        return CountingSemantics(1)

    def top_semantics(self):
        return CountingSemantics(0)

    def predicate_semantics(self, value):
        return CountingSemantics(0)

    def compute_reactive_zones(self, value):
        return frozenset()


class StubMachine:
    """Machine model without any structural checks, for precondition tests."""

    def __init__(self, assembly, states: List[State], transitions: List[Transition], name: str = "stub"):
        self.name = name
        self.assembly = assembly
        self._states = list(states)
        self._transitions = list(transitions)
        self.zone_requests = []

    def get_states(self):
        return list(self._states)

    def get_transitions(self):
        return list(self._transitions)

    def compute_reactive_zones(self, value):
        self.zone_requests.append(value)
        return self.assembly.compute_reactive_zones(value)
