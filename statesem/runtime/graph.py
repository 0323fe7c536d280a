"""Graph-based machine structure management."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core.errors import StateNotFoundError, ValidationError
from ..core.states import State
from ..core.transitions import Transition


@dataclass
class _GraphNode:
    """Internal node representation for the transition graph."""

    state: State
    incoming: List[Transition] = field(default_factory=list)
    outgoing: List[Transition] = field(default_factory=list)

    def __hash__(self):
        return hash(self.state)

    def __eq__(self, other):
        if not isinstance(other, _GraphNode):
            return NotImplemented
        return self.state == other.state


class TransitionGraph:
    """
    Manages the states of a machine and the transitions between them.
    Provides efficient access to the incoming transitions of each state,
    which is what the solver aggregates over.
    """

    def __init__(self) -> None:
        # Dicts keep insertion order so iteration is deterministic.
        self._nodes: Dict[State, _GraphNode] = {}
        self._transitions: List[Transition] = []

    def add_state(self, state: State) -> None:
        """
        Add a state. Adding the same state twice is a no-op; adding a second
        seed state is an error.
        """
        if state in self._nodes:
            return
        if state.is_seed:
            existing = self.get_seed_state()
            if existing is not None:
                raise ValidationError(
                    f"Cannot add seed state '{state.name}': '{existing.name}' is already the seed state"
                )
        self._nodes[state] = _GraphNode(state=state)

    def add_transition(self, transition: Transition) -> None:
        """Add a transition to the graph."""
        if transition.source not in self._nodes:
            raise StateNotFoundError(f"Source state {transition.source.name} not in graph")
        if transition.target not in self._nodes:
            raise StateNotFoundError(f"Target state {transition.target.name} not in graph")

        self._transitions.append(transition)
        self._nodes[transition.source].outgoing.append(transition)
        self._nodes[transition.target].incoming.append(transition)

    def get_incoming_transitions(self, state: State) -> List[Transition]:
        """Get all transitions whose target is the given state."""
        node = self._nodes.get(state)
        if not node:
            return []
        return list(node.incoming)

    def get_outgoing_transitions(self, state: State) -> List[Transition]:
        """Get all transitions whose source is the given state."""
        node = self._nodes.get(state)
        if not node:
            return []
        return list(node.outgoing)

    def get_seed_state(self) -> Optional[State]:
        """Get the seed state, if one has been added."""
        for st in self._nodes:
            if st.is_seed:
                return st
        return None

    def get_all_states(self) -> List[State]:
        """Get all states in insertion order."""
        return list(self._nodes.keys())

    def get_all_transitions(self) -> List[Transition]:
        """Get all transitions in insertion order."""
        return list(self._transitions)

    def validate(self) -> List[str]:
        """Validate the graph structure."""
        errors = []
        if self.get_seed_state() is None:
            errors.append("Graph has no seed state")

        # States that no path from the seed reaches can only ever hold bottom.
        seed = self.get_seed_state()
        if seed is not None:
            reachable = {seed}
            frontier = [seed]
            while frontier:
                current = frontier.pop()
                for t in self._nodes[current].outgoing:
                    if t.target not in reachable:
                        reachable.add(t.target)
                        frontier.append(t.target)
            unreachable = [s.name for s in self._nodes if s not in reachable]
            if unreachable:
                errors.append(f"States {unreachable} are not reachable from seed state '{seed.name}'")

        return errors
