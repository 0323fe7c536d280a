# statesem/runtime/solver.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Fixed-point computation of state semantics.

Every state of a reactive machine is assigned the join of the contributions of
its incoming transitions. Triggerable transitions (and every transition leaving
the seed state) contribute their source semantics AND their guard. Reactive
transitions contribute the source semantics transformed by each sub-machine
transition whose exit zone matches their guard. Both kinds then apply their
actions in order. The seed state keeps the assembly's initial semantics.

Passes are repeated until no state changes or the iteration cap is reached.
Each pass reads only the previous pass's values: exit zones are refreshed for
all states first, then all new values are computed into a buffer that replaces
the working map once the pass is complete.
"""

import logging
from dataclasses import dataclass
from typing import AbstractSet, Dict, FrozenSet, List, Optional, Sequence, Set, Tuple

from statesem.core.propositions import is_always_true
from statesem.core.states import State
from statesem.core.transitions import Transition
from statesem.core.validations import Validator
from statesem.core.zones import ExitZone
from statesem.interfaces.abc import AbstractAssembly, AbstractMachine, AbstractSemantics, AbstractSolverHook
from statesem.runtime.config import DEFAULT_MAX_ITERATIONS, SolverConfig

logger = logging.getLogger(__name__)

SemanticsMap = Dict[State, AbstractSemantics]
ZoneMap = Dict[State, FrozenSet[ExitZone]]


@dataclass
class SolveResult:
    """Outcome of a solve."""

    semantics: SemanticsMap
    zones: ZoneMap
    iterations: int
    converged: bool


@dataclass
class _SolveContext:
    """Per-solve data that stays fixed across iterations."""

    machine: AbstractMachine
    assembly: AbstractAssembly
    seed: State
    states: List[State]
    incoming: Dict[State, List[Transition]]
    bottom: AbstractSemantics


class SemanticsSolver:
    """
    Computes the semantics of every state of a reactive machine.

    The solver holds no per-solve state, so one instance can be reused for any
    number of machines.
    """

    def __init__(
        self,
        config: Optional[SolverConfig] = None,
        hooks: Optional[List[AbstractSolverHook]] = None,
        validator: Optional[Validator] = None,
    ) -> None:
        """
        :param config: Solver settings; defaults to SolverConfig().
        :param hooks: Optional list of AbstractSolverHook objects; partial
            hooks implementing only some of the callbacks are accepted.
        :param validator: Optional validator for the machine's preconditions.
        """
        self._config = config or SolverConfig()
        self._hooks = hooks or []
        self._validator = validator or Validator()

    @property
    def config(self) -> SolverConfig:
        return self._config

    def solve(self, machine: AbstractMachine) -> SemanticsMap:
        """
        Compute the semantics map of the machine.

        :param machine: The machine to analyse.
        :return: A mapping with one entry per state of the machine.
        :raises ValidationError: If the machine violates a precondition.
        """
        return self.run(machine).semantics

    def run(self, machine: AbstractMachine) -> SolveResult:
        """
        Compute the semantics map of the machine and report how the loop ended.

        Reaching the iteration cap is not an error: a warning is logged and the
        current, possibly non-fixed, map is returned with ``converged`` False.
        """
        ctx = self._prepare(machine)
        max_iterations = self._config.max_iterations
        logger.info("Starting fixed-point semantics computation for machine '%s'.", machine.name)

        semantics: SemanticsMap = {s: ctx.bottom for s in ctx.states}
        semantics[ctx.seed] = ctx.assembly.initial_semantics()
        zones: ZoneMap = {s: frozenset() for s in ctx.states}

        iterations = 0
        converged = False
        while iterations < max_iterations:
            iterations += 1
            semantics, zones, changed = self._iterate(ctx, semantics)
            logger.debug("Iteration %d: %d state(s) changed.", iterations, len(changed))
            self._notify("on_iteration", iterations, changed)
            if not changed:
                converged = True
                break

        if converged:
            logger.info(
                "Completed semantics computation in %d iterations for machine '%s'.", iterations, machine.name
            )
            self._notify("on_converged", iterations)
        else:
            logger.warning(
                "Semantics computation for machine '%s' did not converge within %d iterations. "
                "Results may not be a fixed point.",
                machine.name,
                max_iterations,
            )
            self._notify("on_iteration_cap", iterations)

        return SolveResult(semantics=semantics, zones=zones, iterations=iterations, converged=converged)

    def step(
        self, machine: AbstractMachine, semantics: SemanticsMap
    ) -> Tuple[SemanticsMap, ZoneMap, Set[State]]:
        """
        Run a single pass starting from the given map.

        :param machine: The machine the map belongs to.
        :param semantics: A map with one entry per state; it is not modified.
        :return: The new map, the exit zones computed during the pass, and the
            states whose value changed.
        """
        ctx = self._prepare(machine)
        missing = [s.name for s in ctx.states if s not in semantics]
        if missing:
            raise KeyError(f"No semantics given for states {missing}")
        return self._iterate(ctx, dict(semantics))

    def refresh_zones(
        self, machine: AbstractMachine, state: State, value: AbstractSemantics
    ) -> FrozenSet[ExitZone]:
        """
        Compute the exit zones of a state from its current value.

        The result replaces the state's previous zones; nothing is carried over.
        """
        zones = frozenset(machine.compute_reactive_zones(value))
        logger.debug("Refreshed %d exit zone(s) for state '%s'.", len(zones), state.name)
        return zones

    def contribution(
        self,
        transition: Transition,
        source_value: AbstractSemantics,
        zones: AbstractSet[ExitZone],
        assembly: AbstractAssembly,
    ) -> AbstractSemantics:
        """
        Compute what one transition contributes to its target state.

        :param transition: The transition.
        :param source_value: Current semantics of the transition's source.
        :param zones: Current exit zones of the transition's source.
        :param assembly: The assembly used to interpret guards and transforms.
        """
        if transition.is_triggerable():
            result = source_value & transition.guard.to_semantics(assembly)
        else:
            result = assembly.semantics_type.bottom(assembly.assembly_id)
            for zone in _ordered(zones):
                if is_always_true(transition.guard) or zone.target == transition.guard:
                    fragment = source_value.transform_by_transition(zone.submachine_id, zone.transition_id, assembly)
                    result = result | fragment

        for action in transition.actions:
            result = result.transform_by_event(action.submachine_id, action.event_id, assembly)
        return result

    def _prepare(self, machine: AbstractMachine) -> _SolveContext:
        seed = self._validator.validate_machine(machine)
        states = list(machine.get_states())
        incoming: Dict[State, List[Transition]] = {s: [] for s in states}
        for t in machine.get_transitions():
            incoming[t.target].append(t)
        assembly = machine.assembly
        return _SolveContext(
            machine=machine,
            assembly=assembly,
            seed=seed,
            states=states,
            incoming=incoming,
            bottom=assembly.semantics_type.bottom(assembly.assembly_id),
        )

    def _iterate(self, ctx: _SolveContext, semantics: SemanticsMap) -> Tuple[SemanticsMap, ZoneMap, Set[State]]:
        # Zones for every state must be ready before any contribution is computed.
        zones: ZoneMap = {ctx.seed: frozenset()}
        for state in ctx.states:
            if state is not ctx.seed:
                zones[state] = self.refresh_zones(ctx.machine, state, semantics[state])

        updated: SemanticsMap = {}
        changed: Set[State] = set()
        for state in ctx.states:
            if state is ctx.seed:
                updated[state] = semantics[state]
                continue
            new_value = self._compute_state(ctx, state, semantics, zones)
            if new_value != semantics[state]:
                changed.add(state)
                updated[state] = new_value
            else:
                updated[state] = semantics[state]
        return updated, zones, changed

    def _compute_state(
        self, ctx: _SolveContext, target: State, semantics: SemanticsMap, zones: ZoneMap
    ) -> AbstractSemantics:
        aggregate = ctx.bottom
        for t in ctx.incoming[target]:
            contrib = self.contribution(t, semantics[t.source], zones[t.source], ctx.assembly)
            if self._config.trace_contributions:
                logger.debug(
                    "Transition from '%s': %s contributes %s to state '%s'",
                    t.source.name,
                    semantics[t.source],
                    contrib,
                    target.name,
                )
            aggregate = aggregate | contrib
        return aggregate

    def _notify(self, method: str, *args) -> None:
        for hook in self._hooks:
            if hasattr(hook, method):
                getattr(hook, method)(*args)


def _ordered(zones: AbstractSet[ExitZone]) -> Sequence[ExitZone]:
    # Sets of zones have no stable order; sort so the OR is applied the same way on every run.
    return sorted(zones, key=lambda z: (str(z.submachine_id), str(z.transition_id), str(z.target)))


def compute_all_state_semantics(
    machine: AbstractMachine, max_iterations: int = DEFAULT_MAX_ITERATIONS
) -> SemanticsMap:
    """
    Compute the semantics of every state of a machine with default settings.

    :param machine: The machine to analyse.
    :param max_iterations: Iteration cap.
    """
    return SemanticsSolver(SolverConfig(max_iterations=max_iterations)).solve(machine)
