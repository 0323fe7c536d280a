# statesem/runtime/config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass

DEFAULT_MAX_ITERATIONS = 1000


@dataclass(frozen=True)
class SolverConfig:
    """
    Settings for the semantics solver.

    :param max_iterations: Passes to run before giving up on convergence.
    :param trace_contributions: Log every transition contribution at DEBUG level.
    """

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    trace_contributions: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_iterations, bool) or not isinstance(self.max_iterations, int):
            raise ValueError(f"max_iterations must be an int, got {self.max_iterations!r}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
