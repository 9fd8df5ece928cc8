"""Search settings and heuristic selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tilesolver.errors import InvalidArgumentError


class Heuristic(StrEnum):
    manhattan = "manhattan"
    hamming = "hamming"


@dataclass(frozen=True)
class SolverSettings:
    """Knobs for a single :class:`~tilesolver.engine.solver.Solver` run.

    ``max_expansions`` and ``timeout_sec`` are optional budgets; ``None``
    means unbounded.  ``skip_grandparent`` drops the child that would undo
    the parent's move, and ``detect_duplicates`` keeps a closed set so a
    board is expanded at most once.
    """

    heuristic: Heuristic = Heuristic.manhattan
    max_expansions: int | None = None
    timeout_sec: float | None = None
    skip_grandparent: bool = True
    detect_duplicates: bool = True

    def validate(self) -> SolverSettings:
        if self.max_expansions is not None and self.max_expansions < 0:
            raise InvalidArgumentError(
                f"max_expansions must be >= 0, got {self.max_expansions}."
            )
        if self.timeout_sec is not None and self.timeout_sec < 0:
            raise InvalidArgumentError(
                f"timeout_sec must be >= 0, got {self.timeout_sec}."
            )
        return self
