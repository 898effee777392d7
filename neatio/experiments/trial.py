"""Capabilities an experiment needs from its trials and organisms.

Trials own their internal structure and wire format; an experiment only
calls the members listed here.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol, Sequence, runtime_checkable

from neatio.experiments.codec import ValueDecoder, ValueEncoder


@runtime_checkable
class Organism(Protocol):
    fitness: float

    @property
    def species_age(self) -> int: ...

    @property
    def complexity(self) -> int: ...


@runtime_checkable
class Trial(Protocol):
    """One full evolutionary run."""

    duration: timedelta
    generations: Sequence

    def avg_epoch_duration(self) -> timedelta: ...

    def last_executed(self) -> datetime: ...

    def best_organism(self, only_solvers: bool) -> Organism | None: ...

    def solved(self) -> bool: ...

    def diversity(self) -> Sequence[float]: ...

    def winner(self) -> tuple[int, int, int, int]:
        """(nodes, genes, evaluations, species diversity) of the winner generation."""
        ...

    def average(self) -> tuple[Sequence[float], Sequence[float], Sequence[float]]:
        """Per-generation (fitness, age, complexity) averages."""
        ...

    def encode(self, encoder: ValueEncoder) -> None: ...

    def decode(self, decoder: ValueDecoder) -> None: ...


__all__ = ["Organism", "Trial"]
