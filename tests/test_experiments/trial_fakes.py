"""Minimal Trial/Organism collaborators for experiment tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta


@dataclass
class FakeOrganism:
    fitness: float
    species_age: int = 1
    complexity: int = 3


@dataclass
class FakeTrial:
    trial_id: int = 0
    duration: timedelta = timedelta(0)
    generations: list = field(default_factory=list)
    executed: datetime = datetime(2020, 1, 1)
    best: FakeOrganism | None = None
    is_solved: bool = False
    species_counts: list = field(default_factory=list)
    winner_stats: tuple = (0, 0, 0, 0)
    epoch: timedelta = timedelta(0)
    averages: tuple = ([], [], [])

    def avg_epoch_duration(self):
        return self.epoch

    def last_executed(self):
        return self.executed

    def best_organism(self, only_solvers):
        if only_solvers and not self.is_solved:
            return None
        return self.best

    def solved(self):
        return self.is_solved

    def diversity(self):
        return list(self.species_counts)

    def winner(self):
        return self.winner_stats

    def average(self):
        return self.averages

    def encode(self, encoder):
        encoder.encode(self.trial_id)
        encoder.encode(self.duration)
        encoder.encode(len(self.generations))
        for gen in self.generations:
            encoder.encode(gen)
        encoder.encode(self.is_solved)

    def decode(self, decoder):
        self.trial_id = decoder.decode(int)
        self.duration = decoder.decode(timedelta)
        count = decoder.decode(int)
        self.generations = [decoder.decode() for _ in range(count)]
        self.is_solved = decoder.decode(bool)
