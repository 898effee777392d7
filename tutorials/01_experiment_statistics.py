"""
Experiment Statistics Tutorial

Goals:
- Implement the small Trial interface an Experiment needs
- Print the statistics report for three trials
- Persist the experiment and read it back
"""

import io
import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from neatio.experiments.experiment import Experiment


@dataclass
class Organism:
    fitness: float
    species_age: int
    complexity: int


@dataclass
class Trial:
    """Keeps only per-generation summaries, enough for the report."""

    duration: timedelta = timedelta(0)
    generations: list = field(default_factory=list)  # (best fitness, species count)
    finished: datetime = datetime(2024, 1, 1)
    threshold: float = 15.5

    def avg_epoch_duration(self):
        return self.duration / max(1, len(self.generations))

    def last_executed(self):
        return self.finished

    def best_organism(self, only_solvers):
        if not self.generations or (only_solvers and not self.solved()):
            return None
        best = max(f for f, _ in self.generations)
        return Organism(best, species_age=len(self.generations), complexity=5 + len(self.generations))

    def solved(self):
        return any(f >= self.threshold for f, _ in self.generations)

    def diversity(self):
        return [s for _, s in self.generations]

    def winner(self):
        return (5, 9, 150 * len(self.generations), self.generations[-1][1])

    def average(self):
        fitness = [f for f, _ in self.generations]
        return fitness, [1.0] * len(fitness), [7.0] * len(fitness)

    def encode(self, encoder):
        encoder.encode(self.duration)
        encoder.encode(self.finished)
        encoder.encode(list(self.generations))

    def decode(self, decoder):
        self.duration = decoder.decode(timedelta)
        self.finished = decoder.decode(datetime)
        self.generations = decoder.decode(list)


def main():
    rng = random.Random(3)
    trials = []
    for i in range(3):
        gens = [(rng.uniform(5, 16), rng.randint(2, 8)) for _ in range(rng.randint(5, 12))]
        trials.append(Trial(duration=timedelta(seconds=2 + i), generations=gens,
                            finished=datetime(2024, 1, 1 + i)))

    experiment = Experiment(experiment_id=1, name="xor", trials=trials)
    experiment.print_statistics()

    buf = io.BytesIO()
    experiment.write(buf)
    buf.seek(0)
    restored = Experiment.read(buf, Trial)
    print('restored:', restored.experiment_id, restored.name, len(restored.trials), 'trials')


if __name__ == '__main__':
    main()
