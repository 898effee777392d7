"""Experiment: a named, ordered set of trials analysed together.

Statistics never mutate the experiment or its trials. Averages over an empty
set follow one policy throughout: durations and generation counts fall back
to zero, per-trial vectors are empty, and ``avg_winner`` yields NaN fields
when no trial is solved. Each fallback logs a warning.

Persistence layout (see :mod:`neatio.experiments.codec`)::

    experiment_id, name, trial count, trial[0] ... trial[count - 1]

where every trial record is produced and consumed by the trial itself.
"""

from __future__ import annotations

import io
import logging
import math
import sys
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import IO, Any, Callable, Iterable, NamedTuple

import numpy as np

from neatio.config import resolve_config
from neatio.experiments.codec import ValueDecoder, ValueEncoder
from neatio.experiments.trial import Organism, Trial
from neatio.utils.validation import ExperimentDecodeError


class Champion(NamedTuple):
    """Best organism of an experiment and the index of the trial it came from."""

    organism: Organism
    trial_index: int


class WinnerStats(NamedTuple):
    nodes: float
    genes: float
    evals: float
    diversity: float


def _mean(values: Iterable[float]) -> float:
    arr = np.asarray(list(values), dtype=float)
    return float(arr.mean()) if arr.size else 0.0


@dataclass
class Experiment:
    """Collection of trials for one experiment.

    Attributes:
        experiment_id: Numeric id, also the ordering tie-break
        name: Human readable name
        trials: Trials in execution order
    """

    experiment_id: int = 0
    name: str = ""
    trials: list[Trial] = field(default_factory=list)

    def _warn_empty(self, what: str) -> None:
        logging.warning(f"Experiment {self.experiment_id}: {what} requested with no trials")

    # ------------------------------------------------------------------ timing

    def avg_trial_duration(self) -> timedelta:
        """Average wall time of a trial."""
        if not self.trials:
            self._warn_empty("average trial duration")
            return timedelta(0)
        total = sum((t.duration for t in self.trials), timedelta(0))
        return total / len(self.trials)

    def avg_epoch_duration(self) -> timedelta:
        """Mean over trials of each trial's average epoch (generation) duration."""
        if not self.trials:
            self._warn_empty("average epoch duration")
            return timedelta(0)
        total = sum((t.avg_epoch_duration() for t in self.trials), timedelta(0))
        return total / len(self.trials)

    def avg_generations_per_trial(self) -> int:
        """Generations evaluated per trial, integer-divided.

        Trials stop once a winner appears, so lower means faster convergence.
        """
        if not self.trials:
            self._warn_empty("average generations per trial")
            return 0
        return sum(len(t.generations) for t in self.trials) // len(self.trials)

    def last_executed(self) -> datetime:
        """Latest execution time among trials, ``datetime.min`` when there are none."""
        latest: datetime | None = None
        for trial in self.trials:
            executed = trial.last_executed()
            if latest is None or latest < executed:
                latest = executed
        return latest if latest is not None else datetime.min

    # -------------------------------------------------------------- organisms

    def best_organism(self, only_solvers: bool) -> Champion | None:
        """Fittest organism across trials.

        Ties keep the earliest trial. Returns None if no trial yields a
        candidate under ``only_solvers``.
        """
        candidates: list[Champion] = []
        for index, trial in enumerate(self.trials):
            organism = trial.best_organism(only_solvers)
            if organism is not None:
                candidates.append(Champion(organism, index))
        if not candidates:
            return None
        # sorted() is stable, so equal fitness keeps trial order
        candidates = sorted(candidates, key=lambda c: c.organism.fitness, reverse=True)
        return candidates[0]

    def solved(self) -> bool:
        return any(t.solved() for t in self.trials)

    def _per_trial_best(self, extract: Callable[[Organism], float]) -> np.ndarray:
        values = np.zeros(len(self.trials), dtype=float)
        for i, trial in enumerate(self.trials):
            organism = trial.best_organism(False)
            if organism is not None:
                values[i] = float(extract(organism))
        return values

    def best_fitness(self) -> np.ndarray:
        """Fitness of each trial's best organism (0 where a trial has none)."""
        return self._per_trial_best(lambda o: o.fitness)

    def best_age(self) -> np.ndarray:
        """Species age of each trial's best organism."""
        return self._per_trial_best(lambda o: o.species_age)

    def best_complexity(self) -> np.ndarray:
        """Phenotype complexity of each trial's best organism."""
        return self._per_trial_best(lambda o: o.complexity)

    # ------------------------------------------------------------ per trial

    def diversity(self) -> np.ndarray:
        """Average number of species in each trial."""
        return np.array([_mean(t.diversity()) for t in self.trials], dtype=float)

    def epochs(self) -> np.ndarray:
        """Number of generations in each trial."""
        return np.array([len(t.generations) for t in self.trials], dtype=float)

    def trials_solved(self) -> int:
        return sum(1 for t in self.trials if t.solved())

    def avg_winner(self) -> WinnerStats:
        """Average winner nodes, genes, evaluations and diversity over solved trials."""
        totals = np.zeros(4, dtype=float)
        count = 0
        for trial in self.trials:
            if trial.solved():
                totals += np.asarray(trial.winner(), dtype=float)
                count += 1
        if count == 0:
            logging.warning(f"Experiment {self.experiment_id}: no solved trials, winner averages undefined")
            return WinnerStats(math.nan, math.nan, math.nan, math.nan)
        return WinnerStats(*(float(v) for v in totals / count))

    # ------------------------------------------------------------- ordering

    def sort_key(self) -> tuple[bool, datetime, int]:
        """(has trials, last executed, id).

        Experiments without trials sort first and are never compared by
        timestamp, so naive and timezone-aware trial times can be mixed.
        """
        return bool(self.trials), self.last_executed(), self.experiment_id

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Experiment):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    # ---------------------------------------------------------- persistence

    def encode(self, encoder: ValueEncoder) -> None:
        encoder.encode(int(self.experiment_id))
        encoder.encode(str(self.name))
        encoder.encode(len(self.trials))
        for trial in self.trials:
            trial.encode(encoder)

    def decode(self, decoder: ValueDecoder, trial_factory: Callable[[], Trial]) -> None:
        """Replace this experiment's contents with the next record in ``decoder``.

        The experiment is left unchanged if any part of the record fails to
        decode.

        Args:
            decoder: Source positioned at an experiment record
            trial_factory: Returns an empty trial able to decode itself
        """
        experiment_id = decoder.decode(int)
        name = decoder.decode(str)
        count = decoder.decode(int)
        if count < 0:
            raise ExperimentDecodeError("Negative trial count", count=count)

        trials: list[Trial] = []
        for index in range(count):
            trial = trial_factory()
            try:
                trial.decode(decoder)
            except ExperimentDecodeError:
                logging.error(f"Experiment {experiment_id}: failed to decode trial {index} of {count}")
                raise
            trials.append(trial)
        self.experiment_id, self.name, self.trials = experiment_id, name, trials

    def write(self, stream: IO[bytes], config: dict | None = None) -> None:
        """Encode this experiment to a binary stream."""
        cfg = resolve_config(config)
        encoder = ValueEncoder(stream, protocol=cfg.get('pickle_protocol'))
        self.encode(encoder)
        logging.debug(f"Experiment {self.experiment_id} '{self.name}' written with {len(self.trials)} trials")

    @classmethod
    def read(cls, stream: IO[bytes], trial_factory: Callable[[], Trial]) -> "Experiment":
        """Decode an experiment previously produced by :meth:`write`."""
        experiment = cls()
        experiment.decode(ValueDecoder(stream), trial_factory)
        logging.debug(f"Experiment {experiment.experiment_id} '{experiment.name}' read with {len(experiment.trials)} trials")
        return experiment

    # --------------------------------------------------------------- report

    def statistics_report(self, config: dict | None = None) -> str:
        """Multi-line human readable summary of this experiment.

        The "Average among winners" block is printed only when there is more
        than one trial and at least one solved trial yields a solver organism;
        otherwise its averages would all be NaN.
        """
        p = int(resolve_config(config).get('report_precision', 1))
        out = io.StringIO()
        n = len(self.trials)
        out.write(f"\n+++ Solved {self.trials_solved()} trials from {n} +++\n")
        out.write(
            "Average\n"
            f"\ttrial duration:\t\t{self.avg_trial_duration()}\n"
            f"\tepoch duration:\t\t{self.avg_epoch_duration()}\n"
            f"\tgenerations/trial:\t{self.avg_generations_per_trial()}\n"
        )

        champion = self.best_organism(True)
        if champion is not None:
            nodes, genes, evals, divers = self.trials[champion.trial_index].winner()
            org = champion.organism
            out.write(
                f"\nChampion found in {champion.trial_index} trial run\n"
                f"\tWinner Nodes:\t{nodes}\n\tWinner Genes:\t{genes}\n\tWinner Evals:\t{evals}\n\n"
                f"\tDiversity:\t{divers}\n"
                f"\tComplexity:\t{org.complexity}\n\tAge:\t\t{org.species_age}\n"
                f"\tFitness:\t{org.fitness:.{p}f}\n"
            )
        else:
            out.write("\nNo winner found in the experiment!\n")

        solvers = [t.best_organism(True) for t in self.trials if t.solved()]
        solvers = [o for o in solvers if o is not None]
        if n > 1 and solvers:
            winner = self.avg_winner()
            out.write(
                "\nAverage among winners\n"
                f"\tWinner Nodes:\t{winner.nodes:.{p}f}\n\tWinner Genes:\t{winner.genes:.{p}f}\n"
                f"\tWinner Evals:\t{winner.evals:.{p}f}\n\n\tDiversity:\t{winner.diversity:.{p}f}\n"
                f"\tComplexity:\t{_mean(o.complexity for o in solvers):.{p}f}\n"
                f"\tAge:\t\t{_mean(o.species_age for o in solvers):.{p}f}\n"
                f"\tFitness:\t{_mean(o.fitness for o in solvers):.{p}f}\n"
            )

        if n > 0:
            fitness, age, complexity = [], [], []
            for trial in self.trials:
                f, a, c = trial.average()
                fitness.append(_mean(f))
                age.append(_mean(a))
                complexity.append(_mean(c))
            out.write(
                "\nAverages for all organisms evaluated during experiment\n"
                f"\tDiversity:\t{_mean(self.diversity()):.{p}f}\n"
                f"\tComplexity:\t{_mean(complexity):.{p}f}\n"
                f"\tAge:\t\t{_mean(age):.{p}f}\n"
                f"\tFitness:\t{_mean(fitness):.{p}f}\n"
            )
        return out.getvalue()

    def print_statistics(self, file: IO[str] | None = None, config: dict | None = None) -> None:
        print(self.statistics_report(config), file=file or sys.stdout)


def sort_experiments(experiments: Iterable[Experiment]) -> list[Experiment]:
    """Experiments ordered by last execution time, then id."""
    return sorted(experiments, key=Experiment.sort_key)


__all__ = ["Champion", "WinnerStats", "Experiment", "sort_experiments"]
