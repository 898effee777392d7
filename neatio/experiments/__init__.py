"""Experiment aggregation and persistence."""

from .codec import ValueDecoder, ValueEncoder
from .experiment import Champion, Experiment, WinnerStats, sort_experiments
from .trial import Organism, Trial

__all__ = [
    "ValueDecoder",
    "ValueEncoder",
    "Champion",
    "Experiment",
    "WinnerStats",
    "sort_experiments",
    "Organism",
    "Trial",
]
