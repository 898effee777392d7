"""Genome model and interchange writers."""

from .genome import ControlGene, Gene, Genome, ModulePort
from .writer import (
    GenomeEncoding,
    GenomeWriter,
    PlainGenomeWriter,
    YAMLGenomeWriter,
    new_genome_writer,
)

__all__ = [
    "ControlGene",
    "Gene",
    "Genome",
    "ModulePort",
    "GenomeEncoding",
    "GenomeWriter",
    "PlainGenomeWriter",
    "YAMLGenomeWriter",
    "new_genome_writer",
]
