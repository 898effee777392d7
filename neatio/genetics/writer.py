"""Genome writers for the plain-text and YAML interchange formats.

Both writers compose the complete record in a private buffer and hand it to
the sink in one write followed by a flush, only once the record is complete.
A failed write (unknown activation, bad value) therefore leaves the sink
untouched; a failing sink raises its own error unchanged.

Plain-text record layout::

    genomestart <id>
    trait <id> <p1> ... <pN>
    node <id> <traitId|0> <nodeType> <neuronType> <activationName>
    gene <traitId|0> <inNodeId> <outNodeId> <weight> <recurrent> <innovNum> <mutNum> <enabled>
    genomeend <id>

The plain format has no representation for control genes; use YAML for
modular genomes.
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import IO, Any

import yaml

from neatio.config import resolve_config
from neatio.core.activations import NODE_ACTIVATORS, ActivationResolver
from neatio.core.node import Node, neuron_type_name
from neatio.core.trait import Trait, trait_ref_id
from neatio.genetics.genome import ControlGene, Gene, Genome, ModulePort
from neatio.utils.formatting import format_bool, format_real
from neatio.utils.validation import UnsupportedEncodingError


class GenomeEncoding(IntEnum):
    PLAIN = 1
    YAML = 2


def _deliver(sink: IO[Any], text: str) -> None:
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        sink.write(text.encode("utf-8"))
    else:
        sink.write(text)
    flush = getattr(sink, "flush", None)
    if flush is not None:
        flush()


class GenomeWriter(ABC):
    """Writes whole genome records to a sink."""

    def __init__(self, sink: IO[Any], activations: ActivationResolver | None = None,
                 config: dict | None = None) -> None:
        self.sink = sink
        self.activations = activations if activations is not None else NODE_ACTIVATORS
        self.config = resolve_config(config)

    @abstractmethod
    def encode(self, genome: Genome) -> str:
        """Render the full record for ``genome``."""

    def write_genome(self, genome: Genome) -> None:
        text = self.encode(genome)
        _deliver(self.sink, text)
        logging.debug("Genome %s written (%d bytes)", genome.genome_id, len(text))


class PlainGenomeWriter(GenomeWriter):
    """Line-oriented text writer."""

    def encode(self, genome: Genome) -> str:
        buf = io.StringIO()
        buf.write(f"genomestart {genome.genome_id}\n")
        for trait in genome.traits:
            buf.write(f"trait {self._trait_fields(trait)}\n")
        for node in genome.nodes:
            buf.write(f"node {self._node_fields(node)}\n")
        for gene in genome.genes:
            buf.write(f"gene {self._gene_fields(gene)}\n")
        buf.write(f"genomeend {genome.genome_id}\n")
        return buf.getvalue()

    def _trait_fields(self, trait: Trait) -> str:
        return " ".join([str(trait.trait_id)] + [format_real(p) for p in trait.params])

    def _node_fields(self, node: Node) -> str:
        activation = self.activations.activation_name_from_type(node.activation_type)
        return (f"{node.node_id} {trait_ref_id(node.trait)} {int(node.node_type)} "
                f"{int(node.neuron_type)} {activation}")

    def _gene_fields(self, gene: Gene) -> str:
        link = gene.link
        return " ".join([
            str(trait_ref_id(link.trait)),
            str(link.in_node.node_id),
            str(link.out_node.node_id),
            format_real(link.weight),
            format_bool(link.recurrent),
            str(gene.innovation_num),
            format_real(gene.mutation_num),
            format_bool(gene.enabled),
        ])


class YAMLGenomeWriter(GenomeWriter):
    """Single-document YAML writer (``genome:`` root key)."""

    def encode(self, genome: Genome) -> str:
        doc: dict[str, Any] = {
            "id": int(genome.genome_id),
            "traits": [self._encode_trait(t) for t in genome.traits],
            "nodes": [self._encode_node(n) for n in genome.nodes],
            "genes": [self._encode_gene(g) for g in genome.genes],
        }
        if genome.control_genes:
            doc["modules"] = [self._encode_control_gene(cg) for cg in genome.control_genes]

        return yaml.safe_dump(
            {"genome": doc},
            default_flow_style=self.config.get('yaml_flow_style', False),
            sort_keys=bool(self.config.get('yaml_sort_keys', True)),
            indent=int(self.config.get('yaml_indent', 2)),
        )

    def _encode_trait(self, trait: Trait) -> dict[str, Any]:
        return {"id": int(trait.trait_id), "params": [float(p) for p in trait.params]}

    def _encode_node(self, node: Node) -> dict[str, Any]:
        return {
            "id": int(node.node_id),
            "trait_id": int(trait_ref_id(node.trait)),
            "type": neuron_type_name(node.neuron_type),
            "activation": self.activations.activation_name_from_type(node.activation_type),
        }

    def _encode_gene(self, gene: Gene) -> dict[str, Any]:
        link = gene.link
        return {
            "trait_id": int(trait_ref_id(link.trait)),
            "src_id": int(link.in_node.node_id),
            "tgt_id": int(link.out_node.node_id),
            "innov_num": int(gene.innovation_num),
            "weight": float(link.weight),
            "mut_num": float(gene.mutation_num),
            # string form, not YAML booleans
            "recurrent": format_bool(link.recurrent),
            "enabled": format_bool(gene.enabled),
        }

    def _encode_control_gene(self, gene: ControlGene) -> dict[str, Any]:
        node = gene.control_node
        return {
            "id": int(node.node_id),
            "trait_id": int(trait_ref_id(node.trait)),
            "innov_num": int(gene.innovation_num),
            "mut_num": float(gene.mutation_num),
            "enabled": bool(gene.enabled),
            "activation": self.activations.activation_name_from_type(node.activation_type),
            "inputs": [self._encode_port(p) for p in gene.input_ports()],
            "outputs": [self._encode_port(p) for p in gene.output_ports()],
        }

    @staticmethod
    def _encode_port(port: ModulePort) -> dict[str, int]:
        return {"id": int(port.node_id), "order": int(port.order)}


_WRITERS: dict[GenomeEncoding, type[GenomeWriter]] = {
    GenomeEncoding.PLAIN: PlainGenomeWriter,
    GenomeEncoding.YAML: YAMLGenomeWriter,
}


def new_genome_writer(
    sink: IO[Any],
    encoding: GenomeEncoding | int,
    *,
    activations: ActivationResolver | None = None,
    config: dict | None = None,
) -> GenomeWriter:
    """Create a writer for ``encoding`` bound to ``sink``.

    Args:
        sink: Text or binary stream receiving the records
        encoding: GenomeEncoding selector
        activations: Activation name resolver; defaults to NODE_ACTIVATORS
        config: Optional overrides for the YAML layout keys (see neatio.config)

    Raises:
        UnsupportedEncodingError: for an unknown selector
    """
    try:
        writer_cls = _WRITERS[GenomeEncoding(encoding)]
    except (ValueError, KeyError) as exc:
        raise UnsupportedEncodingError(encoding) from exc
    return writer_cls(sink, activations=activations, config=config)


__all__ = [
    "GenomeEncoding",
    "GenomeWriter",
    "PlainGenomeWriter",
    "YAMLGenomeWriter",
    "new_genome_writer",
]
