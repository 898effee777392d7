"""Genome data model (genotype of one evolved network).

A genome is populated by the evolutionary operators and then handed to the
writers in :mod:`neatio.genetics.writer`. All collections are plain lists in
append order; nothing here sorts or deduplicates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from neatio.core.node import Link, Node
from neatio.core.trait import Trait


@dataclass
class Gene:
    """Connection gene: a link plus its evolutionary history.

    Attributes:
        link: The connection itself (endpoints, weight, recurrence, trait)
        innovation_num: Historical marking assigned at creation; never recomputed
        mutation_num: Magnitude of the last weight perturbation
        enabled: Disabled genes stay in the genome and are still encoded
    """

    link: Link
    innovation_num: int
    mutation_num: float = 0.0
    enabled: bool = True

    @classmethod
    def connect(
        cls,
        in_node: Node,
        out_node: Node,
        weight: float,
        innovation_num: int,
        *,
        recurrent: bool = False,
        trait: Trait | None = None,
        mutation_num: float = 0.0,
        enabled: bool = True,
    ) -> "Gene":
        link = Link(in_node=in_node, out_node=out_node, weight=weight, recurrent=recurrent, trait=trait)
        return cls(link=link, innovation_num=innovation_num, mutation_num=mutation_num, enabled=enabled)


class ModulePort(NamedTuple):
    """One port of a module: the attached node and its slot position."""

    node_id: int
    order: int


@dataclass
class ControlGene:
    """Multi-input/multi-output module gene.

    The slot of each port is its index in ``incoming`` / ``outgoing``; the
    lists are the single source of port order.
    """

    control_node: Node
    incoming: list[Link] = field(default_factory=list)
    outgoing: list[Link] = field(default_factory=list)
    innovation_num: int = 0
    mutation_num: float = 0.0
    enabled: bool = True

    def add_input(self, node: Node, weight: float = 1.0) -> ModulePort:
        self.incoming.append(Link(in_node=node, out_node=self.control_node, weight=weight))
        return ModulePort(node.node_id, len(self.incoming) - 1)

    def add_output(self, node: Node, weight: float = 1.0) -> ModulePort:
        self.outgoing.append(Link(in_node=self.control_node, out_node=node, weight=weight))
        return ModulePort(node.node_id, len(self.outgoing) - 1)

    def input_ports(self) -> list[ModulePort]:
        return [ModulePort(link.in_node.node_id, order) for order, link in enumerate(self.incoming)]

    def output_ports(self) -> list[ModulePort]:
        return [ModulePort(link.out_node.node_id, order) for order, link in enumerate(self.outgoing)]


@dataclass
class Genome:
    """Complete genetic encoding of one network.

    Attributes:
        genome_id: Identifier written in the record header/footer
        traits: Ordered traits
        nodes: Ordered nodes (sensors first by convention, not enforced)
        genes: Ordered connection genes
        control_genes: Ordered module genes, usually empty
    """

    genome_id: int
    traits: list[Trait] = field(default_factory=list)
    nodes: list[Node] = field(default_factory=list)
    genes: list[Gene] = field(default_factory=list)
    control_genes: list[ControlGene] = field(default_factory=list)

    def has_modules(self) -> bool:
        return len(self.control_genes) > 0


__all__ = ["Gene", "ModulePort", "ControlGene", "Genome"]
