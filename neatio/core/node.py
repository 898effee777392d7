"""Network nodes and links as they appear inside a genome."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from neatio.core.activations import NodeActivationType
from neatio.core.trait import Trait


class NodeType(IntEnum):
    """Structural kind of a node."""

    NEURON = 0
    SENSOR = 1


class NeuronType(IntEnum):
    """Role a node plays in the network."""

    HIDDEN = 0
    INPUT = 1
    OUTPUT = 2
    BIAS = 3


_NEURON_TYPE_NAMES: dict[int, str] = {
    NeuronType.HIDDEN: "HIDN",
    NeuronType.INPUT: "INPT",
    NeuronType.OUTPUT: "OUTP",
    NeuronType.BIAS: "BIAS",
}


def neuron_type_name(neuron_type: int) -> str:
    """Canonical short name for a neuron role, ``UNKNOWN`` for unmapped values."""
    return _NEURON_TYPE_NAMES.get(int(neuron_type), "UNKNOWN")


def neuron_type_by_name(name: str) -> NeuronType:
    for value, candidate in _NEURON_TYPE_NAMES.items():
        if candidate == name:
            return NeuronType(value)
    raise ValueError(f"Unknown neuron type name: {name}")


@dataclass(eq=False)
class Node:
    """A genome vertex.

    Compared by identity: two nodes with the same id in different genomes are
    distinct objects.
    """

    node_id: int
    neuron_type: NeuronType = NeuronType.HIDDEN
    activation_type: int = NodeActivationType.SIGMOID_STEEPENED
    trait: Trait | None = None

    @property
    def node_type(self) -> NodeType:
        if self.neuron_type in (NeuronType.INPUT, NeuronType.BIAS):
            return NodeType.SENSOR
        return NodeType.NEURON

    def is_sensor(self) -> bool:
        return self.node_type == NodeType.SENSOR

    def __repr__(self) -> str:
        return (f"Node(id={self.node_id}, type={neuron_type_name(self.neuron_type)}, "
                f"activation={int(self.activation_type)})")


@dataclass
class Link:
    """Weighted connection between two nodes."""

    in_node: Node
    out_node: Node
    weight: float = 0.0
    recurrent: bool = False
    trait: Trait | None = None


__all__ = [
    "NodeType",
    "NeuronType",
    "neuron_type_name",
    "neuron_type_by_name",
    "Node",
    "Link",
]
