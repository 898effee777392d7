"""Core genome building blocks: traits, nodes, links, activations."""

from .activations import (  # noqa: F401
    NODE_ACTIVATORS,
    ActivationRegistry,
    ActivationResolver,
    NodeActivationType,
)
from .node import Link, NeuronType, Node, NodeType, neuron_type_by_name, neuron_type_name  # noqa: F401
from .trait import Trait, trait_ref_id  # noqa: F401

__all__ = [
    'NODE_ACTIVATORS',
    'ActivationRegistry',
    'ActivationResolver',
    'NodeActivationType',
    'Link',
    'NeuronType',
    'Node',
    'NodeType',
    'neuron_type_by_name',
    'neuron_type_name',
    'Trait',
    'trait_ref_id',
]
