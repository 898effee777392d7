import io

import pytest
import yaml

from neatio.core.activations import ActivationRegistry, NodeActivationType
from neatio.core.node import NeuronType, Node
from neatio.genetics.genome import ControlGene
from neatio.genetics.writer import GenomeEncoding, YAMLGenomeWriter, new_genome_writer
from neatio.utils.validation import UnsupportedActivationError
from genome_fixtures import modular_genome, xor_genome


def _write_yaml(genome, **kwargs):
    sink = io.StringIO()
    new_genome_writer(sink, GenomeEncoding.YAML, **kwargs).write_genome(genome)
    return sink.getvalue()


def test_yaml_document_layout_without_modules():
    text = _write_yaml(xor_genome(11))
    doc = yaml.safe_load(text)
    assert list(doc) == ["genome"]
    g = doc["genome"]
    assert "modules" not in g
    assert g["id"] == 11
    assert g["traits"][1] == {"id": 3, "params": [0.3, 0, 0, 0, 0, 0, 0, 1e-06]}
    assert g["nodes"][0] == {"id": 1, "trait_id": 0, "type": "BIAS", "activation": "NullActivation"}
    assert g["nodes"][3] == {"id": 4, "trait_id": 1, "type": "OUTP", "activation": "SigmoidSteepenedActivation"}
    assert [n["type"] for n in g["nodes"]] == ["BIAS", "INPT", "INPT", "OUTP", "HIDN"]


def test_yaml_gene_flags_are_strings():
    g = yaml.safe_load(_write_yaml(xor_genome()))["genome"]
    assert g["genes"][2] == {
        "trait_id": 0,
        "src_id": 3,
        "tgt_id": 5,
        "innov_num": 3,
        "weight": 2.0,
        "mut_num": 0.0,
        "recurrent": "false",
        "enabled": "false",
    }
    assert g["genes"][3]["recurrent"] == "true"
    assert all(isinstance(gene["enabled"], str) for gene in g["genes"])


def test_yaml_modules_keep_order_and_port_positions():
    genome = modular_genome()
    extra = ControlGene(control_node=Node(7, NeuronType.HIDDEN, NodeActivationType.MAX_MODULE), innovation_num=10)
    nodes = {n.node_id: n for n in genome.nodes}
    for nid in (5, 1, 4):
        extra.add_input(nodes[nid])
    extra.add_output(nodes[5])
    extra.add_output(nodes[2])
    genome.control_genes.append(extra)

    modules = yaml.safe_load(_write_yaml(genome))["genome"]["modules"]
    assert len(modules) == 2
    assert [m["id"] for m in modules] == [6, 7]

    first = modules[0]
    assert first["activation"] == "MultiplyModuleActivation"
    assert first["enabled"] is True
    assert first["trait_id"] == 0
    assert first["innov_num"] == 9
    assert first["inputs"] == [{"id": 3, "order": 0}, {"id": 2, "order": 1}]
    assert first["outputs"] == [{"id": 4, "order": 0}]

    second = modules[1]
    assert [p["id"] for p in second["inputs"]] == [5, 1, 4]
    assert [p["order"] for p in second["inputs"]] == [0, 1, 2]
    assert [p["order"] for p in second["outputs"]] == [0, 1]


def test_yaml_keys_sorted_by_default_and_configurable():
    text = _write_yaml(xor_genome())
    assert text.startswith("genome:\n  genes:\n")

    unsorted = _write_yaml(xor_genome(), config={'yaml_sort_keys': False})
    assert unsorted.startswith("genome:\n  id: 1\n  traits:\n")


def test_yaml_unresolvable_module_activation_writes_nothing():
    genome = modular_genome()
    genome.control_genes[0].control_node.activation_type = 1234
    sink = io.StringIO()
    with pytest.raises(UnsupportedActivationError):
        new_genome_writer(sink, GenomeEncoding.YAML).write_genome(genome)
    assert sink.getvalue() == ""


def test_yaml_writer_uses_custom_resolver():
    registry = ActivationRegistry({NodeActivationType.NULL: "identity"})
    registry.register(NodeActivationType.SIGMOID_STEEPENED, "sigmoid")
    registry.register(NodeActivationType.TANH, "tanh")
    writer = YAMLGenomeWriter(io.StringIO(), activations=registry)
    doc = yaml.safe_load(writer.encode(xor_genome()))
    assert [n["activation"] for n in doc["genome"]["nodes"]] == ["identity", "identity", "identity", "sigmoid", "tanh"]


def test_yaml_empty_genome():
    from neatio.genetics.genome import Genome

    doc = yaml.safe_load(_write_yaml(Genome(5)))
    assert doc == {"genome": {"id": 5, "traits": [], "nodes": [], "genes": []}}


class _FailingSink(io.StringIO):
    def write(self, s):
        raise OSError("disk full")


def test_yaml_sink_failure_propagates():
    with pytest.raises(OSError, match="disk full"):
        new_genome_writer(_FailingSink(), GenomeEncoding.YAML).write_genome(modular_genome())
