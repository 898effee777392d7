"""
Quickstart Tutorial

Goals:
- Build a tiny genome (bias + two inputs -> output)
- Write it in the plain-text format
- Write it again as YAML, this time with a multiply module attached
"""

import io

from neatio.core.activations import NodeActivationType
from neatio.core.node import NeuronType, Node
from neatio.core.trait import Trait
from neatio.genetics.genome import ControlGene, Gene, Genome
from neatio.genetics.writer import GenomeEncoding, new_genome_writer


def main():
    # A trait is a parameter vector shared by nodes and links; id 0 is reserved.
    trait = Trait(1, [0.1, 0.0, 0.5])

    # Sensors (bias and inputs) use the null activation; the output squashes.
    bias = Node(1, NeuronType.BIAS, NodeActivationType.NULL)
    in1 = Node(2, NeuronType.INPUT, NodeActivationType.NULL)
    in2 = Node(3, NeuronType.INPUT, NodeActivationType.NULL)
    out = Node(4, NeuronType.OUTPUT, NodeActivationType.SIGMOID_STEEPENED, trait=trait)

    # Innovation numbers normally come from the evolutionary run; fixed here.
    genome = Genome(
        1,
        traits=[trait],
        nodes=[bias, in1, in2, out],
        genes=[
            Gene.connect(bias, out, 0.5, 1),
            Gene.connect(in1, out, -1.25, 2),
            Gene.connect(in2, out, 2.0, 3, enabled=False),
        ],
    )

    sink = io.StringIO()
    new_genome_writer(sink, GenomeEncoding.PLAIN).write_genome(genome)
    print(sink.getvalue())

    # Modules only exist in the YAML format. Port order is the order of add_* calls.
    module = ControlGene(Node(5, NeuronType.HIDDEN, NodeActivationType.MULTIPLY_MODULE), innovation_num=4)
    module.add_input(in2)
    module.add_input(in1)
    module.add_output(out)
    genome.control_genes.append(module)

    sink = io.StringIO()
    new_genome_writer(sink, GenomeEncoding.YAML).write_genome(genome)
    print(sink.getvalue())


if __name__ == '__main__':
    main()
