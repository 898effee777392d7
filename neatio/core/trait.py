"""Trait: a shared parameter set referenced by nodes and links."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Trait:
    """Ordered parameter vector with an integer id.

    Attributes:
        trait_id: Identifier; 0 is reserved to mean "no trait" in encoded output
        params: Parameter values, order is meaningful
    """

    trait_id: int
    params: list[float] = field(default_factory=list)


def trait_ref_id(trait: Trait | None) -> int:
    """Encoded id for an optional trait reference (0 when absent)."""
    return trait.trait_id if trait is not None else 0


__all__ = ["Trait", "trait_ref_id"]
