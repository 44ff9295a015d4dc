"""Crossover operations for combining parent creatures.

Breeding walks the loci of both parents side by side and builds one child
gene per locus:

- Both parents carry the locus: the child takes the XNOR of their values
  (equal values give True, differing values give False)
- Only one parent carries the locus: the child copies that value
- Neither parent carries it: impossible given the loop bound

Crossover is deterministic. All randomness in the engine happens at gene
creation and mutation time, never here.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from genepool.exceptions import InvariantViolationError

if TYPE_CHECKING:
    from genepool.genetics import Creature, Gene

logger = logging.getLogger(__name__)


def xnor(first: bool, second: bool) -> bool:
    """Parity rule used for loci present in both parents."""
    return first == second


def breed(first_parent: Creature, second_parent: Creature) -> Creature:
    """Create a generation-0 child from two parents.

    The child is as long as the longer parent. Child gene ``i`` always has
    ``type_id == i``; parents' own locus ids are not carried over.

    Args:
        first_parent: First parent creature
        second_parent: Second parent creature

    Returns:
        New child creature at generation 0

    Raises:
        InvariantViolationError: if a locus is missing from both parents
    """
    # Import here to avoid circular dependency
    from genepool.genetics import Creature, Gene

    first_genes = first_parent.genes
    second_genes = second_parent.genes
    length = max(len(first_genes), len(second_genes))

    genes: List[Gene] = []
    for i in range(length):
        first = first_genes[i] if i < len(first_genes) else None
        second = second_genes[i] if i < len(second_genes) else None

        if first is not None and second is not None:
            value = xnor(first.value, second.value)
        elif first is not None:
            value = first.value
        elif second is not None:
            value = second.value
        else:
            raise InvariantViolationError(f"Locus {i} is out of bounds for both parents")

        genes.append(Gene(type_id=i, value=value))

    logger.debug(
        "Bred child with %d genes from parents of length %d and %d",
        length,
        len(first_genes),
        len(second_genes),
    )
    return Creature(genes=genes, generation=0)
