"""Creature class for the genetic-algorithm engine.

A creature is an ordered, fixed-length sequence of boolean genes plus a
counter of how many times it has evolved. Fitness is the number of active
genes.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from genepool.evolution.mutation import validate_mutation_chance
from genepool.exceptions import InvalidArgumentError
from genepool.genetics.gene import Gene

logger = logging.getLogger(__name__)


@dataclass
class Creature:
    """An individual organism.

    Attributes:
        genes: Ordered gene sequence; its length never changes after construction
        generation: Number of ``evolve`` calls this creature has gone through
    """

    genes: List[Gene] = field(default_factory=list)
    generation: int = 0

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def create(cls, n_genes: int, rng: Optional[random.Random] = None) -> Creature:
        """Create a generation-0 creature with ``n_genes`` random genes."""
        return cls(genes=Gene.create_sequence(n_genes, rng=rng), generation=0)

    @classmethod
    def create_population(
        cls, n: int, n_genes: int, rng: Optional[random.Random] = None
    ) -> List[Creature]:
        """Create ``n`` independently randomized creatures."""
        if n < 0:
            raise InvalidArgumentError(f"Population size must not be negative, got {n}")
        rng = rng or random
        creatures = [cls.create(n_genes, rng=rng) for _ in range(n)]
        logger.debug("Created population of %d creatures with %d genes", n, n_genes)
        return creatures

    def clone(self) -> Creature:
        """Return an independent copy; genes are immutable so a shallow list copy suffices."""
        return Creature(genes=list(self.genes), generation=self.generation)

    # =========================================================================
    # Evolution
    # =========================================================================

    # Unweighted and generation-blind.
    def fitness(self) -> float:
        """Count of genes whose value is True, as a float."""
        return float(sum(1 for gene in self.genes if gene.value))

    def evolve(self, chance_percent: float, rng: Optional[random.Random] = None) -> Creature:
        """Mutate every gene in place and advance the generation counter.

        Each gene is replaced with ``gene.mutate(chance_percent)``. The chance
        is checked up front so an invalid value leaves the creature untouched.

        Raises:
            InvalidArgumentError: if ``chance_percent`` is outside [0, 100]
        """
        chance = validate_mutation_chance(chance_percent)
        rng = rng or random
        for i, gene in enumerate(self.genes):
            self.genes[i] = gene.mutate(chance, rng=rng)
        self.generation += 1
        return self

    # =========================================================================
    # Rendering
    # =========================================================================

    def bits(self) -> str:
        """Return the genes as a string of ``1``/``0`` characters."""
        return "".join(gene.bit for gene in self.genes)

    def __len__(self) -> int:
        return len(self.genes)

    def __str__(self) -> str:
        return f"Creature: \n  generation: {self.generation}\n  genes: {self.bits()}\n"
