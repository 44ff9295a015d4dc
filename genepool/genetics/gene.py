"""Gene: a single boolean trait at a fixed positional locus."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from genepool.evolution.mutation import should_flip, validate_mutation_chance
from genepool.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Gene:
    """An immutable boolean value bound to a locus.

    Attributes:
        type_id: Positional index identifying the locus
        value: The trait value
    """

    type_id: int
    value: bool

    @classmethod
    def create(cls, locus_id: int, rng: Optional[random.Random] = None) -> Gene:
        """Create a gene at ``locus_id`` with a uniformly random value.

        Sampling itself cannot fail; the only guard is on the locus.

        Raises:
            InvalidArgumentError: if ``locus_id`` is negative
        """
        if locus_id < 0:
            raise InvalidArgumentError(f"Locus id must not be negative, got {locus_id}")
        rng = rng or random
        return cls(type_id=locus_id, value=rng.random() < 0.5)

    @classmethod
    def create_sequence(cls, n: int, rng: Optional[random.Random] = None) -> List[Gene]:
        """Create ``n`` random genes with loci ``0..n-1`` in order."""
        if n < 0:
            raise InvalidArgumentError(f"Gene count must not be negative, got {n}")
        rng = rng or random
        return [cls.create(i, rng=rng) for i in range(n)]

    def mutate(self, chance_percent: float, rng: Optional[random.Random] = None) -> Gene:
        """Return a new gene, flipped with probability ``chance_percent / 100``.

        The receiver is never modified and the locus is always preserved.

        Raises:
            InvalidArgumentError: if ``chance_percent`` is outside [0, 100]
        """
        chance = validate_mutation_chance(chance_percent)
        if should_flip(chance, rng):
            return Gene(type_id=self.type_id, value=not self.value)
        return Gene(type_id=self.type_id, value=self.value)

    @property
    def bit(self) -> str:
        return "1" if self.value else "0"

    def __str__(self) -> str:
        return f"[Gene({self.type_id}): {self.bit}]"
