"""Generation: a population snapshot and the operations that advance it.

A driver builds a Generation, then alternates between:

- ``run``: score the population and return the next Generation holding the
  creatures above the survival threshold (the source is left untouched)
- ``kill``: cull creatures matching a predicate, in place
- ``repopulate``: breed children until the population reaches a target size

Nothing here decides when to stop; that belongs to the driver.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from genepool.config.evolution import (
    DEFAULT_EVOLUTION_CONFIG,
    DEFAULT_MUTATION_CHANCE,
    EvolutionConfig,
)
from genepool.evolution.crossover import breed
from genepool.evolution.mutation import validate_mutation_chance
from genepool.evolution.pairing import (
    FirstAvailablePartner,
    PairingStrategy,
    make_pairing_strategy,
)
from genepool.evolution.selection import ThresholdPolicy, evaluate_population, select_survivors
from genepool.genetics import Creature
from genepool.protocols import CreaturePredicate

logger = logging.getLogger(__name__)


@dataclass
class Generation:
    """A numbered population of creatures.

    Attributes:
        generation: Sequence number, advanced only by ``run``
        creatures: The population, exclusively owned by this generation
        threshold_policy: Survival threshold used by ``run``
        pairing: Parent selection used by ``repopulate``
        mutation_chance: Default per-gene flip chance in percent for ``evolve``
        rng: Default random source for ``evolve`` (module ``random`` if None)
    """

    generation: int = 0
    creatures: List[Creature] = field(default_factory=list)
    threshold_policy: ThresholdPolicy = field(default=ThresholdPolicy.MEAN, compare=False)
    pairing: PairingStrategy = field(default_factory=FirstAvailablePartner, repr=False, compare=False)
    mutation_chance: float = field(default=DEFAULT_MUTATION_CHANCE, compare=False)
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def create(
        cls,
        n_creatures: int,
        n_genes: int,
        rng: Optional[random.Random] = None,
        config: Optional[EvolutionConfig] = None,
    ) -> Generation:
        """Create generation 0 with ``n_creatures`` random creatures.

        ``config`` supplies the threshold policy, pairing mode and default
        mutation chance; the population shape always comes from the explicit
        arguments.

        Raises:
            ConfigurationError: if ``config`` is given and invalid
        """
        if config is not None:
            config.validate()
        cfg = config or DEFAULT_EVOLUTION_CONFIG
        creatures = Creature.create_population(n_creatures, n_genes, rng=rng)
        logger.debug("Created generation 0 with %d creatures", len(creatures))
        return cls(
            generation=0,
            creatures=creatures,
            threshold_policy=cfg.threshold_policy,
            pairing=make_pairing_strategy(cfg.pairing_mode),
            mutation_chance=cfg.mutation_chance,
            rng=rng,
        )

    @classmethod
    def from_config(
        cls, config: EvolutionConfig, rng: Optional[random.Random] = None
    ) -> Generation:
        """Validate ``config`` and create generation 0 from it."""
        return cls.create(config.population_size, config.gene_count, rng=rng, config=config)

    # =========================================================================
    # Selection
    # =========================================================================

    def run(self) -> Generation:
        """Return the next generation, holding clones of the survivors.

        Survivors are the creatures whose fitness is strictly greater than
        the threshold from ``threshold_policy``, in their original order.
        """
        fitnesses = evaluate_population(self.creatures)
        survivors = select_survivors(fitnesses, self.threshold_policy)
        logger.debug(
            "Generation %d -> %d: %d of %d creatures survived",
            self.generation,
            self.generation + 1,
            len(survivors),
            len(self.creatures),
        )
        return Generation(
            generation=self.generation + 1,
            creatures=survivors,
            threshold_policy=self.threshold_policy,
            pairing=self.pairing,
            mutation_chance=self.mutation_chance,
            rng=self.rng,
        )

    def kill(self, predicate: CreaturePredicate) -> int:
        """Remove every creature for which ``predicate`` is True.

        Survivors keep their relative order. Returns the number removed.
        """
        before = len(self.creatures)
        self.creatures = [creature for creature in self.creatures if not predicate(creature)]
        removed = before - len(self.creatures)
        logger.debug("Generation %d: killed %d of %d creatures", self.generation, removed, before)
        return removed

    # =========================================================================
    # Reproduction
    # =========================================================================

    def repopulate(self, target_size: int) -> None:
        """Breed children into the population until it holds ``target_size``.

        Existing creatures are left in place and unchanged; children are
        appended. A population already at or above the target is untouched.

        Raises:
            InvariantViolationError: if growth is needed but the population
                has fewer than two creatures to pair
        """
        base_size = len(self.creatures)
        if target_size <= base_size:
            return

        for slot in range(base_size, target_size):
            first_parent, second_parent = self.pairing.select_parents(
                self.creatures, slot, base_size
            )
            self.creatures.append(breed(first_parent, second_parent))

        logger.debug(
            "Generation %d: repopulated from %d to %d creatures",
            self.generation,
            base_size,
            len(self.creatures),
        )

    def evolve(
        self, chance_percent: Optional[float] = None, rng: Optional[random.Random] = None
    ) -> None:
        """Evolve every creature in place with the same mutation chance.

        ``chance_percent`` defaults to the generation's ``mutation_chance``.

        Raises:
            InvalidArgumentError: if ``chance_percent`` is outside [0, 100]
        """
        if chance_percent is None:
            chance_percent = self.mutation_chance
        chance = validate_mutation_chance(chance_percent)
        rng = rng or self.rng or random
        for creature in self.creatures:
            creature.evolve(chance, rng=rng)

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def fitness_summary(self) -> Dict[str, float]:
        """Return a compact dict of population fitness stats for logging."""
        fitnesses = [creature.fitness() for creature in self.creatures]
        if not fitnesses:
            return {
                "generation": self.generation,
                "population": 0,
                "min": 0.0,
                "max": 0.0,
                "mean": 0.0,
            }
        return {
            "generation": self.generation,
            "population": len(fitnesses),
            "min": min(fitnesses),
            "max": max(fitnesses),
            "mean": sum(fitnesses) / len(fitnesses),
        }

    def __len__(self) -> int:
        return len(self.creatures)

    def __str__(self) -> str:
        return f"[Generation({self.generation})]\n"
