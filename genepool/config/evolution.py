"""Evolution defaults and the ``EvolutionConfig`` bundle."""

import numbers
from dataclasses import dataclass

from genepool.evolution.mutation import MAX_MUTATION_CHANCE, MIN_MUTATION_CHANCE
from genepool.evolution.pairing import PairingMode
from genepool.evolution.selection import ThresholdPolicy
from genepool.exceptions import ConfigurationError

# Population shape
DEFAULT_POPULATION_SIZE = 10
DEFAULT_GENE_COUNT = 100

# Percent chance that a single gene flips when Generation.evolve gets no chance
DEFAULT_MUTATION_CHANCE = 1.0


@dataclass
class EvolutionConfig:
    """Parameters a driver needs to run the evolutionary loop.

    Attributes:
        population_size: Creatures in a fresh generation
        gene_count: Genes per creature
        mutation_chance: Per-gene flip chance in percent (0.0-100.0)
        threshold_policy: How ``Generation.run`` picks its survival threshold
        pairing_mode: Which strategy ``Generation.repopulate`` uses
    """

    population_size: int = DEFAULT_POPULATION_SIZE
    gene_count: int = DEFAULT_GENE_COUNT
    mutation_chance: float = DEFAULT_MUTATION_CHANCE
    threshold_policy: ThresholdPolicy = ThresholdPolicy.MEAN
    pairing_mode: PairingMode = PairingMode.FIRST_AVAILABLE

    def validate(self) -> None:
        """Raise ConfigurationError describing every invalid field."""
        issues = []
        if self.population_size < 0:
            issues.append(f"population_size: {self.population_size} < 0")
        if self.gene_count < 0:
            issues.append(f"gene_count: {self.gene_count} < 0")
        chance = self.mutation_chance
        if isinstance(chance, bool) or not isinstance(chance, numbers.Real):
            issues.append(f"mutation_chance: expected a number, got {type(chance).__name__}")
        elif not (MIN_MUTATION_CHANCE <= chance <= MAX_MUTATION_CHANCE):
            issues.append(
                f"mutation_chance: {chance} not in "
                f"[{MIN_MUTATION_CHANCE}, {MAX_MUTATION_CHANCE}]"
            )
        if not isinstance(self.threshold_policy, ThresholdPolicy):
            issues.append(f"threshold_policy: unknown policy {self.threshold_policy!r}")
        if not isinstance(self.pairing_mode, PairingMode):
            issues.append(f"pairing_mode: unknown mode {self.pairing_mode!r}")
        if issues:
            raise ConfigurationError("Invalid evolution config:\n" + "\n".join(issues))


DEFAULT_EVOLUTION_CONFIG = EvolutionConfig()
