"""genepool: a minimal genetic-algorithm engine.

A population of bit-string creatures evolves over discrete generations
through mutation, fitness-based selection and crossover.

Example:
    import random

    from genepool import Generation

    rng = random.Random(7)
    genesis = Generation.create(10, 100, rng=rng)
    survivors = genesis.run()
    survivors.repopulate(10)
"""

from genepool.exceptions import (
    ConfigurationError,
    GenePoolError,
    GeneticsError,
    InvalidArgumentError,
    InvariantViolationError,
)
from genepool.genetics import Creature, Gene
from genepool.evolution import (
    CreatureFitness,
    FirstAvailablePartner,
    PairingMode,
    PairingStrategy,
    ThresholdPolicy,
    breed,
)
from genepool.config import DEFAULT_EVOLUTION_CONFIG, EvolutionConfig
from genepool.generation import Generation
from genepool.protocols import CreaturePredicate

__version__ = "0.1.0"

__all__ = [
    # Core classes
    "Gene",
    "Creature",
    "Generation",
    "CreatureFitness",
    # Operators and policies
    "breed",
    "ThresholdPolicy",
    "PairingMode",
    "PairingStrategy",
    "FirstAvailablePartner",
    "CreaturePredicate",
    # Configuration
    "EvolutionConfig",
    "DEFAULT_EVOLUTION_CONFIG",
    # Errors
    "GenePoolError",
    "GeneticsError",
    "InvalidArgumentError",
    "InvariantViolationError",
    "ConfigurationError",
]
