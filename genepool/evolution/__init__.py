"""Evolution operators for the genetic-algorithm engine.

The module consolidates:
- Mutation: probabilistic flipping of individual genes
- Crossover: combining two parents into a child
- Selection: scoring a population and keeping creatures above a threshold
- Pairing: choosing parents when a population is regrown
"""

from genepool.evolution.crossover import breed, xnor
from genepool.evolution.mutation import (
    MAX_MUTATION_CHANCE,
    MIN_MUTATION_CHANCE,
    should_flip,
    validate_mutation_chance,
)
from genepool.evolution.pairing import (
    FirstAvailablePartner,
    PairingMode,
    PairingStrategy,
    make_pairing_strategy,
)
from genepool.evolution.selection import (
    CreatureFitness,
    ThresholdPolicy,
    compute_threshold,
    evaluate_population,
    select_survivors,
)

__all__ = [
    # Crossover
    "breed",
    "xnor",
    # Mutation
    "validate_mutation_chance",
    "should_flip",
    "MIN_MUTATION_CHANCE",
    "MAX_MUTATION_CHANCE",
    # Pairing
    "PairingStrategy",
    "PairingMode",
    "FirstAvailablePartner",
    "make_pairing_strategy",
    # Selection
    "CreatureFitness",
    "ThresholdPolicy",
    "compute_threshold",
    "evaluate_population",
    "select_survivors",
]
