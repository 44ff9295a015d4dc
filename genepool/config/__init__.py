"""Configuration package for genepool.

Default values live as module constants; ``EvolutionConfig`` bundles them
for drivers that want a single object to pass around.
"""

from genepool.config.evolution import (
    DEFAULT_EVOLUTION_CONFIG,
    DEFAULT_GENE_COUNT,
    DEFAULT_MUTATION_CHANCE,
    DEFAULT_POPULATION_SIZE,
    MAX_MUTATION_CHANCE,
    MIN_MUTATION_CHANCE,
    EvolutionConfig,
)

__all__ = [
    "EvolutionConfig",
    "DEFAULT_EVOLUTION_CONFIG",
    "DEFAULT_POPULATION_SIZE",
    "DEFAULT_GENE_COUNT",
    "DEFAULT_MUTATION_CHANCE",
    "MIN_MUTATION_CHANCE",
    "MAX_MUTATION_CHANCE",
]
