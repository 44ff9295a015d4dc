"""Genetic building blocks: boolean genes and the creatures that carry them."""

from genepool.genetics.creature import Creature
from genepool.genetics.gene import Gene

__all__ = [
    "Gene",
    "Creature",
]
