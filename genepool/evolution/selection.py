"""Fitness evaluation and survival thresholds for a selection pass.

A selection pass scores every creature, reduces the scores to one threshold
and keeps the creatures strictly above it. Two threshold policies exist:

- MEAN: arithmetic mean of the population's fitness
- BASELINE: the historical fold, kept for behavioural parity with older runs.
  It starts below zero, takes the first creature's fitness, then resets to
  0.0 on every further creature. So it yields -1.0 for an empty population,
  the sole creature's fitness for a population of one, and 0.0 otherwise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from genepool.genetics import Creature

logger = logging.getLogger(__name__)

_EMPTY_THRESHOLD = -1.0


class ThresholdPolicy(Enum):
    """How a population's fitness values collapse to a survival threshold."""

    MEAN = "mean"
    """Average fitness of the population."""

    BASELINE = "baseline"
    """First-item fold that resets to zero after the first creature."""


@dataclass(frozen=True)
class CreatureFitness:
    """A creature paired with its score for the duration of one pass.

    The creature is borrowed from the generation and must not be modified.
    """

    creature: Creature
    fitness: float

    @classmethod
    def of(cls, creature: Creature) -> CreatureFitness:
        return cls(creature=creature, fitness=creature.fitness())

    def __str__(self) -> str:
        return f"CreatureFitness ({self.fitness}): \n{self.creature}"


def evaluate_population(creatures: Sequence[Creature]) -> List[CreatureFitness]:
    """Score every creature, preserving population order."""
    return [CreatureFitness.of(creature) for creature in creatures]


def _baseline_threshold(fitnesses: Sequence[CreatureFitness]) -> float:
    threshold = _EMPTY_THRESHOLD
    for item in fitnesses:
        if threshold < 0.0:
            threshold = item.fitness
        else:
            threshold = 0.0
    return threshold


def _mean_threshold(fitnesses: Sequence[CreatureFitness]) -> float:
    if not fitnesses:
        return _EMPTY_THRESHOLD
    return sum(item.fitness for item in fitnesses) / len(fitnesses)


def compute_threshold(
    fitnesses: Sequence[CreatureFitness],
    policy: ThresholdPolicy = ThresholdPolicy.MEAN,
) -> float:
    """Reduce a scored population to its survival threshold."""
    if policy == ThresholdPolicy.BASELINE:
        return _baseline_threshold(fitnesses)
    return _mean_threshold(fitnesses)


def select_survivors(
    fitnesses: Sequence[CreatureFitness],
    policy: ThresholdPolicy = ThresholdPolicy.MEAN,
) -> List[Creature]:
    """Return clones of every creature scoring strictly above the threshold.

    Relative order is preserved and the scored creatures are left untouched.
    """
    threshold = compute_threshold(fitnesses, policy)
    survivors = [item.creature.clone() for item in fitnesses if item.fitness > threshold]
    logger.debug(
        "Selection (%s) kept %d of %d creatures above threshold %.3f",
        policy.value,
        len(survivors),
        len(fitnesses),
        threshold,
    )
    return survivors
