"""Mutation rules for boolean genes.

A mutation event flips a gene's value with a probability expressed as a
percentage. The chance is validated once per event; the coin flip draws from
an injectable RNG so seeded runs are reproducible.
"""

import math
import numbers
import random
from typing import Optional

from genepool.exceptions import InvalidArgumentError

MIN_MUTATION_CHANCE: float = 0.0
MAX_MUTATION_CHANCE: float = 100.0


def validate_mutation_chance(chance_percent: float) -> float:
    """Return ``chance_percent`` as a float or raise if it is out of range.

    Args:
        chance_percent: Probability of a flip, in percent (0.0-100.0)

    Raises:
        InvalidArgumentError: if the chance is not a real number, is
            negative, above 100 or NaN
    """
    if isinstance(chance_percent, bool) or not isinstance(chance_percent, numbers.Real):
        raise InvalidArgumentError(
            f"Mutation chance must be a number, got {type(chance_percent).__name__}"
        )
    chance = float(chance_percent)
    if math.isnan(chance):
        raise InvalidArgumentError("Mutation chance must be a number")
    if chance < MIN_MUTATION_CHANCE:
        raise InvalidArgumentError("Mutation chance must not be negative")
    if chance > MAX_MUTATION_CHANCE:
        raise InvalidArgumentError("Mutation chance must not be above 100.0")
    return chance


def should_flip(chance_percent: float, rng: Optional[random.Random] = None) -> bool:
    """Roll a single mutation event.

    ``chance_percent`` must already be validated. A chance of 0 never flips
    and a chance of 100 always flips, since ``random()`` is in ``[0, 1)``.
    """
    rng = rng or random
    return rng.random() < chance_percent / MAX_MUTATION_CHANCE
