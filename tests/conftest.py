"""Pytest configuration and fixtures for genepool tests."""

import random

import pytest

from genepool import Creature, Gene, Generation

NUM_CREATURES = 10
NUM_GENES = 100


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def genesis(seeded_rng):
    """A fresh 10 x 100 generation drawn from the seeded RNG."""
    return Generation.create(NUM_CREATURES, NUM_GENES, rng=seeded_rng)


@pytest.fixture
def make_creature():
    """Factory for creatures with explicit gene values at loci 0..n-1."""

    def _make(values, generation=0):
        genes = [Gene(type_id=i, value=bool(v)) for i, v in enumerate(values)]
        return Creature(genes=genes, generation=generation)

    return _make
