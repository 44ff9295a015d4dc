import random

import pytest

from genepool import Gene, InvalidArgumentError

# The chance of a gene mutation happening.
# Kept at 100% to force a mutation every time.
MUTATION_CHANCE = 100.0

NUM_GENES = 100


def test_create_gene_keeps_locus(seeded_rng):
    gene = Gene.create(0, rng=seeded_rng)
    assert gene.type_id == 0
    assert isinstance(gene.value, bool)


def test_create_gene_samples_both_values(seeded_rng):
    values = {Gene.create(0, rng=seeded_rng).value for _ in range(200)}
    assert values == {True, False}


def test_create_sequence_numbers_loci_in_order(seeded_rng):
    genes = Gene.create_sequence(NUM_GENES, rng=seeded_rng)
    assert len(genes) == NUM_GENES
    assert [g.type_id for g in genes] == list(range(NUM_GENES))


def test_create_sequence_empty():
    assert Gene.create_sequence(0) == []


def test_create_rejects_negative_locus():
    with pytest.raises(InvalidArgumentError, match="Locus id"):
        Gene.create(-1)


def test_mutate_at_full_chance_always_flips(seeded_rng):
    for value in (True, False):
        original = Gene(type_id=3, value=value)
        for _ in range(50):
            gene = original.mutate(MUTATION_CHANCE, rng=seeded_rng)
            assert gene.type_id == original.type_id
            assert gene.value != original.value


def test_mutate_at_zero_chance_never_flips(seeded_rng):
    original = Gene(type_id=5, value=True)
    for _ in range(50):
        assert original.mutate(0, rng=seeded_rng) == original


def test_mutate_does_not_modify_receiver(seeded_rng):
    original = Gene(type_id=1, value=False)
    mutated = original.mutate(MUTATION_CHANCE, rng=seeded_rng)
    assert original.value is False
    assert mutated is not original


def test_mutate_is_reproducible_with_same_seed():
    gene = Gene(type_id=0, value=False)
    rng_a = random.Random(9)
    rng_b = random.Random(9)
    first = [gene.mutate(50.0, rng=rng_a).value for _ in range(20)]
    second = [gene.mutate(50.0, rng=rng_b).value for _ in range(20)]
    assert first == second


@pytest.mark.parametrize("chance", [-0.1, -50, 100.01, 250, float("nan")])
def test_mutate_rejects_out_of_range_chance(chance):
    with pytest.raises(InvalidArgumentError):
        Gene(type_id=0, value=True).mutate(chance)


def test_invalid_chance_is_also_value_error():
    with pytest.raises(ValueError, match="must not be negative"):
        Gene(type_id=0, value=True).mutate(-1)


def test_gene_rendering():
    assert str(Gene(type_id=4, value=True)) == "[Gene(4): 1]"
    assert str(Gene(type_id=12, value=False)) == "[Gene(12): 0]"


@pytest.mark.parametrize("chance, low, high", [(25.0, 0.23, 0.27), (60, 0.58, 0.62)])
def test_mutate_flip_rate_matches_chance(chance, low, high):
    rng = random.Random(1234)
    gene = Gene(type_id=0, value=False)
    draws = 20_000
    flips = sum(gene.mutate(chance, rng=rng).value for _ in range(draws))
    assert low <= flips / draws <= high


@pytest.mark.parametrize("chance", ["50", True, False, None, [50]])
def test_mutate_rejects_non_numeric_chance(chance):
    with pytest.raises(InvalidArgumentError, match="must be a number"):
        Gene(type_id=0, value=False).mutate(chance)
