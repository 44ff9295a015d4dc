import pytest

from genepool import DEFAULT_EVOLUTION_CONFIG, ConfigurationError, EvolutionConfig, PairingMode, ThresholdPolicy
from genepool.config import DEFAULT_GENE_COUNT, DEFAULT_MUTATION_CHANCE, DEFAULT_POPULATION_SIZE


def test_defaults():
    cfg = EvolutionConfig()
    assert cfg.population_size == DEFAULT_POPULATION_SIZE
    assert cfg.gene_count == DEFAULT_GENE_COUNT
    assert cfg.mutation_chance == DEFAULT_MUTATION_CHANCE
    assert cfg.threshold_policy is ThresholdPolicy.MEAN
    assert cfg.pairing_mode is PairingMode.FIRST_AVAILABLE
    DEFAULT_EVOLUTION_CONFIG.validate()


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"population_size": -1}, "population_size"),
        ({"gene_count": -3}, "gene_count"),
        ({"mutation_chance": 100.5}, "mutation_chance"),
        ({"mutation_chance": -0.5}, "mutation_chance"),
        ({"mutation_chance": "50"}, "mutation_chance"),
        ({"mutation_chance": float("nan")}, "mutation_chance"),
        ({"threshold_policy": "mean"}, "threshold_policy"),
        ({"pairing_mode": "first_available"}, "pairing_mode"),
    ],
)
def test_validate_rejects_bad_fields(kwargs, message):
    with pytest.raises(ConfigurationError, match=message):
        EvolutionConfig(**kwargs).validate()


def test_validate_reports_every_issue():
    with pytest.raises(ConfigurationError) as excinfo:
        EvolutionConfig(population_size=-1, gene_count=-1).validate()
    assert "population_size" in str(excinfo.value)
    assert "gene_count" in str(excinfo.value)
