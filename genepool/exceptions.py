"""genepool exception hierarchy.

Centralised base classes so callers can catch engine failures narrowly
instead of relying on bare ``except Exception`` blocks.
"""


class GenePoolError(Exception):
    """Root of all genepool domain exceptions."""


class GeneticsError(GenePoolError):
    """Gene or creature construction and mutation failures."""


class InvalidArgumentError(GeneticsError, ValueError):
    """An argument is outside its allowed range (e.g. mutation chance)."""


class InvariantViolationError(GenePoolError, RuntimeError):
    """An internal consistency check failed (crossover bounds, pairing).

    These signal misuse of the API or a malformed population, never a
    transient condition, so they are not meant to be retried.
    """


class ConfigurationError(GenePoolError, ValueError):
    """Invalid or missing configuration."""
