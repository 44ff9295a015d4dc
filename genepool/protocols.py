"""Protocol-based capabilities used across the engine.

Callers hand the engine behaviour (e.g. which creatures to cull) as plain
callables. Any function, lambda or object with a matching ``__call__``
satisfies these protocols without inheriting from anything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from genepool.genetics import Creature


@runtime_checkable
class CreaturePredicate(Protocol):
    """Protocol for a yes/no test over a single creature.

    Used by ``Generation.kill``: returning True marks the creature for removal.

    Examples:
        lambda creature: creature.fitness() < 3.0
        any object implementing ``__call__(creature)``
    """

    def __call__(self, creature: Creature) -> bool:
        ...
