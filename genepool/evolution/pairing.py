"""Partner selection for repopulation.

``Generation.repopulate`` asks a pairing strategy for two parents per empty
slot and never decides pairings itself, so richer strategies (random,
fitness-proportional) can be swapped in without touching its loop.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional, Protocol, Sequence, Tuple, runtime_checkable

from genepool.exceptions import ConfigurationError, InvariantViolationError

if TYPE_CHECKING:
    from genepool.genetics import Creature


class PairingMode(Enum):
    """Available pairing strategies."""

    FIRST_AVAILABLE = "first_available"
    """Deterministic: slot-indexed parent plus the first other creature."""


@runtime_checkable
class PairingStrategy(Protocol):
    """Protocol for objects that choose two parents for a new slot.

    Args:
        creatures: The population as it currently stands (may already
            contain children appended earlier in the same repopulation)
        slot: Index the child will occupy
        base_size: Population size before repopulation started

    Returns:
        ``(first_parent, second_parent)``
    """

    def select_parents(
        self, creatures: Sequence[Creature], slot: int, base_size: int
    ) -> Tuple[Creature, Creature]:
        ...


class FirstAvailablePartner:
    """Pair the slot's own creature with the first creature at another index.

    The slot index is wrapped into the pre-growth population, so slot
    ``base_size + k`` is seeded by creature ``k % base_size``. Only original
    creatures ever act as parents.
    """

    def select_parents(
        self, creatures: Sequence[Creature], slot: int, base_size: int
    ) -> Tuple[Creature, Creature]:
        if base_size <= 0 or base_size > len(creatures):
            raise InvariantViolationError(
                f"Cannot pick a parent for slot {slot} from a population of {base_size}"
            )
        parent_index = slot % base_size
        partner = self.find_partner(creatures[:base_size], parent_index)
        if partner is None:
            raise InvariantViolationError(
                f"No partner available for creature {parent_index} in a population of {base_size}"
            )
        return creatures[parent_index], partner

    @staticmethod
    def find_partner(creatures: Sequence[Creature], index: int) -> Optional[Creature]:
        """Return the first creature whose index differs from ``index``."""
        for i, creature in enumerate(creatures):
            if i != index:
                return creature
        return None


def make_pairing_strategy(mode: PairingMode = PairingMode.FIRST_AVAILABLE) -> PairingStrategy:
    """Build the strategy for ``mode``."""
    if mode == PairingMode.FIRST_AVAILABLE:
        return FirstAvailablePartner()
    raise ConfigurationError(f"Unknown pairing mode: {mode!r}")
