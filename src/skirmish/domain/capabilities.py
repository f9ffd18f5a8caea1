"""Protocol definitions for character capabilities.

Each capability is an independent contract. Characters compose them by
implementing the methods; equipment and consumables only ever see the
narrowest capability they need (a :class:`Damageable` target for a weapon,
for instance).
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

from skirmish.core.types import Position, Status

if TYPE_CHECKING:
    from .consumables import Consumable


@runtime_checkable
class Damageable(Protocol):
    """Something that can take damage, be healed and carry a status."""

    @property
    def health(self) -> int:
        """Current health, never negative."""

    @property
    def status(self) -> Status:
        """Currently active status."""

    def take_damage(self, amount: int) -> None:
        """Reduce health by ``amount``, stopping at zero."""

    def heal(self, amount: int) -> None:
        """Increase health by ``amount`` with no upper bound."""

    def set_status(self, status: Status) -> None:
        """Replace the active status."""


@runtime_checkable
class Mover(Protocol):
    """Something with a position that can be moved."""

    @property
    def position(self) -> Position:
        """Current position."""

    def move_to(self, position: Position) -> None:
        """Replace the stored position."""


@runtime_checkable
class Describable(Protocol):
    """Something that can write a human readable block to a text sink."""

    def describe(self, stream: TextIO) -> None:
        """Write the description lines to ``stream``."""


@runtime_checkable
class Attacker(Protocol):
    """Something that applies its equipped effect to a target."""

    def attack(self, target: Damageable) -> None:
        """Apply the attacker's weapon or spell to ``target``."""


@runtime_checkable
class Feedable(Protocol):
    """Something that can be fed a consumable."""

    def feed(self, item: Consumable) -> bool:
        """Resolve ``item`` against this receiver; True when it had an effect."""


__all__ = ["Attacker", "Damageable", "Describable", "Feedable", "Mover"]
