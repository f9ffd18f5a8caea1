"""Shared character base: health, position and status."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, TextIO

from skirmish.core.types import NO_STATUS, POISONED, Position, Status
from skirmish.domain.capabilities import Damageable

if TYPE_CHECKING:
    from skirmish.domain.consumables import Consumable

LOG = logging.getLogger(__name__)


class PlayerCharacter:
    """Base for every playable variant.

    Implements the damageable, mover and describable capabilities once.
    Variants add their resources and provide ``attack``, ``feed`` and the
    resource lines of ``describe``.
    """

    label: ClassVar[str] = "Character"

    def __init__(self, health: int, position: Position) -> None:
        if health < 0:
            raise ValueError("Health must be non-negative.")
        self._health = health
        self._position = position
        self._status: Status = NO_STATUS

    # -----------------------
    # Damageable
    # -----------------------
    @property
    def health(self) -> int:
        return self._health

    @property
    def status(self) -> Status:
        return self._status

    @property
    def is_poisoned(self) -> bool:
        return self._status == POISONED

    def take_damage(self, amount: int) -> None:
        """Reduce health by ``amount`` down to a minimum of zero."""
        if amount < 0:
            raise ValueError("Damage must be non-negative.")
        self._health = max(0, self._health - amount)
        LOG.debug("%s takes %d damage, health now %d", self.label, amount, self._health)

    def heal(self, amount: int) -> None:
        """Increase health by ``amount``; there is no maximum."""
        if amount < 0:
            raise ValueError("Healing must be non-negative.")
        self._health += amount

    def set_status(self, status: Status) -> None:
        if status != self._status:
            LOG.debug("%s status %s -> %s", self.label, self._status, status)
        self._status = status

    # -----------------------
    # Mover
    # -----------------------
    @property
    def position(self) -> Position:
        return self._position

    def move_to(self, position: Position) -> None:
        self._position = position

    # -----------------------
    # Describable
    # -----------------------
    def describe(self, stream: TextIO) -> None:
        stream.write(f"{self.label} :\n")
        self._describe_resources(stream)
        self._describe_base(stream)

    def _describe_resources(self, stream: TextIO) -> None:
        """Write the variant-specific lines; the base has none."""

    def _describe_base(self, stream: TextIO) -> None:
        stream.write(f"Position : {self._position}\n")
        if self.is_poisoned:
            stream.write("Poisoned\n")
        stream.write(f"Health : {self._health}\n")

    # -----------------------
    # Attacker / Feedable
    # -----------------------
    def attack(self, target: Damageable) -> None:
        raise NotImplementedError

    def feed(self, item: Consumable) -> bool:
        raise NotImplementedError

    def _log_feed(self, item: Consumable, applied: bool) -> bool:
        LOG.debug("%s fed %s: %s", self.label, item.name, "applied" if applied else "no effect")
        return applied

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(health={self._health}, "
            f"position={self._position!r}, status={self._status!r})"
        )
