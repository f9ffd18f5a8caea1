"""Mage: a character that casts its spell with mana."""
from __future__ import annotations

import logging
from typing import TextIO

from skirmish.core.types import Position
from skirmish.domain.capabilities import Damageable
from skirmish.domain.consumables import Consumable
from skirmish.domain.equipment import Spell

from .character import PlayerCharacter
from .resources import ManaPool

LOG = logging.getLogger(__name__)

MAGE_HEALTH = 150


class Mage(PlayerCharacter):
    """Caster with a mana pool and one fixed spell."""

    label = "Mage"

    def __init__(self, position: Position) -> None:
        super().__init__(MAGE_HEALTH, position)
        self.mana_pool = ManaPool()

    @property
    def mana(self) -> int:
        return self.mana_pool.mana

    @property
    def spell(self) -> Spell:
        return self.mana_pool.spell

    def increase_mana(self, amount: int) -> None:
        self.mana_pool.restore(amount)

    def attack(self, target: Damageable) -> None:
        LOG.debug("%s attacks", self.label)
        self.mana_pool.cast(target)

    def feed(self, item: Consumable) -> bool:
        return self._log_feed(item, item.apply_to_mage(self))

    def _describe_resources(self, stream: TextIO) -> None:
        self.mana_pool.describe(stream)
