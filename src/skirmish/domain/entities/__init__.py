"""Runtime character exports."""

from .character import PlayerCharacter
from .mage import MAGE_HEALTH, Mage
from .resources import SPELL_MANA_COST, STARTING_MANA, ManaPool, WeaponSlot
from .warrior import WARRIOR_HEALTH, Warrior
from .warrior_mage import WARRIOR_MAGE_HEALTH, WarriorMage

__all__ = [
    "MAGE_HEALTH",
    "Mage",
    "ManaPool",
    "PlayerCharacter",
    "SPELL_MANA_COST",
    "STARTING_MANA",
    "WARRIOR_HEALTH",
    "WARRIOR_MAGE_HEALTH",
    "Warrior",
    "WarriorMage",
    "WeaponSlot",
]
