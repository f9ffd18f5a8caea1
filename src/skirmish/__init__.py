"""Skirmish: warriors, mages and the items they trade blows and potions with."""

__version__ = "0.1.0"
