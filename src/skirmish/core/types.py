"""Shared value types for the core and domain layers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Status = Literal["none", "poisoned"]

NO_STATUS: Status = "none"
POISONED: Status = "poisoned"


@dataclass(frozen=True, slots=True)
class Position:
    """Integer grid coordinates."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"


__all__ = ["NO_STATUS", "POISONED", "Position", "Status"]
