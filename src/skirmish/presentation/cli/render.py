"""Shared rendering helpers for description blocks."""
from __future__ import annotations

from typing import Sequence, TextIO

from skirmish.services import ScenarioOutcome


def render_blocks(stream: TextIO, blocks: Sequence[str]) -> None:
    """Write each block in order, separated by a blank line."""
    for idx, block in enumerate(blocks):
        if idx:
            stream.write("\n")
        stream.write(block)


def render_scenario(stream: TextIO, outcome: ScenarioOutcome) -> None:
    """Write the opening blocks, two blank lines, then the closing blocks."""
    render_blocks(stream, outcome.opening)
    stream.write("\n\n")
    render_blocks(stream, outcome.closing)
