"""Console entry point for the demonstration duel."""
from __future__ import annotations

import logging
import sys

from skirmish.domain.errors import SkirmishError
from skirmish.presentation.cli.config import configure_logging
from skirmish.presentation.cli.render import render_scenario
from skirmish.services import run_demo_scenario

LOG = logging.getLogger(__name__)


def main() -> int:
    """Run the scenario once and return the process exit code."""
    configure_logging()
    try:
        outcome = run_demo_scenario()
    except SkirmishError as exc:
        LOG.debug("Scenario aborted", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    render_scenario(sys.stdout, outcome)
    return 0
