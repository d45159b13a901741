"""
CLI Phase 3: Execute generation.

Runs the generation driver and turns its result into an exit code.
"""

from __future__ import annotations

from .cli_config import GenerationConfig
from .generator import GenerationDriver
from .logging_utils import LOG


def execute_pipeline(config: GenerationConfig, strict: bool = False) -> int:
    """
    Phase 3: Generate the runners.

    Returns exit code (0 = success, 2 = strict mode and some rerun list or
    runner failed). Fatal errors propagate to the caller.
    """
    result = GenerationDriver(config).run()

    for issue in result.errors:
        LOG.warning("%s", issue.describe())

    if strict and result.errors:
        LOG.error("Strict mode enabled: %d error(s) treated as failure.", len(result.errors))
        return 2

    return 0
