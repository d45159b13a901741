"""
CLI Phase 2: Prepare execution environment.

Validates inputs and resolves the output location.
No output is touched here - just checks.
"""

from __future__ import annotations

from .cli_config import GenerationConfig, UserConfig
from .errors import DirectoryNotFound
from .generator import resolve_renderer
from .logging_utils import LOG


def prepare_execution_environment(config: UserConfig) -> GenerationConfig:
    """
    Phase 2: Validate inputs and resolve the generation settings.

    - Checks the flavor is registered (before any filesystem access)
    - Checks the rerun list directory exists
    - Checks the templates directory, if one was given
    - Derives the output directory from project dir, test root and package

    Raises:
        UnknownFlavor: If the flavor is missing or unknown
        DirectoryNotFound: If the source or templates directory is missing
        ValueError: If the package name is empty
    """
    resolve_renderer(config.flavor, config.templates_dir)

    if config.source is None or not config.source.is_dir():
        LOG.error("Rerun list directory not found: %s", config.source)
        raise DirectoryNotFound(f"Rerun list directory not found or not a directory: {config.source}", path=config.source)

    if config.templates_dir is not None and not config.templates_dir.is_dir():
        LOG.error("Templates directory not found: %s", config.templates_dir)
        raise DirectoryNotFound(f"Templates directory not found: {config.templates_dir}", path=config.templates_dir)

    if not config.glue or not config.glue.strip():
        raise ValueError("Glue package must not be empty")

    generation = GenerationConfig.from_user_config(config)
    LOG.debug("Runners for %s will be written to %s", generation.source_dir, generation.output_dir)
    return generation
