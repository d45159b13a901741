"""
CLI configuration data structures.

Defines the runner flavors, the UserConfig gathered from the command
line and the resolved GenerationConfig handed to the driver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .descriptor_builder import DEFAULT_RESULTS_DIR

DEFAULT_TEST_SOURCE_ROOT = Path("src/test/java")


class RunnerFlavor(str, Enum):
    """Built-in runner conventions."""

    JUNIT = "JUNIT"        # Plain Cucumber JUnit runner
    SERENITY = "SERENITY"  # Cucumber runner under Serenity BDD


def package_path(package_name: str) -> Path:
    """Turn a dotted package name into nested directory segments."""
    segments = [segment for segment in package_name.strip().split(".") if segment]
    if not segments:
        raise ValueError(f"Invalid package name: {package_name!r}")
    return Path(*segments)


@dataclass
class UserConfig:
    """Configuration gathered from user input."""

    source: Optional[Path] = None
    package_name: Optional[str] = None
    glue: Optional[str] = None
    flavor: Optional[str] = None

    project_dir: Optional[Path] = None
    test_source_root: Path = DEFAULT_TEST_SOURCE_ROOT
    results_dir: str = DEFAULT_RESULTS_DIR
    templates_dir: Optional[Path] = None

    # Execution settings
    strict: bool = False
    debug: bool = False
    log_file: Optional[str] = None
    list: Optional[str] = None


@dataclass(frozen=True)
class GenerationConfig:
    """Resolved, read-only settings for one generation run."""

    source_dir: Path
    output_dir: Path
    package_name: str
    glue: str
    flavor: str
    results_dir: str = DEFAULT_RESULTS_DIR
    templates_dir: Optional[Path] = None

    @classmethod
    def from_user_config(cls, config: UserConfig) -> "GenerationConfig":
        project_dir = config.project_dir or Path.cwd()
        return cls(
            source_dir=config.source,
            output_dir=project_dir / config.test_source_root / package_path(config.package_name),
            package_name=config.package_name.strip(),
            glue=config.glue,
            flavor=config.flavor,
            results_dir=config.results_dir,
            templates_dir=config.templates_dir,
        )
