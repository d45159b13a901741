"""
Runner descriptor construction.

Every runner gets its own index, and the index flows into the class
name and into every output-plugin directive so that concurrently
executed runners write to separate result and rerun artifacts.
"""

from __future__ import annotations

from typing import Tuple

from .shared import RUNNER_CLASS_PREFIX, RunnerDescriptor

DEFAULT_RESULTS_DIR = "target/cucumber-parallel"
ARTIFACT_PREFIX = "Failed"


def runner_class_name(index: int) -> str:
    return f"{RUNNER_CLASS_PREFIX}{index}"


def plugin_directives(index: int, results_dir: str = DEFAULT_RESULTS_DIR) -> Tuple[str, ...]:
    """JSON result and rerun-list plugin directives for runner ``index``."""
    results_dir = results_dir.rstrip("/")
    return (
        f"json:{results_dir}/{ARTIFACT_PREFIX}{index}.json",
        f"rerun:{results_dir}/{ARTIFACT_PREFIX}{index}.txt",
    )


def build_descriptor(index: int, scenario: str, results_dir: str = DEFAULT_RESULTS_DIR) -> RunnerDescriptor:
    return RunnerDescriptor(
        index=index,
        class_name=runner_class_name(index),
        scenario=scenario.strip(),
        output_plugins=plugin_directives(index, results_dir),
    )
