"""
Runner rendering interfaces and implementations.

This module provides pluggable runner renderers, one per flavor.
"""

from .base import RunnerRenderer
from .jinja_renderer import JinjaRunnerRenderer, JunitRunnerRenderer, SerenityRunnerRenderer
from .renderer_registry import (
    register_renderer,
    get_renderer,
    list_renderers,
    unregister_renderer,
)
from ..cli_config import RunnerFlavor

register_renderer(RunnerFlavor.JUNIT.value, JunitRunnerRenderer)
register_renderer(RunnerFlavor.SERENITY.value, SerenityRunnerRenderer)

__all__ = [
    "RunnerRenderer",
    "JinjaRunnerRenderer",
    "JunitRunnerRenderer",
    "SerenityRunnerRenderer",
    "register_renderer",
    "get_renderer",
    "list_renderers",
    "unregister_renderer",
]
