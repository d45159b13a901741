"""
Base interface for runner renderers.

Defines the contract for pluggable runner rendering implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

from ..shared import RenderContext, RunnerDescriptor


class RunnerRenderer(ABC):
    """
    Abstract base class for runner renderers.

    Implementations turn one RunnerDescriptor into the source text of a
    test runner class, each in its own runner convention.
    """

    @abstractmethod
    def render(self, descriptor: RunnerDescriptor, context: RenderContext, sink: TextIO) -> None:
        """
        Render one runner and write its source text to ``sink``.

        Args:
            descriptor: The runner to render (class name, scenario, plugins)
            context: Run-wide values (package name, glue, fixed options)
            sink: Writable text stream receiving the rendered source

        Raises:
            RenderError: If the template is missing or fails to render
        """
        ...
