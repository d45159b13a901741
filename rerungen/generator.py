"""
Runner generation driver.

Clears the output directory, walks the rerun lists, splits each one into
scenario identifiers and renders one runner per identifier. Problems with
a single rerun list or a single runner are recorded in the result and the
run moves on; only an unusable source directory, output directory or
flavor aborts it.
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .cli_config import GenerationConfig
from .descriptor_builder import build_descriptor
from .errors import RenderError, RerunGenError, SourceReadError, UnknownFlavor
from .logging_utils import LOG
from .output_dir import prepare_output_dir
from .renderers import RunnerRenderer, get_renderer, list_renderers
from .scanner import RerunListScanner
from .shared import (
    DriverState,
    GenerationResult,
    RenderContext,
    RunnerDescriptor,
    emit_file_status,
    emit_summary,
)
from .splitter import read_scenarios


def resolve_renderer(flavor: Optional[str], templates_dir: Optional[Path] = None) -> RunnerRenderer:
    """
    Look up the renderer registered for ``flavor``.

    Raises:
        UnknownFlavor: If the flavor is missing or not registered
    """
    kwargs = {"templates_dir": templates_dir} if templates_dir else {}
    renderer = get_renderer(flavor, **kwargs)
    if renderer is None:
        available = ", ".join(r["name"] for r in list_renderers())
        raise UnknownFlavor(f"Unknown runner flavor {flavor!r}: expected one of {available}")
    return renderer


class GenerationDriver:
    """
    Runs one generation pass.

    The runner index is owned by the driver for the duration of run(): it
    starts at 0 and advances once per scenario handed to the renderer, so
    blank lines never consume an index and a failed render never frees one.
    """

    def __init__(
        self,
        config: GenerationConfig,
        renderer: Optional[RunnerRenderer] = None,
        scanner: Optional[Iterable[Path]] = None,
        reader: Callable[[Path], List[str]] = read_scenarios,
    ) -> None:
        self.config = config
        self.state = DriverState.Idle
        # Flavor is checked before any filesystem access, even with an injected renderer
        if renderer is None or config.flavor is not None:
            resolved = resolve_renderer(config.flavor, config.templates_dir)
            renderer = renderer or resolved
        self.renderer = renderer
        self.context = RenderContext(package_name=config.package_name, glue=config.glue)
        self._scanner = scanner
        self._read = reader

    def run(self) -> GenerationResult:
        result = GenerationResult(output_dir=self.config.output_dir)
        try:
            scanner = self._scanner
            if scanner is None:
                scanner = RerunListScanner(self.config.source_dir)

            self.state = DriverState.PreparingOutput
            prepare_output_dir(self.config.output_dir, protect=self.config.source_dir)

            self.state = DriverState.Scanning
            index = 0
            for source in scanner:
                result.files_scanned += 1
                index = self._process_file(source, index, result)
                self.state = DriverState.Scanning
        except RerunGenError:
            self.state = DriverState.Aborted
            raise

        self.state = DriverState.Done
        LOG.info(emit_summary(result))
        return result

    def _process_file(self, source: Path, index: int, result: GenerationResult) -> int:
        """Render every scenario of one rerun list; returns the next free index."""
        self.state = DriverState.Splitting
        generated_before = result.generated
        warnings: List[str] = []
        try:
            scenarios = self._read(source)
        except SourceReadError as e:
            LOG.error("%s", e)
            result.add_error(source, e)
            scenarios = []
        else:
            if not scenarios:
                result.empty_lists.append(source)
                warnings.append("no scenarios")

        LOG.debug("%s: %d scenario(s)", source.name, len(scenarios))

        for scenario in scenarios:
            self.state = DriverState.Building
            descriptor = build_descriptor(index, scenario, self.config.results_dir)
            index += 1

            self.state = DriverState.Rendering
            try:
                result.add_runner(self._write_runner(descriptor))
            except RenderError as e:
                LOG.error("%s (%s)", e, descriptor.scenario)
                result.add_error(source, e)

        LOG.info(emit_file_status(
            source, result.generated - generated_before, result.errors_for(source), warnings,
        ))
        return index

    def _write_runner(self, descriptor: RunnerDescriptor) -> Path:
        target = self.config.output_dir / descriptor.file_name
        LOG.info("%s: %s", descriptor.class_name, descriptor.scenario)
        try:
            with target.open("w", encoding="utf-8") as sink:
                self.renderer.render(descriptor, self.context, sink)
        except RenderError:
            self._discard(target)
            raise
        except Exception as e:
            LOG.debug(traceback.format_exc())
            self._discard(target)
            raise RenderError(f"Failed to write {target.name}: {type(e).__name__}: {e}", path=target) from e
        return target

    def _discard(self, target: Path) -> None:
        try:
            target.unlink(missing_ok=True)
        except OSError as e:
            LOG.warning("Could not remove partial runner %s: %s", target, e)


def generate_runners(config: GenerationConfig, renderer: Optional[RunnerRenderer] = None) -> GenerationResult:
    """Generate one runner per failed scenario found under ``config.source_dir``."""
    return GenerationDriver(config, renderer=renderer).run()
