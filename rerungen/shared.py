"""
Shared models.

Defines the data structures passed between the scanner, the descriptor
builder, the renderers and the generation driver, plus the status line
helpers used when logging a run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .errors import RerunGenError
from .logging_utils import fmt_issues

RUNNER_CLASS_PREFIX = "FailedRunner"
RUNNER_FILE_SUFFIX = ".java"
RERUN_LIST_SUFFIX = ".txt"

# ------------------------- Models -------------------------

@dataclass(frozen=True)
class RunnerDescriptor:
    """One runner to generate: its index, class name, scenario and plugins."""
    index: int
    class_name: str
    scenario: str
    output_plugins: Tuple[str, ...]

    @property
    def file_name(self) -> str:
        return self.class_name + RUNNER_FILE_SUFFIX


@dataclass(frozen=True)
class RenderContext:
    """Run-wide values every runner template receives."""
    package_name: str
    glue: str
    strict: bool = True
    monochrome: bool = True


@dataclass(frozen=True)
class FileIssue:
    """A non-fatal error recorded against one rerun list."""
    source: Path
    error: RerunGenError

    @property
    def kind(self) -> str:
        return self.error.kind

    def describe(self) -> str:
        return f"{self.source.name}: {self.kind}: {self.error}"


@dataclass
class GenerationResult:
    """
    Outcome of one generation run.

    generated counts runner files that were fully written; runners lists
    their paths in the order they were produced. errors keeps every
    recorded FileIssue in the order it happened. empty_lists names rerun
    lists that were read but held no scenario.
    """
    output_dir: Optional[Path] = None
    generated: int = 0
    runners: List[Path] = field(default_factory=list)
    errors: List[FileIssue] = field(default_factory=list)
    empty_lists: List[Path] = field(default_factory=list)
    files_scanned: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_runner(self, path: Path) -> None:
        self.runners.append(path)
        self.generated += 1

    def add_error(self, source: Path, error: RerunGenError) -> None:
        self.errors.append(FileIssue(source=source, error=error))

    def errors_for(self, source: Path) -> List[FileIssue]:
        return [issue for issue in self.errors if issue.source == source]


class DriverState(str, Enum):
    Idle = "Idle"
    PreparingOutput = "PreparingOutput"
    Scanning = "Scanning"
    Splitting = "Splitting"
    Building = "Building"
    Rendering = "Rendering"
    Done = "Done"
    Aborted = "Aborted"


# ------------------------- Status lines -------------------------

def get_status_icon(generated: int, issues: List[FileIssue], warnings: Sequence[str] = ()) -> str:
    if issues and generated:
        return "⚠️ "
    if issues:
        return "❌"
    if warnings:
        return "⚠️ "
    if generated:
        return "✅"
    return "➖"


def emit_file_status(
    source: Path,
    generated: int,
    issues: List[FileIssue],
    warnings: Sequence[str] = (),
) -> str:
    errors = [f"{issue.kind}: {issue.error}" for issue in issues]
    return (
        f"{get_status_icon(generated, issues, warnings)} "
        f"{source.name} | {generated} runner(s) | "
        f"{fmt_issues(errors, list(warnings))}"
    )


def emit_summary(result: GenerationResult) -> str:
    return (
        "📊 Generated %d runner(s) from %d rerun list(s), %d error(s). Output in: %s"
        % (result.generated, result.files_scanned, len(result.errors), result.output_dir)
    )
