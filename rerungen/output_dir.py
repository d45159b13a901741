"""
Output directory preparation.

The runner directory is fully regenerable: whatever a previous run (or
anything else) left there is removed before new runners are written.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional

from .errors import OutputPrepError
from .logging_utils import LOG


def _is_within(path: Path, parent: Path) -> bool:
    try:
        path.resolve().relative_to(parent.resolve())
        return True
    except ValueError:
        return False


def prepare_output_dir(output_dir: Path, protect: Optional[Path] = None) -> Path:
    """
    Create ``output_dir`` (with parents) or empty it if it already exists.

    Nested directories are removed as well. ``protect`` names a path that
    must survive, typically the rerun-list directory; if it lies inside
    ``output_dir`` nothing is touched.

    Raises:
        OutputPrepError: If the directory cannot be created or cleared
    """
    if protect is not None and _is_within(protect, output_dir):
        raise OutputPrepError(
            f"Refusing to clear {output_dir}: it contains the rerun list directory {protect}",
            path=output_dir,
        )

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputPrepError(f"Cannot create output directory {output_dir}: {e}", path=output_dir) from e

    if not output_dir.is_dir():
        raise OutputPrepError(f"Output path is not a directory: {output_dir}", path=output_dir)

    removed = 0
    try:
        for child in list(output_dir.iterdir()):
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
            removed += 1
    except OSError as e:
        raise OutputPrepError(f"Cannot clear output directory {output_dir}: {e}", path=output_dir) from e

    if removed:
        LOG.debug("Removed %d stale entries from %s", removed, output_dir)
    return output_dir
