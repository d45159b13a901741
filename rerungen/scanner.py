"""
Rerun-list discovery.

Lists the rerun-list files of a source directory one at a time. The
scanner can be iterated again to rescan the directory; an iteration in
progress cannot be resumed.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Union

from .errors import DirectoryNotFound
from .shared import RERUN_LIST_SUFFIX


class RerunListScanner:
    """
    Lazy, restartable sequence of rerun-list files in a directory.

    Only direct children whose name ends with the rerun-list suffix are
    produced. Order follows the filesystem and is not guaranteed stable.
    """

    def __init__(self, source_dir: Union[str, Path], suffix: str = RERUN_LIST_SUFFIX) -> None:
        self.source_dir = Path(source_dir)
        self.suffix = suffix
        self.check_source_dir()

    def _unlistable(self, cause: OSError) -> DirectoryNotFound:
        return DirectoryNotFound(
            f"Rerun list directory cannot be listed: {self.source_dir}: {cause}",
            path=self.source_dir,
        )

    def check_source_dir(self) -> None:
        """Fail unless the source directory exists and can be listed."""
        if not self.source_dir.is_dir():
            raise DirectoryNotFound(
                f"Rerun list directory not found or not a directory: {self.source_dir}",
                path=self.source_dir,
            )
        try:
            with os.scandir(self.source_dir):
                pass
        except OSError as e:
            raise self._unlistable(e) from e

    def __iter__(self) -> Iterator[Path]:
        try:
            entries = os.scandir(self.source_dir)
        except OSError as e:
            raise self._unlistable(e) from e

        with entries:
            for entry in entries:
                if entry.name.endswith(self.suffix) and entry.is_file():
                    yield Path(entry.path)
