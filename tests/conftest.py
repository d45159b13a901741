import sys
from pathlib import Path
from typing import Dict

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rerungen.cli_config import GenerationConfig  # noqa: E402


@pytest.fixture
def make_rerun_dir(tmp_path: Path):
    def _make(files: Dict[str, str], name: str = "rerun") -> Path:
        source = tmp_path / name
        source.mkdir(parents=True, exist_ok=True)
        for file_name, content in files.items():
            (source / file_name).write_text(content, encoding="utf-8")
        return source

    return _make


@pytest.fixture
def make_config(tmp_path: Path):
    def _make(source_dir: Path, flavor: str = "JUNIT", **overrides) -> GenerationConfig:
        values = dict(
            source_dir=source_dir,
            output_dir=tmp_path / "project" / "src" / "test" / "java" / "com" / "example" / "failed",
            package_name="com.example.failed",
            glue="com.example.steps",
            flavor=flavor,
        )
        values.update(overrides)
        return GenerationConfig(**values)

    return _make
