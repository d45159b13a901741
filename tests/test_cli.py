"""Tests for the command-line interface."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from rerungen import cli, cli_gather
from rerungen.cli_config import GenerationConfig, UserConfig, package_path
from rerungen.cli_prepare import prepare_execution_environment
from rerungen.errors import DirectoryNotFound, UnknownFlavor


def _args(source: Path, project: Path, *extra: str):
    return [
        "--source", str(source),
        "--package", "com.example.failed",
        "--glue", "com.example.steps",
        "--project-dir", str(project),
        *extra,
    ]


class TestGatherUserRequirements:
    """Tests for phase 1 argument parsing."""

    def test_parses_required_options(self, tmp_path: Path):
        """Required options land in UserConfig."""
        config = cli_gather.gather_user_requirements(_args(tmp_path / "rerun", tmp_path, "--flavor", "JUNIT"))
        assert config.source == tmp_path / "rerun"
        assert config.package_name == "com.example.failed"
        assert config.glue == "com.example.steps"
        assert config.flavor == "JUNIT"
        assert config.project_dir == tmp_path
        assert config.test_source_root == Path("src/test/java")
        assert config.results_dir == "target/cucumber-parallel"
        assert config.strict is False

    def test_optional_settings(self, tmp_path: Path):
        """Optional settings are parsed into their fields."""
        config = cli_gather.gather_user_requirements(_args(
            tmp_path, tmp_path,
            "--flavor", "serenity",
            "--test-source-root", "it/java",
            "--results-dir", "build/reruns",
            "--templates-dir", str(tmp_path / "tpl"),
            "--strict", "--debug",
        ))
        assert config.test_source_root == Path("it/java")
        assert config.results_dir == "build/reruns"
        assert config.templates_dir == tmp_path / "tpl"
        assert config.strict and config.debug

    def test_missing_required_option_exits(self, capsys):
        """Missing --source/--package/--glue is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            cli_gather.gather_user_requirements(["--flavor", "JUNIT"])
        assert exc_info.value.code == 2
        assert "--source" in capsys.readouterr().err

    def test_flavor_is_not_an_argparse_requirement(self, tmp_path: Path):
        """A missing flavor is left for the UnknownFlavor check."""
        config = cli_gather.gather_user_requirements(_args(tmp_path, tmp_path))
        assert config.flavor is None

    def test_list_needs_no_other_options(self):
        """--list flavors works on its own."""
        config = cli_gather.gather_user_requirements(["--list", "flavors"])
        assert config.list == "flavors"

    def test_list_flavors_output(self, capsys):
        """--list flavors prints the registered flavors."""
        cli_gather._handle_list_command("flavors")
        out = capsys.readouterr().out
        assert "Available Flavors" in out
        assert "JUNIT" in out
        assert "SERENITY" in out


class TestPrepareExecutionEnvironment:
    """Tests for phase 2 validation."""

    def test_resolves_output_dir_from_package(self, tmp_path: Path):
        """Package segments become directories under the test source root."""
        source = tmp_path / "rerun"
        source.mkdir()
        config = UserConfig(
            source=source, package_name="com.example.failed", glue="com.example.steps",
            flavor="JUNIT", project_dir=tmp_path,
        )
        generation = prepare_execution_environment(config)
        assert isinstance(generation, GenerationConfig)
        assert generation.output_dir == tmp_path / "src" / "test" / "java" / "com" / "example" / "failed"
        assert not generation.output_dir.exists()

    def test_unknown_flavor_checked_first(self, tmp_path: Path):
        """An unknown flavor is reported even when the source is missing too."""
        config = UserConfig(source=tmp_path / "missing", package_name="a", glue="b", flavor="TESTNG")
        with pytest.raises(UnknownFlavor):
            prepare_execution_environment(config)

    def test_missing_source(self, tmp_path: Path):
        """A missing source directory is DirectoryNotFound."""
        config = UserConfig(source=tmp_path / "missing", package_name="a", glue="b", flavor="JUNIT")
        with pytest.raises(DirectoryNotFound):
            prepare_execution_environment(config)

    def test_missing_templates_dir(self, tmp_path: Path):
        """A templates directory that does not exist is rejected."""
        config = UserConfig(
            source=tmp_path, package_name="a", glue="b", flavor="JUNIT",
            templates_dir=tmp_path / "nope",
        )
        with pytest.raises(DirectoryNotFound):
            prepare_execution_environment(config)

    def test_empty_glue_rejected(self, tmp_path: Path):
        """Glue must not be blank."""
        config = UserConfig(source=tmp_path, package_name="a", glue="  ", flavor="JUNIT")
        with pytest.raises(ValueError, match="Glue"):
            prepare_execution_environment(config)


class TestPackagePath:
    """Tests for package_path()."""

    def test_dotted_name(self):
        assert package_path("com.example.failed") == Path("com/example/failed")

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError):
            package_path(" . ")


class TestMain:
    """End-to-end tests for main()."""

    def test_generates_runners(self, tmp_path: Path, make_rerun_dir):
        """A normal run writes runners and exits 0."""
        source = make_rerun_dir({"1.txt": "features/a.feature:3\nfeatures/b.feature:9\n"})
        code = cli.main(_args(source, tmp_path / "project", "--flavor", "JUNIT"))
        out = tmp_path / "project" / "src" / "test" / "java" / "com" / "example" / "failed"
        assert code == 0
        assert sorted(p.name for p in out.iterdir()) == ["FailedRunner0.java", "FailedRunner1.java"]

    def test_missing_source_exits_1(self, tmp_path: Path):
        """Fatal errors exit 1 and write nothing."""
        code = cli.main(_args(tmp_path / "missing", tmp_path / "project", "--flavor", "JUNIT"))
        assert code == 1
        assert not (tmp_path / "project").exists()

    def test_unknown_flavor_exits_1(self, tmp_path: Path, make_rerun_dir):
        """An unknown flavor exits 1."""
        source = make_rerun_dir({"1.txt": "a\n"})
        assert cli.main(_args(source, tmp_path / "project", "--flavor", "TESTNG")) == 1
        assert not (tmp_path / "project").exists()

    def test_per_file_errors_tolerated(self, tmp_path: Path, make_rerun_dir):
        """Without --strict, a per-file error still exits 0."""
        source = make_rerun_dir({"1.txt": "a\n"})
        (source / "2.txt").write_bytes(b"\xff\xfe")
        assert cli.main(_args(source, tmp_path / "project", "--flavor", "JUNIT")) == 0

    def test_strict_mode_exits_2(self, tmp_path: Path, make_rerun_dir):
        """With --strict, a per-file error exits 2."""
        source = make_rerun_dir({"1.txt": "a\n"})
        (source / "2.txt").write_bytes(b"\xff\xfe")
        assert cli.main(_args(source, tmp_path / "project", "--flavor", "JUNIT", "--strict")) == 2

    def test_list_flavors(self, capsys):
        """main() handles --list and exits 0."""
        assert cli.main(["--list", "flavors"]) == 0
        assert "SERENITY" in capsys.readouterr().out

    def test_debug_logs_traceback(self, tmp_path: Path, caplog):
        """--debug adds the stack trace to fatal error logs."""
        caplog.set_level(logging.ERROR, logger="rerungen")
        code = cli.main(_args(tmp_path / "missing", tmp_path, "--flavor", "JUNIT", "--debug"))
        assert code == 1
        assert "Traceback" in caplog.text

    def test_log_file(self, tmp_path: Path, make_rerun_dir):
        """--log-file receives the run's log lines."""
        source = make_rerun_dir({"1.txt": "features/a.feature\n"})
        log_file = tmp_path / "logs" / "rerungen.log"
        try:
            code = cli.main(_args(source, tmp_path / "project", "--flavor", "JUNIT", "--log-file", str(log_file)))
            assert code == 0
            for handler in logging.root.handlers:
                handler.flush()
            assert "FailedRunner0: features/a.feature" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in list(logging.root.handlers):
                if isinstance(handler, logging.FileHandler):
                    logging.root.removeHandler(handler)
                    handler.close()

    def test_unexpected_error_exits_1(self, tmp_path: Path, make_rerun_dir):
        """Unexpected exceptions are logged and exit 1."""
        source = make_rerun_dir({"1.txt": "a\n"})
        with patch("rerungen.cli.execute_pipeline", side_effect=RuntimeError("boom")):
            assert cli.main(_args(source, tmp_path, "--flavor", "JUNIT")) == 1
