"""
CLI Phase 1: Gather user requirements.

Parses command-line arguments and returns UserConfig dataclass.
No side effects - just parsing and conversion.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .cli_config import DEFAULT_TEST_SOURCE_ROOT, UserConfig
from .descriptor_builder import DEFAULT_RESULTS_DIR


def _handle_list_command(what: str) -> None:
    """Print the registered items of one kind."""
    if what == "flavors":
        from .renderers import list_renderers

        print("\nAvailable Flavors:")
        for renderer in list_renderers():
            print(f"  {renderer['name']:<12} {renderer['description']}")
        print()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rerungen",
        description="Generate one test runner class per failed scenario listed in rerun files.",
        epilog="""
Examples:
  Generate JUnit runners for the failures of a parallel run:
    rerungen \\
      --source target/cucumber-parallel \\
      --package com.example.failed \\
      --glue com.example.steps \\
      --flavor JUNIT

  Generate Serenity runners into another project:
    rerungen \\
      --source reports/rerun \\
      --package com.example.failed \\
      --glue com.example.steps \\
      --flavor SERENITY \\
      --project-dir ../acceptance-tests

  List the available flavors:
    rerungen --list flavors
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--list", choices=["flavors"],
                        help="List available items and exit.")

    parser.add_argument("--source",
                        help="Directory with the rerun list (.txt) files.")
    parser.add_argument("--package",
                        help="Package of the generated runners, e.g. com.example.failed")
    parser.add_argument("--glue",
                        help="Package holding the step definitions, e.g. com.example.steps")
    parser.add_argument("--flavor",
                        help="Runner flavor: JUNIT or SERENITY (case-insensitive).")

    parser.add_argument("--project-dir",
                        help="Project the runners are generated into (default: current directory).")
    parser.add_argument("--test-source-root", default=str(DEFAULT_TEST_SOURCE_ROOT),
                        help="Test source root inside the project (default: %(default)s).")
    parser.add_argument("--results-dir", default=DEFAULT_RESULTS_DIR,
                        help="Where generated runners write their json/rerun output (default: %(default)s).")
    parser.add_argument("--templates-dir",
                        help="Directory with replacement runner templates.")

    parser.add_argument("--strict", action="store_true",
                        help="Treat per-file errors as failure (exit code 2).")
    parser.add_argument("--debug", action="store_true",
                        help="Verbose logs + stack traces on failure.")
    parser.add_argument("--log-file",
                        help="Optional path to a log file. If set, all output is also written there.")
    return parser


def gather_user_requirements(argv: Optional[List[str]] = None) -> UserConfig:
    """
    Phase 1: Parse command-line arguments and return user configuration.

    No side effects - just parsing and conversion to UserConfig.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list:
        return UserConfig(list=args.list, debug=args.debug, log_file=args.log_file)

    missing = [
        flag for flag, value in (
            ("--source", args.source),
            ("--package", args.package),
            ("--glue", args.glue),
        )
        if not value
    ]
    if missing:
        parser.error("the following arguments are required: " + ", ".join(missing))

    return UserConfig(
        source=Path(args.source),
        package_name=args.package,
        glue=args.glue,
        flavor=args.flavor,
        project_dir=Path(args.project_dir) if args.project_dir else None,
        test_source_root=Path(args.test_source_root),
        results_dir=args.results_dir,
        templates_dir=Path(args.templates_dir) if args.templates_dir else None,
        strict=args.strict,
        debug=args.debug,
        log_file=args.log_file,
    )
