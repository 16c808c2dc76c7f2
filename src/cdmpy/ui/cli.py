# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from cdmpy.app import load_project
from cdmpy.config import configure_logging, verbosity_to_level
from cdmpy.domain.resolution import keep_first, keep_newest

from .prompt import prompt_policy

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from cdmpy.app import LoadedProject
    from cdmpy.domain.resolution import ConflictPolicy

log = logging.getLogger(__name__)

MERGE_POLICIES = ("prompt", "keep-first", "keep-newest")


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cdmpy",
        description="Resolve a Connection Diagram Manager project into its library and project",
    )
    parser.add_argument(
        "project_dir",
        type=Path,
        help="Project directory, searched recursively for .yaml/.yml data files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show debug output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Only show errors (-qq: only critical errors); overrides --verbose",
    )
    parser.add_argument(
        "-n",
        "--no-default-libs",
        action="store_true",
        help="Do not load the default libraries",
    )
    parser.add_argument(
        "--merge-policy",
        choices=MERGE_POLICIES,
        default="prompt",
        help="How to resolve conflicting redefinitions (default: %(default)s)",
    )
    return parser.parse_args(list(argv))


def _select_policy(name: str) -> ConflictPolicy:
    if name == "keep-first":
        return keep_first
    if name == "keep-newest":
        return keep_newest
    if name == "prompt":
        return prompt_policy()
    raise ValueError(f"Unsupported merge policy: {name}")


def _print_summary(loaded: LoadedProject) -> None:
    print(f"Read {len(loaded.files)} data file(s)")
    print("Library:")
    for kind, count in loaded.library.counts().items():
        print(f"  {kind.label}: {count}")
    print("Project:")
    for kind, count in loaded.project.counts().items():
        print(f"  {kind.label}: {count}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(
            level=verbosity_to_level(parsed_args.verbose, parsed_args.quiet), force=True
        )
        decide = _select_policy(parsed_args.merge_policy)
        project_dir: Path = parsed_args.project_dir
        if not project_dir.is_dir():
            raise ValueError(f"Provided filepath not a directory {project_dir}")  # noqa: TRY301
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        loaded = load_project(
            project_dir,
            decide=decide,
            use_default_libraries=not parsed_args.no_default_libs,
        )
    except Exception:
        log.exception("Failed to load project %s", project_dir)
        sys.exit(1)

    _print_summary(loaded)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point: load ``.env``, install the SIGINT handler, run."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
