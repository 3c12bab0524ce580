"""Command line interface for the Julia package bootstrapper."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import ProjectConfig
from .errors import ScaffoldError
from .identity import IdentityProvider, git_identity
from .scaffold import ProjectScaffolder
from .template import TemplateRenderer
from .wizard import InputCollector, Prompt

BANNER = """Julia Package Bootstrapper
==========================
This will create a new Julia package with standard structure.
"""

NEXT_STEPS = """Next steps:
1. Review the generated files
2. Run 'make install' to install dependencies
3. Run 'make test' to run tests
4. Run 'make docs' to build documentation
5. Initialize git repository: git init && git add . && git commit -m 'Initial commit'
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jlfoundry",
        description="Interactively create a new Julia package",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Target directory for the package (defaults to the current directory)",
    )
    parser.add_argument(
        "--no-overwrite",
        dest="overwrite",
        action="store_false",
        help="Fail instead of replacing files that already exist",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every directory and file that is written",
    )
    return parser


def _print_summary(config: ProjectConfig) -> None:
    print()
    print(f"Generating package: {config.name}")
    print(f"Author: {config.authors}")
    print(f"Julia version: {config.runtime_version}")
    print()


def main(
    argv: Sequence[str] | None = None,
    *,
    prompt: Prompt = input,
    identity: IdentityProvider = git_identity,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(BANNER)
    collector = InputCollector(prompt=prompt, identity=identity)
    scaffolder = ProjectScaffolder(TemplateRenderer())
    target = args.directory if args.directory is not None else Path.cwd()

    try:
        config = collector.collect()
        _print_summary(config)
        print("Creating files...")
        project_path = scaffolder.create(config, target, overwrite=args.overwrite)
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Package {config.name} created successfully at {project_path}")
    print()
    print(NEXT_STEPS)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
