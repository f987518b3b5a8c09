"""gomvc command line.

Usage::

    gomvc --create ./my-service --module github.com/me/my-service
    gomvc --create ./my-service          # prompts for the module path
    gomvc --delete ./my-service
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from gomvc.config import ScaffoldConfig
from gomvc.errors import ScaffoldError
from gomvc.scaffolder import ProjectGenerator, decommission
from gomvc.utils import (
    print_error,
    print_info,
    print_success,
    print_summary_table,
    prompt_module_id,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gomvc",
        description="Create or delete a Go (Gin) MVC project skeleton",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  gomvc --create ./api --module github.com/me/api\n"
            "  gomvc --delete ./api\n"
        ),
    )
    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--create", "-create",
        metavar="PATH",
        help="Create the MVC structure at the specified path",
    )
    action.add_argument(
        "--delete", "-delete",
        metavar="PATH",
        help="Delete the MVC structure at the specified path",
    )
    parser.add_argument(
        "--module", "-m",
        default=None,
        help="Go module path for --create (prompted for if omitted)",
    )
    return parser


def _create(root: Path, module: str | None, config: ScaffoldConfig) -> bool:
    print_info("Creating MVC structure...")
    try:
        module_id = module.strip() if module is not None else prompt_module_id()
        result = ProjectGenerator(config).provision(root, module_id)
    except ScaffoldError as exc:
        print_error(f"Error setting up MVC structure: {exc}")
        return False

    print_summary_table(
        {
            "Root": str(result.root),
            "Module": result.module_id,
            "Directories created": str(len(result.created_dirs)),
            "Files written": str(len(result.written_files)),
            "Files skipped (already present)": str(len(result.skipped_files)),
        },
        title="MVC structure",
    )
    print_success("MVC structure created successfully!")
    return True


def _delete(root: Path, config: ScaffoldConfig) -> bool:
    print_info("Deleting MVC structure...")
    try:
        decommission(root, config)
    except ScaffoldError as exc:
        print_error(f"Error deleting MVC structure: {exc}")
        return False
    print_success("MVC structure deleted successfully!")
    return True


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``gomvc`` and ``python -m gomvc``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.create and not args.delete:
        parser.print_help()
        return

    try:
        config = ScaffoldConfig.from_env()
    except ValidationError as exc:
        print_error(f"Invalid gomvc configuration: {exc}")
        sys.exit(1)

    if args.create:
        ok = _create(Path(args.create), args.module, config)
    else:
        ok = _delete(Path(args.delete), config)

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
