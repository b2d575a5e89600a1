"""Command line interface for creating plugin projects."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import ScaffoldSettings
from .errors import ScaffoldError
from .scaffold import ProjectScaffolder
from .validation import parse_port, validate_port, validate_project_name


def build_parser(settings: ScaffoldSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create a new front-end plugin project from a template")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every copied file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="create a new plugin project")
    init_parser.add_argument("name", help="Project name, lowercase or PascalCase")
    init_parser.add_argument(
        "-p",
        "--port",
        default=str(settings.default_port),
        help="Port the dev server of the new project runs on",
    )
    init_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Parent directory in which the project directory is created",
    )
    init_parser.add_argument(
        "-t",
        "--template",
        type=Path,
        default=settings.template_dir,
        help="Template directory to copy instead of the bundled one",
    )

    check_parser = subparsers.add_parser("check", help="validate a project name and port without creating anything")
    check_parser.add_argument("name", help="Project name to validate")
    check_parser.add_argument("-p", "--port", default=str(settings.default_port), help="Port to validate")

    return parser


def _print_next_steps(project_path: Path, port: int) -> None:
    print(f"Project created at {project_path}")
    print()
    print("Next steps:")
    print()
    print(f"  cd {project_path.name}")
    print("  npm install")
    print("  npm start")
    print()
    print(f"Your plugin will be available at http://localhost:{port}")


def _handle_init(args: argparse.Namespace, settings: ScaffoldSettings) -> int:
    scaffolder = ProjectScaffolder(settings)
    destination = args.directory / args.name
    result = scaffolder.provision(args.name, args.port, destination, source=args.template)
    _print_next_steps(result.destination, parse_port(args.port))
    return 0


def _handle_check(args: argparse.Namespace) -> int:
    reason = validate_project_name(args.name) or validate_port(args.port)
    if reason is not None:
        print(f"Error: {reason}", file=sys.stderr)
        return 1
    print(f"{args.name} on port {args.port} is valid")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    settings = ScaffoldSettings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "init":
            return _handle_init(args, settings)
        if args.command == "check":
            return _handle_check(args)
    except ScaffoldError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
