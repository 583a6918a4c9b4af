"""Command-line surface for makefeature.

Usage::

    makefeature make Order
    makefeature --base-path ./my-app make Order --type API
    makefeature make Order --type Resource --dry-run
    makefeature publish-stubs --force
    makefeature --base-path ./my-app init-config
    makefeature --config ./my-app/makefeature.json make Order --type API
"""

from __future__ import annotations

import argparse
from pathlib import Path

from pydantic import ValidationError
from rich.prompt import Prompt

from makefeature import __version__
from makefeature.config import Config
from makefeature.errors import (
    FeatureExistsError,
    InvalidVariantError,
    TemplateNotFound,
)
from makefeature.scaffolder import ControllerVariant, Scaffolder, publish_stubs
from makefeature.utils import console, print_error, print_success, print_summary_table

CONTROLLER_PROMPT = "What type of controller would you like to create?"
CONFIG_FILENAME = "makefeature.json"


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with ``make``, ``publish-stubs`` and ``init-config`` sub-commands."""
    parser = argparse.ArgumentParser(
        prog="makefeature",
        description="Create a new feature structure",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  makefeature make Order\n"
            "  makefeature make Order --type API\n"
            "  makefeature publish-stubs\n"
            "  makefeature init-config\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--base-path",
        default=None,
        help="Application root (default: $MAKEFEATURE_BASE_PATH or the current directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration written by init-config (replaces environment settings)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    make = sub.add_parser("make", help="Scaffold a new feature")
    make.add_argument("name", help="Feature name, used verbatim (e.g. Order)")
    make.add_argument(
        "--type", "-t",
        dest="controller_type",
        default=None,
        help=f"Controller type: {', '.join(ControllerVariant.choices())} (prompted if omitted)",
    )
    make.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be generated without writing anything",
    )

    publish = sub.add_parser("publish-stubs", help="Copy controller stubs into the application")
    publish.add_argument("--force", action="store_true", help="Overwrite published stubs")

    init = sub.add_parser("init-config", help="Write the effective configuration as JSON")
    init.add_argument(
        "path",
        nargs="?",
        default=None,
        help=f"Destination (default: <base-path>/{CONFIG_FILENAME})",
    )

    return parser


def _choose_variant(value: str | None) -> ControllerVariant:
    if value is not None:
        return ControllerVariant.parse(value)
    answer = Prompt.ask(
        CONTROLLER_PROMPT,
        choices=ControllerVariant.choices(),
        default=ControllerVariant.RESOURCE.value,
        console=console,
    )
    return ControllerVariant.parse(answer)


def _make(config: Config, args: argparse.Namespace) -> int:
    try:
        variant = _choose_variant(args.controller_type)
    except InvalidVariantError as exc:
        print_error(str(exc))
        return 1

    scaffolder = Scaffolder(config)
    try:
        if args.dry_run:
            artifacts = scaffolder.preview(args.name, variant)
            print_summary_table(
                {artifact.path: artifact.label for artifact in artifacts},
                title=f"{args.name} ({variant.value})",
            )
            return 0
        scaffolder.scaffold(args.name, variant)
    except (FeatureExistsError, TemplateNotFound, OSError) as exc:
        print_error(str(exc))
        return 1
    return 0


def _publish(config: Config, args: argparse.Namespace) -> int:
    written = publish_stubs(config, force=args.force)
    print_success(f"Published {len(written)} stub(s) to {config.stub_path}")
    return 0


def _init_config(config: Config, args: argparse.Namespace) -> int:
    target = Path(args.path) if args.path else config.base_path / CONFIG_FILENAME
    config.save(target)
    print_success(f"Configuration written to {target}")
    return 0


def _load_config(args: argparse.Namespace) -> Config:
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    if args.base_path:
        config = config.model_copy(update={"base_path": Path(args.base_path)})
    return config


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.  Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = _load_config(args)
    except (OSError, ValidationError) as exc:
        print_error(f"Cannot load configuration: {exc}")
        return 1

    if args.command == "make":
        return _make(config, args)
    if args.command == "init-config":
        return _init_config(config, args)
    return _publish(config, args)
