"""CLI entrypoints for wikinav commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from .config import ConfigError, load_config
from .logging import configure_logging
from .orchestrator import (
    OUTPUT_FORMATS,
    NavigationBuilder,
    NavigationResult,
    build_nav_menu,
    serialize,
    sidebar_key,
    write_output,
)
from .scanner import NavigationError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    _add_verbose_option(parser, suppress_default=True)
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the docs root (defaults to current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to .wikinav.yml (defaults to <path>/.wikinav.yml).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikinav",
        description="Generate sidebar navigation for a documentation wiki.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only show warnings and errors on the console.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write a DEBUG-level log to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Build the sidebar mapping for all configured topics.",
    )
    _add_common_options(build_parser)
    build_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write output to this file instead of stdout.",
    )
    build_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (defaults to the --out suffix, else json).",
    )
    build_parser.add_argument(
        "--nav",
        action="store_true",
        help="Also emit the top navigation menu alongside the sidebar.",
    )
    build_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when a configured topic produces no entries.",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Report entry counts per topic and fail on empty topics.",
    )
    _add_common_options(check_parser)

    return parser


def _run_build(args: argparse.Namespace) -> tuple[NavigationResult, list[dict[str, Any]]]:
    root = Path(args.path)
    config = load_config(args.config or root)
    # check reports every count before failing on empty topics itself.
    strict = False if args.command == "check" else args.strict
    result = NavigationBuilder().build(config, root=root, strict=strict)
    nav = build_nav_menu(result, config.sections, extension=config.extension)
    return result, nav


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for wikinav commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )

    try:
        result, nav = _run_build(args)
    except ConfigError as exc:
        parser.exit(1, f"Invalid configuration: {exc}\n")
    except NavigationError as exc:
        parser.exit(1, f"wikinav {args.command} failed: {exc}\n")

    if args.command == "build":
        payload: Any = result.sidebar()
        if args.nav:
            payload = {"sidebar": payload, "nav": nav}
        if args.out is not None:
            write_output(payload, args.out, args.format)
            print(f"Navigation written to {_relativize(args.out)}")
        else:
            sys.stdout.write(serialize(payload, args.format or "json"))
    elif args.command == "check":
        for topic in result.topics:
            count = len(result.groups[topic.path].items)
            print(f"{sidebar_key(topic.path)}: {count} entries")
        if result.empty_topics:
            parser.exit(
                1, "Empty topics: " + ", ".join(result.empty_topics) + "\n"
            )
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
