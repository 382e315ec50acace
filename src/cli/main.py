# SPDX-License-Identifier: MIT
"""Command-line interface for generating model round-trip unit tests."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Callable

import logfire

from constants import INVALID_JSON_MESSAGE
from io_utils import STDIN_MARKER, atomic_write, read_input_text
from observability import telemetry
from observability.monitoring import init_logfire
from runtime.environment import RuntimeEnv
from runtime.settings import Settings, load_settings
from utils import StreamErrorHandler

LOG_LEVELS = ["fatal", "error", "warn", "notice", "info", "debug", "trace"]

# Module logger for CLI diagnostics mirroring
logger = logging.getLogger(__name__)

CommandHandler = Callable[[argparse.Namespace], int]


def _print_version() -> None:
    """Print the installed package version."""
    try:
        pkg_version = version("model-test-generator")
    except PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
        pkg_version = "unknown"
    line = f"model-test-generator {pkg_version}"
    print(line)
    logger.info(line)


def _configure_logging(args: argparse.Namespace, settings: Settings) -> None:
    """Configure Logfire based on verbosity flags."""
    index = 2 + args.verbose - args.quiet
    index = max(0, min(len(LOG_LEVELS) - 1, index))
    init_logfire(settings.logfire_token, LOG_LEVELS[index])  # type: ignore[arg-type]


def _cmd_generate(args: argparse.Namespace) -> int:
    """Generate unit tests from a JSON sample and model source.

    Returns:
        Process exit code (0 = success, 1 = unreadable or invalid input,
        2 = both inputs on stdin).
    """
    env = RuntimeEnv.instance()
    session = env.new_session()
    if args.raw:
        session.format_output = False
    if args.type_name:
        session.default_type_name = args.type_name
    if args.json_file == STDIN_MARKER and args.model_file == STDIN_MARKER:
        print("Only one of --json-file and --model-file may read stdin", file=sys.stderr)
        return 2
    reporter = StreamErrorHandler()
    try:
        session.json_input = read_input_text(args.json_file, error_handler=reporter)
        session.model_source = (
            read_input_text(args.model_file, error_handler=reporter)
            if args.model_file
            else ""
        )
    except (FileNotFoundError, RuntimeError):
        return 1

    result = session.generate()
    if result is None:
        print(session.alert or INVALID_JSON_MESSAGE, file=sys.stderr)
        logger.error("Generation aborted: %s", session.alert)
        return 1

    if args.output_file == STDIN_MARKER:
        print(result.code)
    else:
        atomic_write(Path(args.output_file), result.code)
        logger.info("Wrote %s tests to %s", result.type_name, args.output_file)

    if args.copy:
        session.copy_to_clipboard()
        print(session.copy_status, file=sys.stderr)
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    """Run the web form until interrupted."""
    from web.app import create_app

    settings = RuntimeEnv.instance().settings
    host = args.host if args.host is not None else settings.host
    port = args.port if args.port is not None else settings.port
    logfire.info("Starting web form", host=host, port=port)
    create_app().run(host=host, port=port)
    return 0


def _cmd_theme(args: argparse.Namespace) -> int:
    """Show, toggle or set the stored theme preference."""
    session = RuntimeEnv.instance().new_session()
    session.load_theme(system_prefers_dark=False)
    if args.action == "toggle":
        session.toggle_theme()
    elif args.action in ("light", "dark"):
        session.set_theme(args.action)
    print(session.theme)
    return 0


def _add_common_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Attach the configuration and console verbosity flags to ``parser``."""
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=None,
        help="YAML file overriding config/app.yaml",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="More console logging; repeat up to four times for trace output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Less console logging; -qq shows fatal messages only",
    )
    return parser


def _add_generate_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Create the ``generate`` subcommand parser."""
    parser = subparsers.add_parser(
        "generate",
        parents=[common],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        help="Generate flutter_test round-trip tests",
        description=(
            "Generate fromJson/toJson/props tests for a Dart model from a JSON"
            " sample. The type name is taken from the first 'class <Name>' in the"
            " model source."
        ),
    )
    parser.add_argument(
        "--json-file",
        type=str,
        default=STDIN_MARKER,
        help="Path to the JSON sample, or '-' for stdin",
    )
    parser.add_argument(
        "--model-file",
        type=str,
        default=None,
        help="Path to the Dart model class source",
    )
    parser.add_argument(
        "--output-file",
        type=str,
        default=STDIN_MARKER,
        help="File to write the tests to, or '-' for stdout",
    )
    parser.add_argument(
        "--type-name",
        type=str,
        default=None,
        help="Type name used when the model source declares no class",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        default=False,
        help="Keep the template layout instead of collapsing whitespace",
    )
    parser.add_argument(
        "--copy",
        action="store_true",
        default=False,
        help="Also copy the generated tests to the clipboard",
    )
    parser.set_defaults(func=_cmd_generate)
    return parser


def _add_serve_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Create the ``serve`` subcommand parser."""
    parser = subparsers.add_parser(
        "serve",
        parents=[common],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        help="Serve the generator form over HTTP",
        description="Run the browser form for generating unit tests.",
    )
    parser.add_argument("--host", type=str, default=None, help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on")
    parser.set_defaults(func=_cmd_serve)
    return parser


def _add_theme_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
) -> argparse.ArgumentParser:
    """Create the ``theme`` subcommand parser."""
    parser = subparsers.add_parser(
        "theme",
        parents=[common],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        help="Show or change the stored theme preference",
        description="Show, toggle or set the light/dark theme used by the form.",
    )
    parser.add_argument(
        "action",
        nargs="?",
        choices=("show", "toggle", "light", "dark"),
        default="show",
        help="Theme operation",
    )
    parser.set_defaults(func=_cmd_theme)
    return parser


def _build_parser() -> argparse.ArgumentParser:
    """Return an argument parser configured with subcommands."""
    parser = argparse.ArgumentParser(
        description=(
            "Generate flutter_test boilerplate asserting that a model's JSON round"
            " trip reproduces a sample."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the model-test-generator version and exit.",
    )
    common = _add_common_args(
        argparse.ArgumentParser(
            add_help=False, formatter_class=argparse.ArgumentDefaultsHelpFormatter
        )
    )
    subparsers = parser.add_subparsers(dest="command")
    _add_generate_subparser(subparsers, common)
    _add_serve_subparser(subparsers, common)
    _add_theme_subparser(subparsers, common)
    return parser


def _execute_subcommand(args: argparse.Namespace, settings: Settings) -> int:
    """Initialise runtime and dispatch to the chosen subcommand."""
    RuntimeEnv.initialize(settings)
    _configure_logging(args, settings)
    telemetry.reset()
    handler: CommandHandler = args.func
    try:
        return handler(args)
    finally:
        telemetry.print_summary()
        logfire.force_flush()


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the requested subcommand."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.version:
        _print_version()
        return
    if args.command is None:
        parser.print_help()
        raise SystemExit(1)
    settings = load_settings(args.config)
    code = _execute_subcommand(args, settings)
    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    # Allow module to be executed as a standalone script
    main()
