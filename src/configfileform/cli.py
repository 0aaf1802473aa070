"""Command-line interface for configfileform.

Renders a configuration file as an HTML form, or applies a CGI-style
request string to it and writes the updated configuration.
"""

from __future__ import annotations

import argparse
import logging
import platform
import sys
from pathlib import Path

from configfileform import __version__

logger = logging.getLogger(__name__)

PROG = "configfileform"

USAGE = (
    f"{PROG} [OPTIONS ...] [CONFIGFILE]\n"
    f"       {PROG} [OPTIONS ...] -r DATA [CONFIGFILE]"
)


def version_info() -> str:
    """Version line plus the interpreter and install location."""
    location = Path(__file__).resolve().parent
    return (
        f"{PROG} {__version__}\n"
        f"Python {platform.python_version()} ({platform.python_implementation()}), installed in {location}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=USAGE,
        description="Generate an HTML form from a config file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=version_info(),
        help="Show version",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Be more verbose (repeat to log decoded request parameters)",
    )
    parser.add_argument(
        "-o", "--out",
        type=Path,
        default=None,
        metavar="FILE",
        help="Write output to FILE",
    )
    parser.add_argument(
        "-r", "--request",
        type=str,
        default=None,
        metavar="REQURI",
        help="Decode REQURI and apply to input",
    )
    parser.add_argument(
        "-p", "--print",
        dest="print_param",
        type=str,
        default=None,
        metavar="NAME",
        help="Print the decoded request parameter NAME (requires --request)",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML settings file (default: configfileform.yaml)",
    )
    parser.add_argument(
        "configfile",
        nargs="?",
        type=Path,
        default=None,
        metavar="CONFIGFILE",
        help="Read the configuration from CONFIGFILE instead of stdin",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.print_param is not None and args.request is None:
        parser.error("-p/--print requires -r/--request")
    return args


def _build_renderer(settings, args):
    from configfileform.codecs.uri import parse_request
    from configfileform.domain.models import RenderMode
    from configfileform.render.form import FormRenderer
    from configfileform.render.request import RequestRenderer

    mode = RenderMode.FORM if args.request is None else RenderMode.REQUEST
    logger.debug("Running in %s mode", mode.value)
    if mode == RenderMode.FORM:
        return FormRenderer(settings.form), None
    params = parse_request(args.request)
    return RequestRenderer(params), params


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the configfileform CLI."""
    args = parse_args(argv)

    from configfileform.config.settings import load_settings
    from configfileform.stream import StreamOpenError, open_input, open_output, read_lines, run
    from configfileform.utils.logging import level_for_verbosity, setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = level_for_verbosity(args.verbose)

    setup_logging(settings.logging)

    try:
        out = open_output(args.out)
    except StreamOpenError as e:
        logger.error("%s", e)
        return 1
    try:
        source = open_input(args.configfile)
    except StreamOpenError as e:
        logger.error("%s", e)
        if out is not sys.stdout:
            out.close()
        return 1

    try:
        renderer, params = _build_renderer(settings, args)
        if params is not None and args.print_param is not None:
            out.write(params.lookup(args.print_param) + "\n")
        run(read_lines(source), renderer, out)
    except OSError as e:
        logger.error("I/O failed: %s", e.strerror or e)
        return 1
    finally:
        if source is not sys.stdin:
            source.close()
        if out is not sys.stdout:
            out.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
