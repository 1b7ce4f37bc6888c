"""Command-line entry point for Histogrammer."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import NoReturn, TextIO

from pydantic import ValidationError

from histogrammer import __version__
from histogrammer.core.enums import ExitCode
from histogrammer.core.errors import HistogrammerError, InvalidArgumentError
from histogrammer.infra.logging import configure_logging, get_logger, restore_logging
from histogrammer.infra.settings import HistogrammerSettings
from histogrammer.interfaces.validators import parse_count
from histogrammer.orchestration import Coordinator

logger = get_logger(__name__)

NO_INPUT_MESSAGE = "Please provide a path to a text file as an argument, --help for more details"

# Flags that take a numeric value
COUNT_FLAGS = ("-r", "-s")


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of printing usage and exiting."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentError(flag=None, message=message)


def build_parser(settings: HistogrammerSettings) -> ArgumentParser:
    """Build the argument parser.

    Flag values are kept as strings so they can be validated strictly. Help
    and version are plain flags so :func:`run` can print them to its own
    streams.

    Args:
        settings: Configuration providing the defaults shown in the help text

    Returns:
        Configured ArgumentParser
    """
    parser = ArgumentParser(
        prog="histogrammer",
        usage="%(prog)s input_file_path [OPTIONS]",
        description="Prints histogram of characters in text file at input_file_path",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        exit_on_error=False,
        epilog="""
Arguments must be positive integers.

Examples:
  # Histogram of a file with the default 10 rows, a tick every 3 rows
  histogrammer notes.txt

  # 20 rows, a tick on every 5th row
  histogrammer notes.txt -r 20 -s 5
        """.strip(),
    )

    parser.add_argument("input_file_path", nargs="?", help="path to the text file to analyse")
    parser.add_argument(
        "-r",
        dest="row_count",
        metavar="row_count",
        help=(
            "override row_count, program draws row_count rows of text-based histogram, "
            f"default = {settings.row_count}"
        ),
    )
    parser.add_argument(
        "-s",
        dest="tick_stride",
        metavar="tick_stride",
        help=f"override tick_stride, program draws a tick every tick_stride rows, default = {settings.tick_stride}",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("-h", "--help", action="store_true", help="show this help message and exit")
    parser.add_argument("--version", action="store_true", help="show version information and exit")

    return parser


def parse_arguments(parser: ArgumentParser, argv: Sequence[str]) -> argparse.Namespace:
    """Parse the command line.

    Args:
        parser: Parser from :func:`build_parser`
        argv: Arguments excluding the program name

    Returns:
        Parsed arguments

    Raises:
        InvalidArgumentError: If a flag is missing its value or the command line is malformed
    """
    try:
        return parser.parse_args(argv)
    except argparse.ArgumentError as e:
        if e.argument_name in COUNT_FLAGS:
            raise InvalidArgumentError(
                flag=e.argument_name,
                message=f"Missing argument for flag {e.argument_name}",
            ) from e
        raise InvalidArgumentError(flag=e.argument_name, message=str(e)) from e


def report_error(error: HistogrammerError, stream: TextIO, debug: bool = False) -> None:
    """Write an error for the user.

    Args:
        error: Failure to report
        stream: Destination, normally stderr
        debug: Also write the detailed reasons
    """
    response = error.to_error_response()
    logger.debug("Histogram failed", error=response.model_dump(exclude_none=True))

    stream.write(response.message + "\n")
    if response.hint:
        stream.write(response.hint + "\n")
    if debug:
        for detail in response.details or []:
            line = f"  {detail.field}: {detail.reason}" if detail.field else f"  {detail.reason}"
            if detail.suggestion:
                line += f" ({detail.suggestion})"
            stream.write(line + "\n")


def run(argv: Sequence[str] | None = None, stdout: TextIO | None = None, stderr: TextIO | None = None) -> int:
    """Run the command line and return the exit status.

    Args:
        argv: Arguments excluding the program name, ``sys.argv[1:]`` if omitted
        stdout: Stream receiving the chart, help and version
        stderr: Stream receiving logs and error messages

    Returns:
        Process exit status
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        settings = HistogrammerSettings()
    except ValidationError as e:
        stderr.write(f"Invalid configuration: {e}\n")
        return ExitCode.FAILURE

    parser = build_parser(settings)
    # stdout carries the chart, so logs go to stderr
    previous_logging = configure_logging(level=logging.WARNING, stream=stderr)
    try:
        try:
            args = parse_arguments(parser, argv)
        except InvalidArgumentError as e:
            report_error(e, stderr)
            return ExitCode.FAILURE

        if args.debug:
            configure_logging(level=logging.DEBUG, stream=stderr)

        if args.help:
            stdout.write(parser.format_help())
            return ExitCode.OK
        if args.version:
            stdout.write(f"histogrammer {__version__}\n")
            return ExitCode.OK
        if args.input_file_path is None:
            stdout.write(NO_INPUT_MESSAGE + "\n")
            return ExitCode.OK

        try:
            row_count = parse_count("-r", args.row_count) if args.row_count is not None else None
            tick_stride = parse_count("-s", args.tick_stride) if args.tick_stride is not None else None
            layout = settings.layout(row_count=row_count, tick_stride=tick_stride)

            result = Coordinator(settings=settings).run(args.input_file_path, layout)
        except HistogrammerError as e:
            report_error(e, stderr, debug=args.debug)
            return ExitCode.FAILURE

        stdout.write("".join(line + "\n" for line in result.lines))
        return ExitCode.OK
    finally:
        restore_logging(previous_logging)


def main() -> None:
    """Main entry point for the histogrammer command."""
    sys.exit(run())


if __name__ == "__main__":
    main()
