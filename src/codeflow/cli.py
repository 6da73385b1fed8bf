import argparse
import os
import sys
from pathlib import Path

from loguru import logger

from . import SUPPORTED_LANGUAGES, __version__
from .codeviews.CFG.CFG_driver import CFGDriver
from .exceptions import CodeflowError, UsageError
from .tree_parser.cpp_parser import CppParser

LOG_LEVEL_ENV = "CODEFLOW_LOG_LEVEL"


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that reports bad invocations as UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser():
    parser = ArgumentParser(
        prog="codeflow",
        description="Render the control flow of a C or C++ source file as a Mermaid flowchart.",
    )
    parser.add_argument("source", help="path to the source file")
    parser.add_argument(
        "--language",
        choices=SUPPORTED_LANGUAGES,
        help="source language (default: inferred from the file extension)",
    )
    parser.add_argument("--json", metavar="PATH", help="also write the graph as node-link json")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging():
    """Replace loguru's default sink with one on stderr at CODEFLOW_LOG_LEVEL, WARNING when unset or unknown."""
    level = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    try:
        logger.level(level)
    except ValueError:
        level = "WARNING"
    logger.remove()
    return logger.add(sys.stderr, level=level)


def infer_language(path):
    if Path(path).suffix.lower() in CppParser.extensions:
        return "cpp"
    return "c"


def main(argv=None):
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        logger.debug(f"Bad invocation: {e}")
        parser.print_usage(sys.stdout)
        return 2

    src_language = args.language or infer_language(args.source)
    try:
        src_code = Path(args.source).read_text(encoding="utf-8")
    except OSError as e:
        logger.debug(f"Cannot read {args.source}: {e}")
        print(f"error: cannot read {args.source}: {e.strerror or e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        logger.debug(f"Cannot decode {args.source}: {e}")
        print(f"error: {args.source} is not valid UTF-8 (byte {e.start})", file=sys.stderr)
        return 1

    try:
        driver = CFGDriver(src_language, src_code, json_file=args.json)
    except CodeflowError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(driver.flowchart)
    return 0


def run():
    """Console entry point: configures logging, then runs main()."""
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
