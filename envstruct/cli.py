"""
envstruct Command Line

Usage:
    envstruct inspect config.go Config

Prints the struct metadata as JSON for downstream generators.
"""

import argparse
import json
import sys
from typing import Optional

from envstruct import __version__
from envstruct.ast.extractors import get_extractor
from envstruct.ast.models import TypeDefinition
from envstruct.ast.parser import get_parser
from envstruct.configs import get_full_config, get_logger, setup_logging
from envstruct.exceptions import ConfigurationError, ParseError

logger = get_logger("cli")

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envstruct",
        description="Extract Go struct metadata for environment-variable loaders",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect = subparsers.add_parser("inspect", help="Print struct metadata as JSON")
    inspect.add_argument("file", help="Go source file")
    inspect.add_argument("type_name", metavar="type", help="Struct type name")
    inspect.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    inspect.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def run_inspect(file_name: str, type_name: str, indent: int) -> int:
    """Parse one struct type and print it; returns the process exit code."""
    parser = get_parser()
    if not parser.is_supported(file_name):
        print(f"error: unsupported file type: {file_name} (expected .go)", file=sys.stderr)
        return EXIT_ERROR

    try:
        tree, _ = parser.parse_file(file_name)
    except OSError as e:
        print(f"error: cannot read {file_name}: {e.strerror or e}", file=sys.stderr)
        return EXIT_ERROR
    except ParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    extractor = get_extractor("go")
    type_def = TypeDefinition(type_name, file_name=file_name)
    type_def.assign(extractor.locate(tree, type_name))

    if not type_def.fields:
        available = extractor.list_struct_types(tree)
        if type_def.found:
            message = f"struct {type_name} in {file_name} has no fields"
        else:
            message = f"struct {type_name} not found in {file_name}"
        if available and not type_def.found:
            message += f" (available: {', '.join(available)})"
        print(f"error: {message}", file=sys.stderr)
        return EXIT_NOT_FOUND

    print(json.dumps(type_def.to_dict(), indent=indent or None))
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_full_config()
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    setup_logging(debug=args.debug or config["debug"], log_file=config["log_file"])
    logger.debug(f"Running {args.command} with {vars(args)}")

    if args.command == "inspect":
        return run_inspect(args.file, args.type_name, args.indent)
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
