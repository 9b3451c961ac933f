#!/usr/bin/env python3
"""
Command-line interface for json_typeschema.
"""

import argparse
import importlib
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from .api import JsonSchemaError
from .factory import ValidatorFactory
from .fields import ExportFlags
from .schema import Schema
from .validator import Validator
from .version import __version__

logger = logging.getLogger("json_typeschema")


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Derive JSON schemas from Python types and validate JSON data."
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    schema_parser = subparsers.add_parser("schema", help="Print the JSON schema of a Python type")
    schema_parser.add_argument(
        "type",
        help="Type to describe, as MODULE:NAME"
    )
    schema_parser.add_argument(
        "--validator",
        action="store_true",
        help="Print the full validator tree instead of the property outline"
    )
    exports = schema_parser.add_mutually_exclusive_group()
    exports.add_argument(
        "--fields-only",
        action="store_true",
        help="Only describe public fields"
    )
    exports.add_argument(
        "--properties-only",
        action="store_true",
        help="Only describe public properties"
    )
    schema_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Indentation of the JSON output"
    )
    schema_parser.add_argument(
        "--output", "-o",
        type=str,
        help="Write the schema to this file instead of stdout"
    )

    validate_parser = subparsers.add_parser("validate", help="Validate a JSON data file")
    validate_parser.add_argument(
        "data_file",
        type=str,
        help="Path to the JSON data file to validate"
    )
    source = validate_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--type",
        help="Validate against this Python type, as MODULE:NAME"
    )
    source.add_argument(
        "--schema",
        help="Validate against this JSON schema file"
    )

    parse_parser = subparsers.add_parser("parse", help="Parse a JSON schema file")
    parse_parser.add_argument(
        "schema_file",
        type=str,
        help="Path to the JSON schema file"
    )

    return parser.parse_args(args)


def load_type(target: str) -> Any:
    """
    Import a type given as MODULE:NAME.

    Args:
        target: Dotted module path and attribute name separated by a colon

    Returns:
        The imported type

    Raises:
        ValueError: If the target is malformed or the attribute does not exist
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Expected MODULE:NAME, got '{target}'")

    module = importlib.import_module(module_name)
    obj = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ValueError(f"'{module_name}' has no attribute '{attr}'") from None
    return obj


def load_json(filepath: str) -> Any:
    """
    Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file contains invalid JSON
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _export_flags(args: argparse.Namespace) -> ExportFlags:
    if args.fields_only:
        return ExportFlags.PUBLIC_FIELDS
    if args.properties_only:
        return ExportFlags.PUBLIC_PROPERTIES
    return ExportFlags.DEFAULT


def run_schema(args: argparse.Namespace) -> int:
    t = load_type(args.type)
    if args.validator:
        schema = ValidatorFactory.schema_from_type(t)
    else:
        schema = Schema.create(t, _export_flags(args))

    text = schema.to_json(indent=args.indent).decode("utf-8")
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        logger.info(f"Wrote schema '{schema.title}' to {args.output}")
    else:
        print(text)
    return 0


def run_validate(args: argparse.Namespace) -> int:
    data = load_json(args.data_file)
    if args.type:
        target = ValidatorFactory.schema_from_type(load_type(args.type))
    else:
        target = Schema.load(Path(args.schema).read_bytes())

    result = Validator(verbose=args.verbose).validate(data, target)
    if not result:
        logger.error("Validation failed:")
        for error in result.errors:
            logger.error(f"  - {error}")
        return 1

    logger.info("Validation successful!")
    return 0


def run_parse(args: argparse.Namespace) -> int:
    schema = Schema.parse(Path(args.schema_file).read_bytes())
    logger.info(f"Title: {schema.title}")
    logger.info(f"Type: {schema.kind.value}")
    logger.info(f"Properties: {', '.join(schema.properties) or '(none)'}")
    logger.info(f"Required: {', '.join(schema.required) or '(none)'}")
    return 0


COMMANDS = {
    "schema": run_schema,
    "validate": run_validate,
    "parse": run_parse,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the script."""
    args = parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        return COMMANDS[args.command](args)
    except (JsonSchemaError, ValueError, ImportError, OSError) as e:
        logger.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
