"""
CLI commands for serialized analysis files.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .errors import SchemaValidationError
from .validation import get_validator


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def cmd_validate(args):
    """Validate serialized analysis files command."""
    setup_logging(args.verbose)
    validator = get_validator()

    status = 0
    for file_name in args.files:
        try:
            data = json.loads(Path(file_name).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            print(f"✗ {file_name}: {e}")
            status = 1
            continue
        try:
            validator.validate(data)
        except SchemaValidationError as e:
            print(f"✗ {file_name}")
            for error in e.errors:
                print(f"    {error}")
            if e.version_error:
                print(f"    {e.version_error}")
            status = 1
            continue
        print(f"✓ {file_name}")
    return status


def cmd_schema(args):
    """Print or write the JSON Schema of the serialized format."""
    setup_logging(args.verbose)
    text = json.dumps(get_validator().json_schema(), indent=2)
    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        print(f"✓ Wrote schema to: {out}")
    else:
        print(text)
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Component analysis tools",
        prog="component-analysis"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate serialized analysis JSON files"
    )
    validate_parser.add_argument(
        "files",
        nargs="+",
        help="Files to validate"
    )
    validate_parser.set_defaults(func=cmd_validate)

    # Schema command
    schema_parser = subparsers.add_parser(
        "schema",
        help="Print the JSON Schema of the serialized format"
    )
    schema_parser.add_argument(
        "--out",
        help="Write the schema to this file instead of stdout"
    )
    schema_parser.set_defaults(func=cmd_schema)

    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
