"""Command-line interface for tokenpress."""

import argparse
import sys
from pathlib import Path

from tokenpress import __version__
from tokenpress.config import LogLevel, get_settings
from tokenpress.exceptions import TokenPressError
from tokenpress.logging_config import configure_logging
from tokenpress.services.generation import ThemeGenerationService


def get_default_output_path() -> Path:
    """Get the default output path for generated preset modules."""
    return get_settings().default_output


def cmd_convert(args: argparse.Namespace) -> int:
    """Convert a token document into a preset module."""
    input_path = Path(args.input).resolve()
    output_path = (
        Path(args.output) if args.output else get_default_output_path()
    ).resolve()

    service = ThemeGenerationService()
    try:
        result = service.generate(input_path, output_path, force=args.force)
    except TokenPressError as e:
        print(f"Error: {e.message}")
        return 1

    print(f"✓ Theme tokens generated at {result.output_path}")
    print(f"  Primitive groups: {len(result.theme.primitive)}")
    print(f"  Semantic groups: {len(result.theme.semantic)}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate the structure of a token document."""
    input_path = Path(args.input)

    service = ThemeGenerationService()
    try:
        result = service.validate_file(input_path)
    except TokenPressError as e:
        print(f"Error: {e.message}")
        return 1

    if not result:
        print(f"✗ Invalid token structure at {result.location}: {result.reason}")
        return 1

    print(f"✓ {input_path} is a valid token document")
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"tokenpress v{__version__}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tokenpress",
        description="tokenpress - Compile design tokens into PrimeUIX theme presets",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=None,
        help="Override the configured log level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # convert command
    convert_parser = subparsers.add_parser(
        "convert", help="Convert a token document into a preset module"
    )
    convert_parser.add_argument("input", help="Path to tokens.json")
    convert_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Output path (default: assets/themes/theme-tokens.ts)",
    )
    convert_parser.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Overwrite the output file if it exists",
    )
    convert_parser.set_defaults(func=cmd_convert)

    # validate command
    validate_parser = subparsers.add_parser(
        "validate", help="Check the structure of a token document"
    )
    validate_parser.add_argument("input", help="Path to tokens.json")
    validate_parser.set_defaults(func=cmd_validate)

    # version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    if args.log_level:
        settings = settings.model_copy(update={"log_level": LogLevel(args.log_level)})
    configure_logging(settings)

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
