"""
Command-line interface for validating Anki notes.

Usage:
    anki-validator <config_file> [--browse] [-f FIELD ...] [-v KIND ...] [options]
"""

import argparse
import sys

from anki_validator import __version__
from anki_validator.cli.report import print_validation_result
from anki_validator.connect import AnkiConnectClient, AnkiConnectConfig, AnkiConnectError
from anki_validator.core.errors import (
    ConfigurationError,
    NoteFieldMismatchError,
    ReconciliationError,
)
from anki_validator.core.rules import create_validation_config
from anki_validator.core.validators import RuleKind
from anki_validator.observability.logger import APP_LOGGER_NAME, LOG_LEVELS, get_logger, setup_logger
from anki_validator.pipeline import ValidationPipeline

logger = get_logger(__name__)

FATAL_ERRORS = (
    ConfigurationError,
    ReconciliationError,
    NoteFieldMismatchError,
    AnkiConnectError,
)


def parse_rule_kind(value: str) -> RuleKind:
    """Accept rule kinds as written in configs (ValueList) or in kebab case (value-list)."""
    normalized = value.replace("-", "").replace("_", "").lower()
    for kind in RuleKind:
        if kind.value.lower() == normalized:
            return kind
    choices = ", ".join(kind.value for kind in RuleKind)
    raise argparse.ArgumentTypeError(f"invalid rule kind '{value}' (choose from {choices})")


def validate_command(args) -> int:
    """
    Execute a validation run.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    config = create_validation_config(args.config_file, args.fields, args.validations)
    connect_config = AnkiConnectConfig.from_env(url=args.anki_url, browse_limit=args.browse_limit)
    logger.info(f"Using AnkiConnect at {connect_config.url}")

    with AnkiConnectClient(connect_config) as client:
        pipeline = ValidationPipeline(client)
        result = pipeline.run(config)
        print_validation_result(result)

        if args.browse:
            pipeline.browse_failures(result, limit=connect_config.browse_limit)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anki-validator",
        description=(
            "Anki Field Validator is a command line tool to validate notes in Anki.\n"
            "This tool requires the AnkiConnect add-on to be installed in order to interact with Anki."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate every rule of the config
  anki-validator config/japanese_vocab.json

  # Only check two fields and open the failing notes in Anki
  anki-validator config/japanese_vocab.json -f Expression -f Reading --browse

  # Only apply value list rules
  anki-validator config/japanese_vocab.yaml -v ValueList
        """
    )
    parser.add_argument(
        "config_file",
        help="Path to the validation config (JSON or YAML)"
    )
    parser.add_argument(
        "--browse",
        action="store_true",
        help="Automatically opens failed notes in the Anki note browser"
    )
    parser.add_argument(
        "-f", "--fields",
        action="append",
        default=[],
        metavar="FIELD",
        help="Only validate the fields specified with this argument"
    )
    parser.add_argument(
        "-v", "--validations",
        action="append",
        default=[],
        type=parse_rule_kind,
        metavar="KIND",
        help="Only apply the validations specified with this argument "
             "(Required, ValueList, MustNotInclude)"
    )

    # AnkiConnect connection arguments
    parser.add_argument(
        "--anki-url",
        default=None,
        help="AnkiConnect endpoint (default: $ANKI_CONNECT_URL or http://localhost:8765)"
    )
    parser.add_argument(
        "--browse-limit",
        type=int,
        default=None,
        help="Maximum number of notes opened by --browse (default: $ANKI_BROWSE_LIMIT or 997)"
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=list(LOG_LEVELS),
        default=None,
        help="Log level (default: $LOG_LEVEL or WARNING)"
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default=None,
        help="Log format (default: $LOG_FORMAT or text)"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger(APP_LOGGER_NAME, level=args.log_level, format_type=args.log_format)

    try:
        return validate_command(args)
    except FATAL_ERRORS as e:
        logger.debug("Validation run aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
