"""Main CLI entry point for latin_drill."""

import argparse
import sys

from latin_drill import __version__
from latin_drill.cli.commands import drill, words
from latin_drill.models import Declension, DrillType, Gender


def _add_vocabulary_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command that reads the vocabulary."""
    parser.add_argument("--vocabulary", help="Path to a vocabulary JSON file")
    parser.add_argument("--url", help="Fetch the vocabulary JSON from this URL instead")
    parser.add_argument(
        "--declension",
        action="append",
        choices=[d.value for d in Declension],
        help="Only use words of this declension (repeatable)",
    )
    parser.add_argument(
        "--gender",
        action="append",
        choices=[g.value for g in Gender],
        help="Only use words of this gender (repeatable)",
    )
    parser.add_argument("--search", help="Only use words matching this text")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="latin-drill",
        description="Timed vocabulary drills for Latin nouns",
        epilog="Use 'latin-drill <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # latin-drill drill
    drill_parser = subparsers.add_parser(
        "drill",
        help="Run a timed drill session",
        description="Answer randomly generated drills until the time runs out",
    )
    _add_vocabulary_arguments(drill_parser)
    drill_parser.add_argument(
        "--minutes",
        type=int,
        help="Session length in minutes (default from config)",
    )
    drill_parser.add_argument(
        "--types",
        nargs="+",
        choices=[t.value for t in DrillType],
        help="Drill types to mix (default: all)",
    )
    drill_parser.add_argument("--seed", type=int, help="Random seed for a repeatable session")

    # latin-drill words
    words_parser = subparsers.add_parser(
        "words",
        help="List or search the vocabulary",
        description="Print vocabulary entries, optionally filtered or ranked by a search",
    )
    _add_vocabulary_arguments(words_parser)
    words_parser.add_argument("--limit", type=int, help="Show at most this many words")
    words_parser.add_argument(
        "--stats", action="store_true", help="Show vocabulary counts instead of listing words"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Dispatch to appropriate command
    if args.command == "drill":
        return drill.drill_command(args)
    elif args.command == "words":
        return words.words_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
