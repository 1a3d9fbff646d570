"""Command-line interface for docextract."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.extractor import Extractor
from .filters.registry import FilterRegistry
from .logging_config import setup_logging
from .models.config import ExtractorConfig
from .models.rules import RuleSet


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="docextract",
        description="Extract the meaningful content of an HTML snapshot as Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Extract with a rule file
  docextract terms.html --rules terms.yaml

  # Override the document location and apply service filters
  docextract terms.html --rules terms.yaml --location https://example.com/terms --filters filters.py

  # Read the snapshot from stdin, write Markdown to a file
  cat terms.html | docextract - --rules terms.yaml -o terms.md
        """,
    )

    parser.add_argument(
        "input",
        help="HTML snapshot to extract from ('-' for stdin)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--rules",
        "-r",
        type=Path,
        required=True,
        help="YAML file with location, select, remove and filters",
    )
    parser.add_argument(
        "--location",
        "-l",
        default=None,
        help="URL the snapshot was fetched from (overrides the rule file)",
    )
    parser.add_argument(
        "--filters",
        "-f",
        type=Path,
        default=None,
        help="Python file defining service filter functions",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="YAML extractor configuration",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write Markdown to this file instead of stdout",
    )

    # Logging
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    log_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only log errors",
    )

    return parser


def _read_input(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def run_extractor(args: argparse.Namespace, console: Optional[Console] = None) -> int:
    """Run an extraction from parsed CLI arguments."""
    console = console or Console(stderr=True)

    try:
        config = ExtractorConfig.from_yaml_file(args.config) if args.config else ExtractorConfig()
        if args.verbose:
            config = config.model_copy(update={"log_level": "DEBUG"})
        elif args.quiet:
            config = config.model_copy(update={"log_level": "ERROR"})

        rule_set = RuleSet.from_yaml_file(args.rules)
        if args.location:
            rule_set = rule_set.model_copy(update={"location": args.location})

        filters = FilterRegistry.from_file(args.filters) if args.filters else FilterRegistry()
    except Exception as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    setup_logging(config.log_level, log_file=config.log_file)

    try:
        content = _read_input(args.input)
        text = Extractor(filters=filters, config=config).extract(content, rule_set)
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        if args.verbose:
            console.print_exception()
        return 1

    if args.output:
        args.output.write_text(text + "\n", encoding="utf-8")
        if not args.quiet:
            console.print(f"[green]Wrote[/green] {len(text)} characters to {args.output}")
    else:
        sys.stdout.write(text + "\n")

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_extractor(args)


if __name__ == "__main__":
    sys.exit(main())
