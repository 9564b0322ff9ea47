"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Configuration and logging setup
- Command routing and execution
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from pattern_demos._package import DESCRIPTION, VERSION
from pattern_demos.cli.formatters import format_output
from pattern_demos.config import AppConfig, load_config
from pattern_demos.demos.narration import print_rule
from pattern_demos.demos.registration import register_all_demos
from pattern_demos.domain.exceptions import DomainException
from pattern_demos.infrastructure.logging.logger import get_logger, setup_logging
from pattern_demos.registry import DemoRegistry

OUTPUT_FORMATS = ["json", "yaml", "table", "list"]

logger = get_logger(__name__)


def _add_format_argument(parser: argparse.ArgumentParser) -> None:
    # a global --format stays in effect when the subcommand omits it
    parser.add_argument(
        "--format", choices=OUTPUT_FORMATS, default=argparse.SUPPRESS, help="Output format"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-demos",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                       # List all demos
  %(prog)s list --format json         # List demos as JSON
  %(prog)s show observer              # Describe one demo
  %(prog)s run proxy singleton        # Run two demos
  %(prog)s run --all                  # Run every demo in order
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured logging level",
    )
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format for list/show")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List all demos")
    _add_format_argument(list_parser)

    show_parser = subparsers.add_parser("show", help="Show demo details")
    show_parser.add_argument("name", help="Demo name to show")
    _add_format_argument(show_parser)

    run_parser = subparsers.add_parser("run", help="Run one or more demos")
    run_parser.add_argument("names", nargs="*", help="Demo names to run, in order")
    run_parser.add_argument("--all", action="store_true", help="Run every registered demo")

    return parser


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    if args.log_level:
        logging_config = config.logging.model_copy(update={"level": args.log_level})
        config = config.model_copy(update={"logging": logging_config})
    return config


def list_demos(registry: DemoRegistry) -> Dict[str, Any]:
    return {"demos": [info.model_dump(mode="json") for info in registry.get_demo_infos()]}


def show_demo(registry: DemoRegistry, name: str) -> Dict[str, Any]:
    info = registry.get_registration(name).info
    return {"demos": [info.model_dump(mode="json")]}


def run_demos(registry: DemoRegistry, names: List[str], config: AppConfig) -> None:
    """Run demos in order; every name is checked before the first one starts."""
    registrations = [registry.get_registration(name) for name in names]

    for index, registration in enumerate(registrations):
        if index:
            print()
        print_rule(config.display, "#")
        print(f"{registration.info.title} ({registration.info.category})")
        registry.run_demo(registration.name, config)


def execute_command(args: argparse.Namespace, config: AppConfig) -> Optional[Dict[str, Any]]:
    """Execute a parsed command; returns data to format, or None when output was printed."""
    registry = DemoRegistry.get_instance()
    register_all_demos(registry)

    if args.command == "list":
        return list_demos(registry)
    if args.command == "show":
        return show_demo(registry, args.name)
    if args.command == "run":
        names = registry.get_registered_demos() if args.all else args.names
        run_demos(registry, names, config)
        return None
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_usage(sys.stderr)
        print("Error: No command specified. Use --help for usage information.", file=sys.stderr)
        return 1

    if args.command == "run" and not (args.all or args.names):
        print("Error: No demos specified. Name one or more demos or use --all.", file=sys.stderr)
        return 1

    # defaults first, so a broken configuration file can still be reported
    setup_logging()

    try:
        config = _apply_overrides(load_config(args.config), args)
        setup_logging(config.logging)

        result = execute_command(args, config)
        if result is not None:
            print(format_output(result, getattr(args, "format", None) or config.output_format))
        return 0

    except DomainException as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
