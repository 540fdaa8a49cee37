"""
Main CLI entry point for proactive-audio.

Commands:
    card       Show what the silent-sentinel mode does
    config     Apply the controller to a session context and print the result
    scenarios  Check the policy scenario table against the local policy model
"""

import argparse
import asyncio
import json
import sys
from typing import Optional, List

from rich.console import Console
from rich.table import Table

from proactive_audio import __version__
from proactive_audio.cli.console_subscriber import ConsoleSubscriber
from proactive_audio.cli.feature_card import FeatureCard
from proactive_audio.controller import LiveSessionContext, ProactiveAudioController
from proactive_audio.core.config import SentinelConfig, load_sentinel_config
from proactive_audio.core.event_stream import SessionEventStream
from proactive_audio.core.logger import LOG_LEVELS, logger, set_log_level
from proactive_audio.policy import SentinelPolicy, run_scenarios
from proactive_audio.prompts import SYSTEM_INSTRUCTION_VERSION


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="proactive-audio",
        description="Silent Sentinel - proactive-audio configuration for Gemini Live sessions",
        epilog="Use 'proactive-audio <command> --help' for command-specific help.",
    )

    parser.add_argument(
        "--format",
        choices=["text", "json"],
        help="Output format (default: from OUTPUT_FORMAT, else text)"
    )
    parser.add_argument(
        "--minimal",
        "-m",
        action="store_true",
        help="Minimize output"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Set logging level"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show tracebacks on errors"
    )
    parser.add_argument(
        "-v",
        "--version",
        action="store_true",
        help="Show version information"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser("card", help="Show the proactive-audio feature card")
    subparsers.add_parser(
        "config",
        help="Apply the proactive-audio configuration and print the submitted payload"
    )
    subparsers.add_parser(
        "scenarios",
        help="Run the policy scenarios through the local policy model"
    )

    return parser


def setup_config_from_args(args: argparse.Namespace) -> SentinelConfig:
    """Load the settings and override them with CLI arguments."""
    config = load_sentinel_config()

    if args.format:
        config.output_format = args.format

    if args.log_level:
        config.log_level = args.log_level

    set_log_level(config.log_level)
    return config


def handle_config_command(args: argparse.Namespace, config: SentinelConfig, console: Console) -> int:
    """Mount a controller on an in-process session context and report the submission."""
    event_stream = SessionEventStream(logger=logger)
    if config.output_format == "text":
        subscriber = ConsoleSubscriber(console, minimal=args.minimal)
        event_stream.subscribe(subscriber.handle_event)

    context = LiveSessionContext(event_stream=event_stream, logger=logger)
    controller = ProactiveAudioController.from_context(context)
    controller.mount()
    controller.unmount()

    if config.output_format == "json":
        print(json.dumps(
            {"model": context.model, "config": context.config.to_payload()},
            indent=2,
            ensure_ascii=False,
        ))
        return 0

    if not args.minimal:
        console.print(f"Policy version: [bold]{SYSTEM_INSTRUCTION_VERSION}[/bold]")
        console.print(
            f"Gemini API key: {'configured' if config.gemini_api_key else 'not set'}"
        )
    return 0


def handle_scenarios_command(args: argparse.Namespace, config: SentinelConfig, console: Console) -> int:
    """Run the scenario table; exit code 1 if any scenario disagrees."""
    results = run_scenarios(policy=SentinelPolicy(config.confidence_threshold))
    failed = [result for result in results if not result.passed]

    if config.output_format == "json":
        print(json.dumps(
            [
                {
                    "name": result.scenario.name,
                    "statement": result.scenario.assessment.statement,
                    "expect_trigger": result.scenario.expect_trigger,
                    "utterance": result.utterance,
                    "passed": result.passed,
                }
                for result in results
            ],
            indent=2,
            ensure_ascii=False,
        ))
        return 1 if failed else 0

    table = Table(title="Silent Sentinel scenarios", header_style="bold magenta")
    table.add_column("Scenario", style="cyan", no_wrap=True)
    table.add_column("Statement")
    table.add_column("Behavior")
    table.add_column("Result")
    for result in results:
        behavior = result.utterance or "🤫 silent"
        status = "[green]pass[/green]" if result.passed else "[red]FAIL[/red]"
        table.add_row(result.scenario.name, result.scenario.assessment.statement, behavior, status)
    console.print(table)

    if failed:
        console.print(f"[red]{len(failed)} scenario(s) disagree with the policy[/red]")
        return 1
    return 0


async def main_async(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    if args.version:
        print(f"proactive-audio version: {__version__}")
        return 0

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = setup_config_from_args(args)

        if args.command == "card":
            FeatureCard(console).display()
            return 0
        elif args.command == "config":
            return handle_config_command(args, config, console)
        elif args.command == "scenarios":
            return handle_scenarios_command(args, config, console)
        else:
            print(f"Unknown command: {args.command}")
            return 1

    except KeyboardInterrupt:
        print("\nOperation interrupted by user")
        return 130
    except Exception as e:
        if args.debug:
            console.print_exception()
        else:
            console.print(f"[red]Error: {e}[/red]")
        return 1


def main():
    """Entry point for the CLI script."""
    try:
        exit_code = asyncio.run(main_async())
        sys.exit(exit_code)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
