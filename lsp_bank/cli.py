"""Command line entry point: run the account demonstrations."""

import argparse
import logging
import sys
from collections.abc import Sequence

from lsp_bank.config import LspBankConfig
from lsp_bank.exceptions import LspBankError
from lsp_bank.logging import setup_logging
from lsp_bank.scenarios import (
    HistoryConstraintScenario,
    InvariantScenario,
    RandomPortfolioScenario,
    ScenarioResult,
    SubstitutionScenario,
)
from lsp_bank.sinks import ConsoleSink, JsonFileSink, LogSink
from lsp_bank.sinks.base import ReportSink

logger = logging.getLogger(__name__)

SCENARIOS = ["substitution", "invariant", "history", "random"]
SINKS = ["console", "json", "log", "kafka"]


def build_sink(name: str, config: LspBankConfig) -> ReportSink:
    """Create the report sink selected on the command line."""
    if name == "json":
        return JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
    if name == "log":
        return LogSink()
    if name == "kafka":
        from lsp_bank.sinks.kafka import KafkaSink

        return KafkaSink(config.kafka)
    return ConsoleSink()


def run_scenario(name: str, sink: ReportSink, config: LspBankConfig, count: int) -> ScenarioResult:
    if name == "substitution":
        return SubstitutionScenario(sink=sink, config=config.client).run()
    if name == "invariant":
        return InvariantScenario(sink=sink).run()
    if name == "history":
        return HistoryConstraintScenario(sink=sink).run()
    return RandomPortfolioScenario(
        num_accounts=count, seed=config.seed, sink=sink, config=config.client
    ).run()


def print_summary(result: ScenarioResult) -> None:
    """Print checked variants and notes for a scenario run."""
    print("\n" + "=" * 60)
    print(f"Scenario: {result.name}")
    print("=" * 60)
    for note in result.notes:
        print(f"  {note}")
    for subject, found in result.violations.items():
        expected = " (expected)" if subject in result.expected_violators else ""
        status = "VIOLATES" if found else "OK"
        print(f"  {subject}: {status}{expected}")
        for violation in found:
            print(f"    - {violation}")
    print("=" * 60)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="lsp-bank",
        description="Run Liskov Substitution Principle bank account demonstrations",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo = subparsers.add_parser("demo", help="Run a demonstration scenario")
    demo.add_argument(
        "scenario",
        choices=SCENARIOS,
        help="Scenario to run",
    )
    demo.add_argument(
        "--sink",
        choices=SINKS,
        default="console",
        help="Where transaction reports go (default: console)",
    )
    demo.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: LOG_LEVEL env or INFO)",
    )
    demo.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the random scenario",
    )
    demo.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of accounts for the random scenario (default: 10)",
    )

    args = parser.parse_args(argv)

    config = LspBankConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed
    setup_logging(args.log_level or config.log_level)

    sink = build_sink(args.sink, config)
    try:
        try:
            result = run_scenario(args.scenario, sink, config, args.count)
        finally:
            sink.close()
    except LspBankError as e:
        logger.error("Scenario %s aborted: %s", args.scenario, e)
        return 1

    print_summary(result)

    if not result.ok:
        logger.error("Unexpected contract results: %s", result.unexpected)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
