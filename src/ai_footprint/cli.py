"""Command-line utilities for ai_footprint."""

from __future__ import annotations

import argparse
import json
import sys

from ai_footprint.config_loader import (
    load_scenario_file,
    parse_inputs,
    parse_scenario_text,
)
from ai_footprint.estimation.estimator import FootprintEstimator
from ai_footprint.exceptions import AiFootprintError
from ai_footprint.green_hosting import GreenHostingClient
from ai_footprint.log_config import configure_logging
from ai_footprint.schemas import GreenHostingSection, build_report, write_report
from ai_footprint.settings import get_settings


def _read_stdin() -> str | None:
    """Read a scenario payload from stdin if one is piped in."""
    try:
        if sys.stdin and not sys.stdin.isatty():
            return sys.stdin.read()
    except OSError as e:
        print(f"Error reading stdin: {e}", file=sys.stderr)
    return None


def _load_scenario(path: str | None, stdin_payload: str | None) -> dict[str, object]:
    """Load the scenario from a file or stdin."""
    if path:
        return load_scenario_file(path)
    if stdin_payload:
        return parse_scenario_text(stdin_payload)
    raise ValueError("No input provided. Use --input or pipe a scenario via stdin.")


def _listing(estimator: FootprintEstimator) -> dict[str, object]:
    return {
        "models": list(estimator.available_models()),
        "providers": {
            provider: [dc.region_name for dc in estimator.available_regions(provider)]
            for provider in estimator.available_providers()
        },
        "tasks": estimator.available_tasks(),
        "devices": list(estimator.available_devices()),
    }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-footprint",
        description="Estimate the annual carbon footprint of a generative-AI application.",
    )
    parser.add_argument(
        "--input",
        "-i",
        help="Scenario file (JSON or YAML). If omitted, reads from stdin.",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Write the JSON report to this path instead of stdout.",
    )
    parser.add_argument(
        "--check-green",
        action="store_true",
        help="Look up whether the hosting URL is served from green energy (advisory).",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List selectable models, providers, tasks and devices, then exit.",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Quiet mode: suppress output, just return exit code.",
    )
    parser.add_argument(
        "--log-level",
        help="Log level (default from AI_FOOTPRINT_LOG_LEVEL, else WARNING).",
    )
    parser.add_argument(
        "--log-format",
        choices=("text", "json"),
        help="Log format (default from AI_FOOTPRINT_LOG_FORMAT, else text).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Estimate a scenario and emit the report."""
    parser = _build_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:  # pragma: no cover - controlled via tests
        exit_code = int(exc.code) if isinstance(exc.code, int) else 1
        return 0 if exit_code == 0 else 1

    settings = get_settings()
    configure_logging(
        args.log_level or settings.log_level,
        fmt=args.log_format or settings.log_format,
    )

    try:
        estimator = FootprintEstimator()
        if args.list:
            if not args.quiet:
                print(json.dumps(_listing(estimator), indent=2))
            return 0

        scenario = _load_scenario(args.input, _read_stdin())
        inputs = parse_inputs(scenario, estimator.coefficients)
        result = estimator.estimate(inputs)

        green_section: GreenHostingSection | None = None
        url = inputs.hosting.url
        if args.check_green and url:
            verdict = GreenHostingClient(settings=settings).check(url)
            if verdict is not None:
                green_section = GreenHostingSection(**verdict.to_dict())

        report = build_report(result, green_hosting=green_section)
        if args.output:
            write_report(report, args.output)
        elif not args.quiet:
            print(report.to_json())
        return 0

    except (AiFootprintError, ValueError, OverflowError, OSError) as exc:
        if not args.quiet:
            print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
