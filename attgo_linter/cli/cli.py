# Copyright 2026 Cisco Systems, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for attgo-linter."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..config.config import Config
from ..config.constants import LinterConstants
from ..core.exceptions import ConfigError, LinterError
from ..core.lint_policy import LintPolicy
from ..core.linter import Linter
from ..core.models import Report
from ..core.reporters.json_reporter import JSONReporter
from ..core.reporters.sarif_reporter import SARIFReporter
from ..core.reporters.text_reporter import TextReporter
from ..core.rule_registry import default_registry

logger = logging.getLogger("attgo_linter.cli")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def _runtime_config(args: argparse.Namespace) -> Config:
    """Combine command-line flags with ``ATTGO_LINTER_*`` environment variables."""
    overrides = {
        "config_path": getattr(args, "config", None),
        "jobs": getattr(args, "jobs", None),
        "current_year": getattr(args, "current_year", None),
        "output_format": getattr(args, "format", None),
    }
    return Config(**{key: value for key, value in overrides.items() if value is not None})


def _load_policy(config_value: str | None) -> LintPolicy:
    """Load the lint policy from a preset name, a YAML path, or the defaults."""
    if not config_value:
        return LintPolicy.default()

    if config_value.lower() in LintPolicy.preset_names():
        policy = LintPolicy.from_preset(config_value)
        logger.info("Using %s configuration (preset)", policy.policy_name)
    else:
        policy = LintPolicy.from_yaml(config_value)
        logger.info("Using configuration: %s (%s)", config_value, policy.policy_name)
    return policy


def _format_output(output_format: str, report: Report) -> str:
    """Generate the formatted output string for a report."""
    if output_format == "json":
        return JSONReporter().generate_report(report)
    if output_format == "sarif":
        return SARIFReporter().generate_report(report)
    return TextReporter().generate_report(report)


def _write_output(args: argparse.Namespace, output: str) -> None:
    """Write *output* to a file or stdout."""
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(output)
        print(f"Report saved to: {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(output)
        if output and not output.endswith("\n"):
            sys.stdout.write("\n")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def lint_command(args: argparse.Namespace) -> int:
    """Handle the ``lint`` command."""
    missing = [p for p in args.units if not Path(p).exists()]
    for path in missing:
        print(f"Error: Unit document does not exist: {path}", file=sys.stderr)
    if missing:
        return 1

    try:
        config = _runtime_config(args)
        policy = _load_policy(config.config_path)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ConfigError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    linter = Linter(
        policy=policy,
        current_year=config.current_year,
        jobs=config.jobs,
        max_file_size_mb=config.max_file_size_mb,
    )
    try:
        report = linter.lint_paths(args.units)
    except LinterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if report.total_units == 0:
        print("No units linted.", file=sys.stderr)
        return 1

    _write_output(args, _format_output(config.output_format, report))

    if report.total_diagnostics and args.fail_on_findings:
        return 1
    return 0


def list_rules_command(_args: argparse.Namespace) -> int:
    """Handle the ``list-rules`` command."""
    print("Available Rules:\n")
    for i, rule in enumerate(default_registry(), 1):
        state = "enabled" if rule.default_enabled else "disabled"
        print(f"  {i}. {rule.id} ({state} by default)")
        print(f"     {rule.description}")
        print(f"     Config key: {rule.config_key}")
        print()
    return 0


def generate_config_command(args: argparse.Namespace) -> int:
    """Handle the ``generate-config`` command."""
    try:
        policy = LintPolicy.from_preset(args.preset)
    except ConfigError as e:
        print(f"Error generating configuration: {e}", file=sys.stderr)
        return 1

    if args.output:
        policy.to_yaml(args.output)
        print(f"Generated {args.preset} configuration: {args.output}\n")
        print("Edit the file to customise, then use:")
        print(f"  attgo-linter lint --config {args.output} UNIT_DOC...")
    else:
        sys.stdout.write(policy.dump_yaml())
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog=LinterConstants.TOOL_NAME,
        description="attgo-linter - house-style linter for Go source units",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  attgo-linter lint unit.yaml
  attgo-linter lint units/*.json --format sarif -o attgo.sarif
  attgo-linter lint unit.yaml --config strict --fail-on-findings
  attgo-linter generate-config --preset strict -o .attgo.yaml
  attgo-linter list-rules
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {LinterConstants.VERSION}")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # -- lint --------------------------------------------------------------
    lint_p = subparsers.add_parser("lint", help="Lint one or more unit documents")
    lint_p.add_argument("units", nargs="+", metavar="UNIT_DOC", help="Unit document exported by the host (YAML/JSON)")
    lint_p.add_argument(
        "--config",
        metavar="PRESET_OR_PATH",
        help="Configuration: preset name (default, strict) or path to YAML (or set ATTGO_LINTER_CONFIG)",
    )
    lint_p.add_argument(
        "--format",
        choices=list(LinterConstants.OUTPUT_FORMATS),
        default=None,
        help="Output format (default: text). Use 'sarif' for GitHub Code Scanning.",
    )
    lint_p.add_argument("--output", "-o", help="Output file path")
    lint_p.add_argument("--jobs", "-j", type=int, default=None, help="Units linted in parallel (default: 1)")
    lint_p.add_argument(
        "--current-year",
        type=int,
        default=None,
        metavar="YEAR",
        help="Calendar year for the copyright check (default: system clock)",
    )
    lint_p.add_argument("--fail-on-findings", action="store_true", help="Exit with error if any diagnostic is reported")
    lint_p.add_argument("--verbose", action="store_true", help="Log rule activity to stderr")

    # -- list-rules --------------------------------------------------------
    subparsers.add_parser("list-rules", help="List available rules")

    # -- generate-config ---------------------------------------------------
    gc_p = subparsers.add_parser("generate-config", help="Generate a configuration YAML")
    gc_p.add_argument("--output", "-o", default=None, help="Output file path (default: stdout)")
    gc_p.add_argument(
        "--preset", choices=LintPolicy.preset_names(), default="default", help="Base preset (default: default)"
    )

    # -- dispatch ----------------------------------------------------------
    args = parser.parse_args(argv)
    _configure_logging(args)

    if not args.command:
        parser.print_help()
        return 1

    dispatch = {
        "lint": lint_command,
        "list-rules": list_rules_command,
        "generate-config": generate_config_command,
    }
    handler = dispatch.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
