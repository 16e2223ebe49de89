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

"""
Core lint engine for orchestrating rule evaluation.
"""

from __future__ import annotations

import concurrent.futures
import logging
import time
from collections.abc import Iterable
from pathlib import Path

from ..config.constants import LinterConstants
from .exceptions import UnitLoadError
from .index import DeclarationIndex
from .lint_policy import LintPolicy
from .loader import UnitLoader
from .models import Diagnostic, Report, SourceUnit, UnitResult
from .resolver import TypeResolver
from .rule_factory import build_rules
from .rules.base import BaseRule

logger = logging.getLogger(__name__)


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Order diagnostics by file, line, column and rule identifier."""
    return sorted(
        diagnostics,
        key=lambda d: (d.position.file, d.position.line, d.position.column, d.rule_id),
    )


class Linter:
    """Runs the active rule set over source units."""

    def __init__(
        self,
        rules: list[BaseRule] | None = None,
        policy: LintPolicy | None = None,
        current_year: int | None = None,
        jobs: int = 1,
        max_file_size_mb: int = LinterConstants.DEFAULT_MAX_FILE_SIZE_MB,
    ):
        """
        Initialize the linter.

        Args:
            rules: Rules to run. If None, builds them from the policy.
            policy: Lint policy. If None, loads built-in defaults.
            current_year: Calendar year for the copyright check. Defaults to
                the system clock.
            jobs: Number of units linted concurrently by :meth:`lint_paths`.
            max_file_size_mb: Largest unit document the loader reads, in MB.
        """
        self.policy = policy or LintPolicy.default()
        if rules is None:
            # Delegate to the factory so rule construction lives in one place.
            self.rules: list[BaseRule] = build_rules(self.policy, current_year=current_year)
        else:
            self.rules = rules
        self.jobs = max(1, jobs)
        self.loader = UnitLoader(max_file_size_mb=max_file_size_mb)

    def lint_unit(self, unit: SourceUnit) -> UnitResult:
        """
        Lint one source unit.

        The declaration index and type resolver are built once and shared
        read-only by every rule.
        """
        start_time = time.time()
        index = DeclarationIndex.build(unit)
        resolver = TypeResolver.from_unit(unit)

        diagnostics: list[Diagnostic] = []
        for rule in self.rules:
            found = rule.evaluate(index, resolver)
            if found:
                logger.debug("%s: %d diagnostics in %s", rule.rule_id(), len(found), unit.name)
            diagnostics.extend(found)

        return UnitResult(
            unit_name=unit.name,
            unit_path=unit.path,
            diagnostics=sort_diagnostics(diagnostics),
            rules_used=[rule.rule_id() for rule in self.rules],
            duration_seconds=time.time() - start_time,
        )

    def lint_file(self, path: str | Path) -> UnitResult:
        """
        Load and lint a single unit document.

        Raises:
            UnitLoadError: If the document cannot be loaded
        """
        unit = self.loader.load_unit(path)
        return self.lint_unit(unit)

    def lint_paths(self, paths: Iterable[str | Path]) -> Report:
        """
        Lint many unit documents, ``jobs`` at a time.

        A document that fails to load is logged and skipped so one bad unit
        does not abort the run.  Results keep the order of *paths*.
        """
        paths = [Path(p) for p in paths]
        report = Report()

        with concurrent.futures.ThreadPoolExecutor(max_workers=self.jobs) as executor:
            futures = [executor.submit(self.lint_file, p) for p in paths]
            for path, future in zip(paths, futures):
                try:
                    report.add_unit_result(future.result())
                except UnitLoadError as e:
                    logger.warning("Failed to load %s: %s", path, e)
                    continue

        return report

    def list_rules(self) -> list[str]:
        """Get identifiers of all active rules."""
        return [rule.rule_id() for rule in self.rules]


def lint_unit(
    unit: SourceUnit,
    policy: LintPolicy | None = None,
    current_year: int | None = None,
) -> UnitResult:
    """
    Convenience function to lint a single in-memory unit.

    Args:
        unit: Source unit produced by the host
        policy: Optional lint policy (defaults to the built-in configuration)
        current_year: Optional calendar year for the copyright check

    Returns:
        UnitResult
    """
    return Linter(policy=policy, current_year=current_year).lint_unit(unit)


def lint_paths(
    paths: Iterable[str | Path],
    policy: LintPolicy | None = None,
    current_year: int | None = None,
    jobs: int = 1,
) -> Report:
    """
    Convenience function to lint several unit documents.

    Returns:
        Report with all results
    """
    return Linter(policy=policy, current_year=current_year, jobs=jobs).lint_paths(paths)
