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
Plain text reporter.

Emits one ``path:line:col: message (rule_id)`` line per diagnostic, the
format editors and CI log scrapers understand.
"""

from ...core.models import Report, UnitResult


class TextReporter:
    """Generates compiler-style text output."""

    def __init__(self, summary: bool = True):
        """
        Initialize text reporter.

        Args:
            summary: If True, append a one-line summary
        """
        self.summary = summary

    def generate_report(self, data: UnitResult | Report) -> str:
        """
        Generate the text report.

        Args:
            data: UnitResult or Report object

        Returns:
            Report text, newline terminated when non-empty
        """
        results = [data] if isinstance(data, UnitResult) else data.unit_results

        lines = [str(d) for result in results for d in result.diagnostics]
        if self.summary:
            total = sum(len(r.diagnostics) for r in results)
            noun = "unit" if len(results) == 1 else "units"
            lines.append(f"{total} issue(s) found in {len(results)} {noun}")

        return "\n".join(lines) + "\n" if lines else ""

    def save_report(self, data: UnitResult | Report, output_path: str):
        """Save the text report to a file."""
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.generate_report(data))
