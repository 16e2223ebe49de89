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
SARIF format reporter for GitHub Code Scanning integration.

Implements SARIF 2.1.0 specification for lint results.
https://docs.oasis-open.org/sarif/sarif/v2.1.0/sarif-v2.1.0.html
"""

import json
from typing import Any

from ...config.constants import LinterConstants
from ...core.models import Diagnostic, Report, UnitResult
from ...core.rule_registry import RuleRegistry, default_registry


class SARIFReporter:
    """Generates SARIF 2.1.0 format reports for GitHub Code Scanning."""

    SARIF_VERSION = "2.1.0"
    SARIF_SCHEMA = "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json"

    # Level of every result; rules carry no severity
    LEVEL = "warning"

    def __init__(
        self,
        tool_name: str = LinterConstants.TOOL_NAME,
        tool_version: str = LinterConstants.VERSION,
        registry: RuleRegistry | None = None,
    ):
        """
        Initialize SARIF reporter.

        Args:
            tool_name: Name of the linting tool
            tool_version: Version of the linting tool
            registry: Rule catalog used to describe rules
        """
        self.tool_name = tool_name
        self.tool_version = tool_version
        self.registry = registry or default_registry()

    def generate_report(self, data: UnitResult | Report) -> str:
        """
        Generate SARIF report.

        Args:
            data: UnitResult or Report object

        Returns:
            SARIF JSON string
        """
        results = [data] if isinstance(data, UnitResult) else data.unit_results
        timestamp = data.timestamp

        diagnostics = [d for result in results for d in result.diagnostics]
        sarif = {
            "$schema": self.SARIF_SCHEMA,
            "version": self.SARIF_VERSION,
            "runs": [
                {
                    "tool": self._create_tool_component(self._extract_rules(diagnostics)),
                    "results": self._convert_diagnostics(diagnostics),
                    "invocations": [
                        {
                            "executionSuccessful": True,
                            "endTimeUtc": timestamp.isoformat() + "Z",
                        }
                    ],
                }
            ],
        }
        return json.dumps(sarif, indent=2, default=str)

    def _create_tool_component(self, rules: list[dict[str, Any]]) -> dict[str, Any]:
        """Create the tool component with rules."""
        return {
            "driver": {
                "name": self.tool_name,
                "version": self.tool_version,
                "rules": rules,
            }
        }

    def _extract_rules(self, diagnostics: list[Diagnostic]) -> list[dict[str, Any]]:
        """Extract unique rules from diagnostics."""
        seen_rules: set[str] = set()
        rules = []

        for diagnostic in diagnostics:
            if diagnostic.rule_id in seen_rules:
                continue
            seen_rules.add(diagnostic.rule_id)

            rule: dict[str, Any] = {
                "id": diagnostic.rule_id,
                "name": diagnostic.rule_id.replace("_", " ").title(),
                "defaultConfiguration": {
                    "level": self.LEVEL,
                },
                "properties": {
                    "tags": ["style"],
                },
            }

            definition = self.registry.get(diagnostic.rule_id)
            if definition is not None:
                rule["shortDescription"] = {"text": definition.description}
                rule["properties"]["configKey"] = definition.config_key
                if definition.remediation:
                    rule["help"] = {
                        "text": definition.remediation,
                        "markdown": f"**Remediation**: {definition.remediation}",
                    }

            rules.append(rule)

        return rules

    def _convert_diagnostics(self, diagnostics: list[Diagnostic]) -> list[dict[str, Any]]:
        """Convert diagnostics to SARIF results."""
        results = []

        for diagnostic in diagnostics:
            position = diagnostic.position
            results.append(
                {
                    "ruleId": diagnostic.rule_id,
                    "level": self.LEVEL,
                    "message": {
                        "text": diagnostic.message,
                    },
                    "locations": [
                        {
                            "physicalLocation": {
                                "artifactLocation": {
                                    "uri": position.file,
                                    "uriBaseId": "%SRCROOT%",
                                },
                                "region": {
                                    "startLine": position.line,
                                    "startColumn": position.column,
                                },
                            }
                        }
                    ],
                }
            )

        return results

    def save_report(self, data: UnitResult | Report, output_path: str):
        """
        Save SARIF report to file.

        Args:
            data: UnitResult or Report object
            output_path: Path to save file
        """
        report_json = self.generate_report(data)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(report_json)
