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
Centralized rule construction.

Every entry point (CLI, :class:`~attgo_linter.core.linter.Linter`, tests)
builds rules through :func:`build_rules` so that:

* the ``enable_*`` toggles of the active ``LintPolicy`` are respected;
* rule knobs (logger patterns, enum suffixes, current year) are wired in
  one place;
* adding a rule only requires a change here and in the rule registry.
"""

from __future__ import annotations

import logging

from .lint_policy import LintPolicy
from .rule_registry import RuleRegistry, default_registry
from .rules import (
    BaseRule,
    CopyrightFreshnessRule,
    EnumEncodingRule,
    LoggerPlacementRule,
)

logger = logging.getLogger(__name__)


def _instantiate(rule_class: type[BaseRule], policy: LintPolicy, current_year: int | None) -> BaseRule:
    if rule_class is LoggerPlacementRule:
        return LoggerPlacementRule(logger_type_patterns=policy.logger_type_patterns)
    if rule_class is EnumEncodingRule:
        return EnumEncodingRule(enum_type_suffixes=policy.enum_type_suffixes)
    if rule_class is CopyrightFreshnessRule:
        return CopyrightFreshnessRule(current_year=current_year)
    return rule_class()


def build_rules(
    policy: LintPolicy,
    *,
    current_year: int | None = None,
    registry: RuleRegistry | None = None,
) -> list[BaseRule]:
    """Build the active rule set, respecting the policy's ``enable_*`` toggles.

    Args:
        policy: The active lint policy.
        current_year: Calendar year for the copyright check.  Defaults to the
            system clock.
        registry: Rule catalog; defaults to the built-in rules.

    Returns:
        Rule instances in registration order.
    """
    registry = registry or default_registry()
    rules: list[BaseRule] = []
    for definition in registry:
        if definition.rule_class is None or not policy.enabled(definition.config_key):
            continue
        rules.append(_instantiate(definition.rule_class, policy, current_year))

    logger.debug("Active rules: %s", ", ".join(r.rule_id() for r in rules) or "(none)")
    return rules
