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
Rule registry – self-describing rules with identifiers and config keys.

The registry is the boundary where rule identifiers (``attgo_enum_iota``)
and configuration keys (``enable_enum_iota``) matter.  Internally rules are
plain :class:`~attgo_linter.core.rules.base.BaseRule` subclasses; the
registry only catalogues them for configuration, listing and reporting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .rules import ALL_RULES, BaseRule

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RuleDefinition:
    """Metadata for a single rule."""

    id: str
    """Diagnostic identifier, e.g. ``attgo_enum_iota``."""

    name: str
    """Short rule name, e.g. ``enum_iota``."""

    config_key: str
    """Boolean configuration key, e.g. ``enable_enum_iota``."""

    default_enabled: bool
    """Whether the built-in defaults enable the rule."""

    description: str = ""
    """Human-readable one-liner describing the convention."""

    remediation: str = ""
    """Suggested fix for a true positive."""

    rule_class: type[BaseRule] | None = None
    """The class that implements the check."""

    @classmethod
    def from_rule_class(cls, rule_class: type[BaseRule]) -> RuleDefinition:
        return cls(
            id=rule_class.rule_id(),
            name=rule_class.name,
            config_key=rule_class.config_key,
            default_enabled=rule_class.default_enabled,
            description=rule_class.description,
            remediation=rule_class.remediation,
            rule_class=rule_class,
        )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class RuleRegistry:
    """Central catalog of all known rule definitions.

    The registry is built once and is **read-only** after construction.
    Rules are kept in registration order.
    """

    def __init__(self) -> None:
        self._rules: dict[str, RuleDefinition] = {}

    def register(self, rule: RuleDefinition) -> None:
        """Register a single rule.

        Raises :class:`ValueError` if the identifier or config key is
        already taken by a different rule.
        """
        existing = self._rules.get(rule.id)
        if existing is not None and existing != rule:
            raise ValueError(f"Rule ID collision: '{rule.id}' is already registered")
        for other in self._rules.values():
            if other.id != rule.id and other.config_key == rule.config_key:
                raise ValueError(f"Config key collision: '{rule.config_key}' is used by '{other.id}' and '{rule.id}'")
        self._rules[rule.id] = rule

    def get(self, rule_id: str) -> RuleDefinition | None:
        """Look up a rule by ID."""
        return self._rules.get(rule_id)

    def get_by_config_key(self, config_key: str) -> RuleDefinition | None:
        for rule in self._rules.values():
            if rule.config_key == config_key:
                return rule
        return None

    def all_rules(self) -> list[RuleDefinition]:
        """Return the rule catalog in registration order."""
        return list(self._rules.values())

    def rule_ids(self) -> list[str]:
        return list(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: str) -> bool:
        return rule_id in self._rules

    def __iter__(self):
        return iter(self._rules.values())


_DEFAULT_REGISTRY: RuleRegistry | None = None


def default_registry() -> RuleRegistry:
    """Return the registry of built-in rules, building it on first use."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        registry = RuleRegistry()
        for rule_class in ALL_RULES:
            registry.register(RuleDefinition.from_rule_class(rule_class))
        logger.debug("Registered %d built-in rules", len(registry))
        _DEFAULT_REGISTRY = registry
    return _DEFAULT_REGISTRY
