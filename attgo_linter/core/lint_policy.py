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
Lint policy: which house-style rules run and how they are tuned.

A ``LintPolicy`` holds one enable flag per rule plus the two list settings
(logger type patterns and enum type suffixes).  User configuration is merged
on top of the built-in defaults:

* a boolean key that is present always wins, even when it is ``false``;
* a non-empty list replaces the default list wholesale;
* absent keys and empty lists keep the default.

Usage
-----
    from attgo_linter.core.lint_policy import LintPolicy

    # Load built-in defaults
    policy = LintPolicy.default()

    # Load a team configuration (merges on top of defaults)
    policy = LintPolicy.from_yaml(".attgo.yaml")

    # Dump the current (including default) configuration for editing
    policy.to_yaml("generated_config.yaml")

A malformed setting raises :class:`~attgo_linter.core.exceptions.ConfigError`
naming the offending field, before any rule runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from ..data import DEFAULT_CONFIG_PATH, STRICT_CONFIG_PATH
from .exceptions import ConfigError
from .rules.enum_encoding import DEFAULT_ENUM_TYPE_SUFFIXES
from .rules.logger_placement import DEFAULT_LOGGER_TYPE_PATTERNS

logger = logging.getLogger(__name__)

# Named preset configurations
_PRESET_CONFIGS: dict[str, Path] = {
    "default": DEFAULT_CONFIG_PATH,
    "strict": STRICT_CONFIG_PATH,
}

BOOL_KEYS: tuple[str, ...] = (
    "enable_no_pkg_logger",
    "enable_enum_iota",
    "enable_current_year",
    "enable_capital_comment",
    "enable_func_opts",
    "enable_raw_string",
    "enable_struct_field_order",
    "enable_interface_check",
)
LIST_KEYS: tuple[str, ...] = ("logger_type_patterns", "enum_type_suffixes")
META_KEYS: tuple[str, ...] = ("policy_name", "policy_version", "preset_base")


@dataclass(frozen=True)
class LintPolicy:
    """Immutable lint configuration for one run."""

    # Metadata
    policy_name: str = "default"
    policy_version: str = "1.0"
    preset_base: str = "default"

    # Rule toggles
    enable_no_pkg_logger: bool = True
    enable_enum_iota: bool = True
    enable_current_year: bool = True
    enable_capital_comment: bool = False
    enable_func_opts: bool = False
    enable_raw_string: bool = False
    enable_struct_field_order: bool = False
    enable_interface_check: bool = False

    # Rule knobs
    logger_type_patterns: tuple[str, ...] = field(default=DEFAULT_LOGGER_TYPE_PATTERNS)
    enum_type_suffixes: tuple[str, ...] = field(default=DEFAULT_ENUM_TYPE_SUFFIXES)

    # -----------------------------------------------------------------------
    # Convenience helpers
    # -----------------------------------------------------------------------

    def enabled(self, config_key: str) -> bool:
        """Return the enable flag stored under *config_key*."""
        if config_key not in BOOL_KEYS:
            raise ConfigError(f"Unknown rule toggle '{config_key}'", field=config_key)
        return bool(getattr(self, config_key))

    def enabled_keys(self) -> list[str]:
        return [key for key in BOOL_KEYS if getattr(self, key)]

    # -----------------------------------------------------------------------
    # Construction helpers
    # -----------------------------------------------------------------------

    @classmethod
    def default(cls) -> LintPolicy:
        """Load the built-in default configuration that ships with the package."""
        return cls.from_yaml(DEFAULT_CONFIG_PATH)

    @classmethod
    def from_preset(cls, name: str) -> LintPolicy:
        """Load a named preset: ``default`` or ``strict``."""
        name_lower = name.lower()
        if name_lower not in _PRESET_CONFIGS:
            raise ConfigError(
                f"Unknown preset '{name}'. Available: {', '.join(sorted(_PRESET_CONFIGS))}",
                field="preset",
            )
        return cls.from_yaml(_PRESET_CONFIGS[name_lower])

    @classmethod
    def preset_names(cls) -> list[str]:
        """Return available preset names."""
        return sorted(_PRESET_CONFIGS.keys())

    @classmethod
    def from_yaml(cls, path: str | Path) -> LintPolicy:
        """
        Load a configuration from a YAML file.

        The file is merged on top of the built-in defaults so that users
        only need to specify the settings they want to change.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as fh:
                raw = yaml.safe_load(fh)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if path.resolve() == DEFAULT_CONFIG_PATH.resolve():
            return cls().merge(raw)
        return cls._from_default_raw().merge(raw)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> LintPolicy:
        """Build a configuration from a mapping merged on top of the defaults."""
        return cls._from_default_raw().merge(data)

    def merge(self, override: dict[str, Any] | None) -> LintPolicy:
        """Return a new policy with *override* applied on top of this one."""
        if override is None:
            return self
        if not isinstance(override, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(override).__name__}")

        changes: dict[str, Any] = {}
        for key, value in override.items():
            if key in BOOL_KEYS:
                changes[key] = self._decode_bool(key, value)
            elif key in LIST_KEYS:
                decoded = self._decode_list(key, value)
                if decoded:
                    changes[key] = decoded
            elif key in META_KEYS:
                if value is not None:
                    changes[key] = str(value)
            else:
                logger.warning("Ignoring unknown configuration key '%s'", key)

        return replace(self, **changes) if changes else self

    def to_yaml(self, path: str | Path) -> None:
        """Dump the full configuration to a YAML file for editing."""
        with open(path, "w") as fh:
            fh.write(self.dump_yaml())

    def dump_yaml(self) -> str:
        header = (
            "# attgo-linter – configuration\n"
            "# Only include settings you want to override; omitted settings\n"
            "# will use the built-in defaults.\n\n"
        )
        return header + yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False, width=120)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = list(value) if isinstance(value, tuple) else value
        return data

    # -----------------------------------------------------------------------
    # Internal parsing
    # -----------------------------------------------------------------------

    @classmethod
    def _from_default_raw(cls) -> LintPolicy:
        if not DEFAULT_CONFIG_PATH.exists():
            return cls()
        with open(DEFAULT_CONFIG_PATH) as fh:
            return cls().merge(yaml.safe_load(fh))

    @staticmethod
    def _decode_bool(key: str, value: Any) -> bool:
        if not isinstance(value, bool):
            raise ConfigError(f"'{key}' must be a boolean, got {value!r}", field=key)
        return value

    @staticmethod
    def _decode_list(key: str, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if not isinstance(value, list):
            raise ConfigError(f"'{key}' must be a list of strings, got {value!r}", field=key)
        for item in value:
            if not isinstance(item, str):
                raise ConfigError(f"'{key}' entries must be strings, got {item!r}", field=key)
        return tuple(value)
