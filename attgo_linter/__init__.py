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
attgo-linter - House-style linter for Go source units.
"""

try:
    from ._version import __version__
except ImportError:
    __version__ = "0.0.0+unknown"


def __getattr__(name: str):
    """Lazy-load public API symbols on first access.

    Importing the package (e.g. ``python -m attgo_linter.cli.cli``) stays
    cheap; rule modules and YAML loading happen on first use.
    """
    _lazy_map = {
        "Config": (".config.config", "Config"),
        "LinterConstants": (".config.constants", "LinterConstants"),
        "LinterError": (".core.exceptions", "LinterError"),
        "ConfigError": (".core.exceptions", "ConfigError"),
        "UnitLoadError": (".core.exceptions", "UnitLoadError"),
        "LintPolicy": (".core.lint_policy", "LintPolicy"),
        "Linter": (".core.linter", "Linter"),
        "lint_unit": (".core.linter", "lint_unit"),
        "lint_paths": (".core.linter", "lint_paths"),
        "UnitLoader": (".core.loader", "UnitLoader"),
        "load_unit": (".core.loader", "load_unit"),
        "Diagnostic": (".core.models", "Diagnostic"),
        "Position": (".core.models", "Position"),
        "Report": (".core.models", "Report"),
        "SourceUnit": (".core.models", "SourceUnit"),
        "UnitResult": (".core.models", "UnitResult"),
        "RuleRegistry": (".core.rule_registry", "RuleRegistry"),
        "default_registry": (".core.rule_registry", "default_registry"),
        "build_rules": (".core.rule_factory", "build_rules"),
    }
    if name in _lazy_map:
        module_path, attr = _lazy_map[name]
        import importlib

        mod = importlib.import_module(module_path, __package__)
        val = getattr(mod, attr)
        # Cache on the module so __getattr__ is only called once per symbol
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Linter",
    "lint_unit",
    "lint_paths",
    "LintPolicy",
    "SourceUnit",
    "Diagnostic",
    "Position",
    "UnitResult",
    "Report",
    "UnitLoader",
    "load_unit",
    "RuleRegistry",
    "default_registry",
    "build_rules",
    "LinterError",
    "ConfigError",
    "UnitLoadError",
    "Config",
    "LinterConstants",
]
