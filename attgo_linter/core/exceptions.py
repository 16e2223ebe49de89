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

"""attgo-linter exceptions.

This module defines custom exceptions for attgo-linter operations.
All exceptions inherit from LinterError for easy catching.

Example:
    >>> from attgo_linter.core.linter import Linter
    >>> from attgo_linter.core.exceptions import ConfigError, UnitLoadError
    >>> from attgo_linter.core.lint_policy import LintPolicy
    >>>
    >>> try:
    ...     linter = Linter(policy=LintPolicy.from_yaml("attgo.yaml"))
    ...     result = linter.lint_file("unit.yaml")
    ... except ConfigError as e:
    ...     print(f"Bad configuration: {e}")
    ... except UnitLoadError as e:
    ...     print(f"Failed to load unit: {e}")
"""


class LinterError(Exception):
    """Base exception for all attgo-linter errors."""

    pass


class ConfigError(LinterError):
    """Raised when a configuration setting cannot be decoded.

    The whole run fails before any rule executes.  ``field`` names the
    offending setting.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class UnitLoadError(LinterError):
    """Raised when unable to load a source unit document.

    This can indicate:
    - Missing or unreadable file
    - Invalid YAML/JSON
    - A declaration entry missing a required key
    """

    pass
