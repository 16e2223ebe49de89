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
Logger placement rule.

Loggers belong in struct fields where they can be injected and replaced in
tests.  Any package-scope variable whose resolved type matches a configured
logger type pattern is reported, one diagnostic per declared name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..index import DeclarationIndex
from ..models import Diagnostic
from ..patterns import BLANK_IDENTIFIER, TypePatternSet
from ..resolver import TypeResolver
from .base import BaseRule

logger = logging.getLogger(__name__)

DEFAULT_LOGGER_TYPE_PATTERNS: tuple[str, ...] = (
    "zerolog.Logger",
    "*zerolog.Logger",
    "zap.Logger",
    "*zap.Logger",
    "zap.SugaredLogger",
    "*zap.SugaredLogger",
    "logrus.Logger",
    "*logrus.Logger",
    "logrus.Entry",
    "*logrus.Entry",
    "slog.Logger",
    "*slog.Logger",
    "log.Logger",
    "*log.Logger",
)


class LoggerPlacementRule(BaseRule):
    """Flags package-level logger variables."""

    name = "no_pkg_logger"
    config_key = "enable_no_pkg_logger"
    default_enabled = True
    description = "Loggers must not be declared as package-level variables."
    remediation = "Move the logger into a struct field and inject it through the constructor."

    def __init__(self, logger_type_patterns: Iterable[str] = DEFAULT_LOGGER_TYPE_PATTERNS):
        self.patterns = TypePatternSet(logger_type_patterns)

    def evaluate(self, index: DeclarationIndex, resolver: TypeResolver) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        if not len(self.patterns):
            return diagnostics

        for var in index.package_variables():
            for declared in var.names:
                if declared.name == BLANK_IDENTIFIER:
                    continue
                resolved = resolver.type_of(declared)
                if resolved is None:
                    logger.debug("No resolved type for %s at %s", declared.name, declared.position)
                    continue
                if resolved in self.patterns:
                    diagnostics.append(
                        self._report(
                            declared.position,
                            f'package-level logger "{declared.name}" detected; loggers should be struct '
                            "fields for better dependency injection and testability",
                        )
                    )
        return diagnostics
