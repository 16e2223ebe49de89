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
Struct field order rule.

Fields are expected in the order logger, metrics, dependencies, data and
finally synchronization primitives.  Categories come from the field name,
except that ``sync`` types and channels are always synchronization.
"""

from __future__ import annotations

from enum import IntEnum

from ..index import DeclarationIndex
from ..models import Diagnostic, StructField, TypeDeclaration
from ..patterns import INDIRECTION_MARKER
from ..resolver import TypeResolver
from .base import BaseRule

SYNC_PACKAGE = "sync"
SYNC_TYPES = frozenset({"Mutex", "RWMutex", "WaitGroup", "Once", "Cond", "Pool", "Map"})
CHANNEL_PREFIXES = ("chan ", "chan<-", "<-chan")

DEPENDENCY_SUFFIXES = ("client", "service", "provider", "handler")
DEPENDENCY_NAMES = frozenset({"db", "database", "store", "cache", "repo", "repository"})


class FieldCategory(IntEnum):
    """Field categories in their expected order."""

    LOGGER = 1
    METRICS = 2
    DEPENDENCY = 3
    DATA = 4
    SYNCHRONIZATION = 5

    @property
    def label(self) -> str:
        return self.name.lower()


def is_sync_type(type_expr: str) -> bool:
    expr = type_expr.strip().lstrip(INDIRECTION_MARKER).strip()
    package, _, member = expr.partition(".")
    return package == SYNC_PACKAGE and member in SYNC_TYPES


def is_channel_type(type_expr: str) -> bool:
    expr = type_expr.strip()
    return expr == "chan" or expr.startswith(CHANNEL_PREFIXES)


def categorize(name: str, type_expr: str) -> FieldCategory:
    """Classify one named field."""
    if is_sync_type(type_expr) or is_channel_type(type_expr):
        return FieldCategory.SYNCHRONIZATION

    lower = name.lower()
    if lower.endswith(("log", "logger")):
        return FieldCategory.LOGGER
    if lower in ("metrics", "monitor") or lower.endswith("metrics"):
        return FieldCategory.METRICS
    if lower in ("mutex", "wg") or lower.endswith(("mu", "lock", "mutex")):
        return FieldCategory.SYNCHRONIZATION
    if lower.endswith(DEPENDENCY_SUFFIXES) or lower in DEPENDENCY_NAMES:
        return FieldCategory.DEPENDENCY
    return FieldCategory.DATA


class FieldOrderRule(BaseRule):
    """Flags struct fields declared out of category order."""

    name = "struct_field_order"
    config_key = "enable_struct_field_order"
    default_enabled = False
    description = "Struct fields should be ordered logger, metrics, dependency, data, synchronization."
    remediation = "Reorder the struct fields into the expected category order."

    def evaluate(self, index: DeclarationIndex, resolver: TypeResolver) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for struct in index.structs():
            diagnostics.extend(self._check_struct(struct))
        return diagnostics

    def _check_struct(self, struct: TypeDeclaration) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        highest: tuple[FieldCategory, StructField] | None = None

        for fld in struct.fields:
            if fld.embedded or not fld.name:
                continue
            category = categorize(fld.name, fld.type_expr)
            if highest is None or category >= highest[0]:
                highest = (category, fld)
                continue

            top_category, top_field = highest
            diagnostics.append(
                self._report(
                    fld.position,
                    f'field "{fld.name}" ({category.label}) should come before '
                    f'"{top_field.name}" ({top_category.label}) in struct "{struct.name}"',
                )
            )
        return diagnostics
