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
Enum encoding rule.

Enumerations are expected to be integer constants (``uint64`` with ``iota``).
A type whose name ends with one of the configured suffixes (``SANType``,
``OrderStatus``) is an enum candidate.  Constants of a candidate whose
underlying representation is text and which are assigned a string literal
are reported.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..index import DeclarationIndex
from ..models import Diagnostic, TypeKind, ValueKind
from ..patterns import base_type_name, has_name_suffix
from ..resolver import TypeResolver
from .base import BaseRule

DEFAULT_ENUM_TYPE_SUFFIXES: tuple[str, ...] = ("Type", "Status", "State", "Kind", "Mode")


class EnumEncodingRule(BaseRule):
    """Flags string-valued constants of enum-like types."""

    name = "enum_iota"
    config_key = "enable_enum_iota"
    default_enabled = True
    description = "Enum-like types should be integer constants built with iota."
    remediation = "Declare the type as uint64 and enumerate its values with iota."

    def __init__(self, enum_type_suffixes: Iterable[str] = DEFAULT_ENUM_TYPE_SUFFIXES):
        self.suffixes = tuple(s for s in enum_type_suffixes if s)

    def evaluate(self, index: DeclarationIndex, resolver: TypeResolver) -> list[Diagnostic]:
        # Collect candidates first, then judge constants against them.
        text_candidates: set[str] = set()
        for decl in index.types:
            if has_name_suffix(decl.name, self.suffixes) and resolver.underlying_kind(decl.name) is TypeKind.TEXT:
                text_candidates.add(decl.name)

        diagnostics: list[Diagnostic] = []
        if not text_candidates:
            return diagnostics

        for spec in index.constants():
            if spec.value_kind is not ValueKind.TEXT:
                continue
            if base_type_name(spec.declared_type) not in text_candidates:
                continue
            diagnostics.append(
                self._report(
                    spec.position,
                    f'enum constant "{spec.name}" uses string value; consider using uint64 with iota pattern instead',
                )
            )
        return diagnostics
