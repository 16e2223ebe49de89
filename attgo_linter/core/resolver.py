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
Type resolver: resolved types and structural facts for one unit.

The host resolves types; this module only exposes what it resolved in a form
rules can query:

* the resolved type string of every declared symbol (module path and
  indirection marker included), e.g. ``*github.com/rs/zerolog.Logger``;
* the underlying representation of each type declared in the unit;
* method sets, following the usual rules: the method set of ``T`` holds the
  value-receiver methods, the method set of ``*T`` holds all of them;
* structural interface satisfaction by method name and signature.
"""

from __future__ import annotations

import logging

from .models import DeclaredName, Method, SourceUnit, TypeDeclaration, TypeKind
from .patterns import base_type_name

logger = logging.getLogger(__name__)

_Signature = tuple[str, tuple[str, ...], tuple[str, ...]]


class TypeResolver:
    """Read-only view over the host's resolved type information."""

    def __init__(self, unit: SourceUnit):
        self.module_path = unit.module_path
        self._types: dict[str, TypeDeclaration] = {}
        for decl in unit.types:
            self._types.setdefault(decl.name, decl)

        self._symbol_types: dict[tuple[str, int, int, str], str] = {}
        for var in unit.variables:
            for declared in var.names:
                if declared.resolved_type:
                    self._symbol_types[self._symbol_key(declared)] = declared.resolved_type

        # Method sets of T (value receivers) and *T (all receivers)
        self._value_methods: dict[str, frozenset[_Signature]] = {}
        self._pointer_methods: dict[str, frozenset[_Signature]] = {}
        for name, decl in self._types.items():
            if decl.is_interface:
                continue
            self._value_methods[name] = frozenset(m.signature for m in decl.methods if not m.pointer_receiver)
            self._pointer_methods[name] = frozenset(m.signature for m in decl.methods)

    @classmethod
    def from_unit(cls, unit: SourceUnit) -> TypeResolver:
        return cls(unit)

    @staticmethod
    def _symbol_key(declared: DeclaredName) -> tuple[str, int, int, str]:
        pos = declared.position
        return (pos.file, pos.line, pos.column, declared.name)

    # -- Symbols -------------------------------------------------------------

    def type_of(self, declared: DeclaredName) -> str | None:
        """Return the resolved type string of a declared symbol."""
        return self._symbol_types.get(self._symbol_key(declared))

    def qualified_name(self, type_name: str) -> str:
        """Resolved type string of a type declared in this unit."""
        if self.module_path:
            return f"{self.module_path}.{type_name}"
        return type_name

    # -- Declared types --------------------------------------------------------

    def lookup(self, type_expr: str | None) -> TypeDeclaration | None:
        """Find the unit-local declaration behind a type expression."""
        name = base_type_name(type_expr)
        return self._types.get(name) if name else None

    def underlying_kind(self, type_expr: str | None) -> TypeKind | None:
        decl = self.lookup(type_expr)
        return decl.kind if decl else None

    def is_text(self, type_expr: str | None) -> bool:
        return self.underlying_kind(type_expr) is TypeKind.TEXT

    def is_struct(self, type_expr: str | None) -> bool:
        return self.underlying_kind(type_expr) is TypeKind.STRUCT

    def is_interface(self, type_expr: str | None) -> bool:
        return self.underlying_kind(type_expr) is TypeKind.INTERFACE

    # -- Method sets ---------------------------------------------------------

    def method_set(self, type_name: str, indirect: bool = False) -> frozenset[_Signature]:
        """Method set of ``T`` (``indirect=False``) or ``*T``."""
        table = self._pointer_methods if indirect else self._value_methods
        return table.get(type_name, frozenset())

    def required_methods(self, interface_name: str) -> tuple[Method, ...]:
        decl = self._types.get(interface_name)
        if decl is None or not decl.is_interface:
            return ()
        return decl.methods

    def implements(self, type_name: str, interface_name: str, indirect: bool = False) -> bool:
        """Structural satisfaction of an interface by ``T`` or ``*T``.

        An interface with no methods is satisfied by every type.
        """
        required = self.required_methods(interface_name)
        available = self.method_set(type_name, indirect=indirect)
        return all(m.signature in available for m in required)

    def satisfies(self, type_name: str, interface_name: str) -> bool:
        """True if ``T`` or ``*T`` implements the interface."""
        return self.implements(type_name, interface_name) or self.implements(type_name, interface_name, indirect=True)
