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
Declaration index: the per-unit catalogue every rule reads from.

The index is built once per pass by :meth:`DeclarationIndex.build` and is
read-only afterwards, so rules may evaluate it in any order (or concurrently)
without coordination.  Everything a rule needs that is purely syntactic lives
here; resolved type information lives in :mod:`attgo_linter.core.resolver`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from .models import (
    CommentGroup,
    ConstantGroup,
    ConstantSpec,
    FunctionSignature,
    Scope,
    SourceFile,
    SourceUnit,
    StringLiteral,
    StructField,
    TypeDeclaration,
    VariableDeclaration,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeclarationIndex:
    """Immutable catalogue of the declarations of one source unit."""

    unit: SourceUnit
    types: tuple[TypeDeclaration, ...]
    constant_groups: tuple[ConstantGroup, ...]
    variables: tuple[VariableDeclaration, ...]
    functions: tuple[FunctionSignature, ...]
    files: tuple[SourceFile, ...]
    _types_by_name: dict[str, TypeDeclaration] = field(repr=False, compare=False)

    @classmethod
    def build(cls, unit: SourceUnit) -> DeclarationIndex:
        """Collect the declarations of *unit* into an index.

        Type names are unique within a unit; if the host hands over a
        duplicate, the first declaration wins and the rest are logged.
        """
        by_name: dict[str, TypeDeclaration] = {}
        for decl in unit.types:
            if decl.name in by_name:
                logger.debug("Duplicate type declaration %s at %s ignored", decl.name, decl.position)
                continue
            by_name[decl.name] = decl

        return cls(
            unit=unit,
            types=tuple(by_name.values()),
            constant_groups=unit.constants,
            variables=unit.variables,
            functions=unit.functions,
            files=unit.files,
            _types_by_name=by_name,
        )

    # -- Type declarations --------------------------------------------------

    def get_type(self, name: str) -> TypeDeclaration | None:
        """Look up a type declared in this unit by its simple name."""
        return self._types_by_name.get(name)

    def structs(self) -> tuple[TypeDeclaration, ...]:
        return tuple(t for t in self.types if t.is_struct)

    def interfaces(self) -> tuple[TypeDeclaration, ...]:
        return tuple(t for t in self.types if t.is_interface)

    def struct_fields(self, type_name: str) -> tuple[StructField, ...]:
        decl = self.get_type(type_name)
        if decl is None or not decl.is_struct:
            return ()
        return decl.fields

    # -- Values --------------------------------------------------------------

    def constants(self) -> Iterator[ConstantSpec]:
        """Iterate every constant of every group in declaration order."""
        for group in self.constant_groups:
            yield from group.specs

    def package_variables(self) -> tuple[VariableDeclaration, ...]:
        """Variable declarations at unit scope (not function-local)."""
        return tuple(v for v in self.variables if v.scope is Scope.PACKAGE)

    def free_functions(self) -> tuple[FunctionSignature, ...]:
        """Functions without a receiver."""
        return tuple(f for f in self.functions if not f.is_method)

    # -- Lexical -------------------------------------------------------------

    def comment_groups(self) -> Iterator[tuple[SourceFile, CommentGroup]]:
        for source_file in self.files:
            for group in source_file.comment_groups:
                yield source_file, group

    def string_literals(self) -> Iterator[StringLiteral]:
        for source_file in self.files:
            yield from source_file.string_literals

    def header_comment(self, source_file: SourceFile) -> CommentGroup | None:
        """First comment group positioned before the file's primary declaration."""
        primary = source_file.primary_declaration
        for group in source_file.comment_groups:
            pos = group.position
            if pos is None:
                continue
            if (pos.line, pos.column) < (primary.line, primary.column):
                return group
        return None
