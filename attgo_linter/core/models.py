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
Data models for source units, declarations and style diagnostics.

Every model in this module is a read-only view produced by the host for one
source unit.  Rules never mutate them; the only thing that grows during a
pass is the list of :class:`Diagnostic` objects a rule returns.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

_COMMENT_MARKER_RE = re.compile(r"^\s*(?://|/\*)?\s?")


class TypeKind(str, Enum):
    """Underlying representation of a declared type."""

    TEXT = "text"
    INTEGER = "integer"
    STRUCT = "struct"
    INTERFACE = "interface"
    OTHER = "other"


class ValueKind(str, Enum):
    """What a constant is assigned."""

    TEXT = "text"  # string literal
    INTEGER = "integer"  # integer literal
    OTHER = "other"  # iota, expressions, references


class Scope(str, Enum):
    """Declaration scope of a variable."""

    PACKAGE = "package"
    FUNCTION = "function"


@dataclass(frozen=True, order=True)
class Position:
    """A 1-based source position."""

    file: str
    line: int
    column: int = 1

    @classmethod
    def parse(cls, raw: Any, default_file: str = "") -> Position:
        """Parse ``"path:line:col"``, ``"line:col"`` or a mapping.

        Raises:
            ValueError: If *raw* cannot be interpreted as a position.
        """
        if isinstance(raw, Position):
            return raw
        if isinstance(raw, dict):
            return cls(
                file=str(raw.get("file", default_file)),
                line=int(raw["line"]),
                column=int(raw.get("column", 1)),
            )
        if isinstance(raw, int):
            return cls(file=default_file, line=raw)
        if not isinstance(raw, str) or not raw:
            raise ValueError(f"Invalid position: {raw!r}")

        parts = raw.rsplit(":", 2)
        if len(parts) == 3 and parts[1].isdigit() and parts[2].isdigit():
            return cls(file=parts[0] or default_file, line=int(parts[1]), column=int(parts[2]))
        if len(parts) >= 2 and parts[-2].isdigit() and parts[-1].isdigit():
            return cls(file=default_file, line=int(parts[-2]), column=int(parts[-1]))
        if raw.isdigit():
            return cls(file=default_file, line=int(raw))
        raise ValueError(f"Invalid position: {raw!r}")

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Method:
    """A method of a concrete type, or a method required by an interface."""

    name: str
    params: tuple[str, ...] = ()
    results: tuple[str, ...] = ()
    pointer_receiver: bool = False

    @property
    def signature(self) -> tuple[str, tuple[str, ...], tuple[str, ...]]:
        """Identity used for structural matching (receiver form excluded)."""
        return (self.name, self.params, self.results)


@dataclass(frozen=True)
class StructField:
    """A struct field.  ``name`` is ``None`` for embedded fields."""

    name: str | None
    type_expr: str
    ordinal: int
    position: Position
    embedded: bool = False


@dataclass(frozen=True)
class TypeDeclaration:
    """A named type declared in the unit."""

    name: str
    kind: TypeKind
    position: Position
    fields: tuple[StructField, ...] = ()
    methods: tuple[Method, ...] = ()

    @property
    def is_struct(self) -> bool:
        return self.kind is TypeKind.STRUCT

    @property
    def is_interface(self) -> bool:
        return self.kind is TypeKind.INTERFACE


@dataclass(frozen=True)
class ConstantSpec:
    """One named constant inside a constant group."""

    name: str
    declared_type: str | None
    value_kind: ValueKind
    position: Position


@dataclass(frozen=True)
class ConstantGroup:
    """Constants sharing one declaration block."""

    position: Position
    specs: tuple[ConstantSpec, ...] = ()


@dataclass(frozen=True)
class DeclaredName:
    """A name bound by a variable declaration, with its resolved type."""

    name: str
    position: Position
    resolved_type: str | None = None


@dataclass(frozen=True)
class VariableDeclaration:
    """A single variable declaration statement."""

    position: Position
    scope: Scope
    names: tuple[DeclaredName, ...] = ()
    type_expr: str | None = None
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class Parameter:
    """A function parameter.  Unnamed parameters have ``name=None``."""

    name: str | None
    type_expr: str
    variadic: bool = False


@dataclass(frozen=True)
class FunctionSignature:
    """A function or method declaration."""

    name: str
    position: Position
    receiver: str | None = None
    params: tuple[Parameter, ...] = ()
    results: tuple[str, ...] = ()

    @property
    def is_method(self) -> bool:
        return self.receiver is not None


@dataclass(frozen=True)
class CommentLine:
    """One comment as written in source, markers included."""

    text: str
    position: Position


@dataclass(frozen=True)
class CommentGroup:
    """A run of adjacent comments."""

    lines: tuple[CommentLine, ...]

    @property
    def position(self) -> Position | None:
        return self.lines[0].position if self.lines else None

    @property
    def first_line(self) -> CommentLine | None:
        return self.lines[0] if self.lines else None

    def text(self) -> str:
        """Return the group text with comment markers removed."""
        out: list[str] = []
        for line in self.lines:
            raw = line.text
            if raw.rstrip().endswith("*/"):
                raw = raw.rstrip()[:-2]
            out.append(_COMMENT_MARKER_RE.sub("", raw, count=1).rstrip())
        return "\n".join(out)


@dataclass(frozen=True)
class StringLiteral:
    """A string literal exactly as it appears in source, quotes included."""

    raw: str
    position: Position


@dataclass(frozen=True)
class SourceFile:
    """Per-file lexical information of a unit."""

    path: str
    primary_declaration: Position
    comment_groups: tuple[CommentGroup, ...] = ()
    string_literals: tuple[StringLiteral, ...] = ()


@dataclass(frozen=True)
class SourceUnit:
    """A compilation unit (one package) as supplied by the host."""

    package: str
    module_path: str = ""
    files: tuple[SourceFile, ...] = ()
    types: tuple[TypeDeclaration, ...] = ()
    constants: tuple[ConstantGroup, ...] = ()
    variables: tuple[VariableDeclaration, ...] = ()
    functions: tuple[FunctionSignature, ...] = ()
    path: str | None = None

    @property
    def name(self) -> str:
        return self.module_path or self.package


@dataclass(frozen=True)
class Diagnostic:
    """A style finding.  Immutable once created."""

    position: Position
    message: str
    rule_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule_id": self.rule_id,
            "message": self.message,
            "file_path": self.position.file,
            "line": self.position.line,
            "column": self.position.column,
        }

    def __str__(self) -> str:
        return f"{self.position}: {self.message} ({self.rule_id})"


@dataclass
class UnitResult:
    """Results from linting a single source unit."""

    unit_name: str
    unit_path: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    rules_used: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def is_clean(self) -> bool:
        return not self.diagnostics

    def get_diagnostics_by_rule(self, rule_id: str) -> list[Diagnostic]:
        """Get all diagnostics emitted by one rule."""
        return [d for d in self.diagnostics if d.rule_id == rule_id]

    def to_dict(self) -> dict[str, Any]:
        return {
            "unit_name": self.unit_name,
            "unit_path": self.unit_path,
            "is_clean": self.is_clean,
            "diagnostics_count": len(self.diagnostics),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "rules_used": self.rules_used,
            "duration_ms": int(self.duration_seconds * 1000),
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class Report:
    """Aggregated report from linting one or more units."""

    unit_results: list[UnitResult] = field(default_factory=list)
    total_units: int = 0
    total_diagnostics: int = 0
    counts_by_rule: dict[str, int] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def add_unit_result(self, result: UnitResult):
        """Add a unit result and update counters."""
        self.unit_results.append(result)
        self.total_units += 1
        self.total_diagnostics += len(result.diagnostics)
        for diagnostic in result.diagnostics:
            self.counts_by_rule[diagnostic.rule_id] = self.counts_by_rule.get(diagnostic.rule_id, 0) + 1

    @property
    def clean_units(self) -> int:
        return sum(1 for r in self.unit_results if r.is_clean)

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": {
                "total_units": self.total_units,
                "clean_units": self.clean_units,
                "total_diagnostics": self.total_diagnostics,
                "diagnostics_by_rule": dict(sorted(self.counts_by_rule.items())),
                "timestamp": self.timestamp.isoformat(),
            },
            "results": [r.to_dict() for r in self.unit_results],
        }
