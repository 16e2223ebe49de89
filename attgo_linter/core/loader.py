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
Source unit loader.

The host (a compiler front end or a ``go/packages`` driver) exports every
resolved unit as a YAML or JSON document.  :class:`UnitLoader` turns such a
document into a read-only :class:`~attgo_linter.core.models.SourceUnit`.

Document layout::

    package: orders
    module: example.com/shop/orders
    files:
      - path: orders/service.go
        package: "3:1"                  # position of the package clause
        comments:                       # comment groups, in source order
          - - {pos: "1:1", text: "// Copyright 2024 Acme Ltd."}
        strings:
          - {pos: "40:15", value: '"C:\\\\Users"'}
    types:
      - name: OrderService
        pos: orders/service.go:10:6
        kind: struct                    # text|integer|struct|interface|other
        fields:
          - {name: log, type: zerolog.Logger, pos: orders/service.go:11:2}
          - {type: Base, embedded: true}
        methods:
          - {name: Get, params: [string], results: [error], pointer_receiver: true}
    constants:
      - pos: orders/types.go:5:1
        specs:
          - {name: OrderTypeRetail, type: OrderType, value: text, pos: orders/types.go:6:2}
    variables:
      - pos: orders/log.go:7:1
        scope: package                  # package|function
        type: zerolog.Logger            # declared type expression, optional
        values: []                      # initializer expressions
        names:
          - {name: log, pos: orders/log.go:7:5, type: github.com/rs/zerolog.Logger}
    functions:
      - name: NewOrderService
        pos: orders/service.go:20:6
        receiver: null
        params:
          - {name: ctx, type: context.Context}
          - {name: opts, type: Option, variadic: true}
        results: ["*OrderService", error]

Positions are ``"path:line:col"``; entries may instead carry a ``file`` key
and use ``"line:col"``.  The ``type`` of a declared variable name is the
host-resolved type string including module path and ``*`` marker.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import yaml

from .exceptions import UnitLoadError
from .models import (
    CommentGroup,
    CommentLine,
    ConstantGroup,
    ConstantSpec,
    DeclaredName,
    FunctionSignature,
    Method,
    Parameter,
    Position,
    Scope,
    SourceFile,
    SourceUnit,
    StringLiteral,
    StructField,
    TypeDeclaration,
    TypeKind,
    ValueKind,
    VariableDeclaration,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UnitLoader:
    """Loads unit documents exported by the host."""

    JSON_EXTENSIONS = {".json"}
    YAML_EXTENSIONS = {".yaml", ".yml"}

    def __init__(self, max_file_size_mb: int = 50):
        """
        Initialize unit loader.

        Args:
            max_file_size_mb: Maximum document size to read in MB
        """
        self.max_file_size_bytes = max_file_size_mb * 1024 * 1024

    def load_unit(self, path: str | Path) -> SourceUnit:
        """
        Load a unit document from disk.

        Args:
            path: Path to a ``.yaml``/``.yml`` or ``.json`` document

        Returns:
            The parsed SourceUnit

        Raises:
            UnitLoadError: If the document is missing, unreadable or malformed
        """
        path = Path(path)
        if not path.exists():
            raise UnitLoadError(f"Unit document does not exist: {path}")
        if not path.is_file():
            raise UnitLoadError(f"Path is not a file: {path}")
        if path.stat().st_size > self.max_file_size_bytes:
            raise UnitLoadError(f"Unit document exceeds size limit: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise UnitLoadError(f"Failed to read {path}: {e}") from e

        try:
            if path.suffix.lower() in self.JSON_EXTENSIONS:
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise UnitLoadError(f"Failed to parse {path}: {e}") from e

        return self.load_document(data, source=str(path))

    def load_document(self, data: Any, source: str | None = None) -> SourceUnit:
        """Build a SourceUnit from an already-decoded document."""
        where = source or "<document>"
        if not isinstance(data, dict):
            raise UnitLoadError(f"{where}: unit document must be a mapping")
        if not data.get("package"):
            raise UnitLoadError(f"{where}: missing required field: package")

        try:
            files = tuple(self._parse_file(f) for f in data.get("files") or [])
            default_file = files[0].path if files else ""
            unit = SourceUnit(
                package=str(data["package"]),
                module_path=str(data.get("module") or ""),
                files=files,
                types=self._parse_all(data, "types", self._parse_type, default_file),
                constants=self._parse_all(data, "constants", self._parse_constant_group, default_file),
                variables=self._parse_all(data, "variables", self._parse_variable, default_file),
                functions=self._parse_all(data, "functions", self._parse_function, default_file),
                path=source,
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise UnitLoadError(f"{where}: malformed unit document: {e!r}") from e

        logger.debug(
            "Loaded unit %s: %d files, %d types, %d functions",
            unit.name,
            len(unit.files),
            len(unit.types),
            len(unit.functions),
        )
        return unit

    # -- Sections -------------------------------------------------------------

    @staticmethod
    def _parse_all(
        data: dict[str, Any], key: str, parse: Callable[[dict[str, Any], str], T], default_file: str
    ) -> tuple[T, ...]:
        return tuple(parse(entry, entry.get("file", default_file)) for entry in data.get(key) or [])

    def _parse_file(self, entry: dict[str, Any]) -> SourceFile:
        path = str(entry["path"])
        groups = []
        for raw_group in entry.get("comments") or []:
            lines = tuple(
                CommentLine(text=str(line["text"]), position=Position.parse(line["pos"], path)) for line in raw_group
            )
            if lines:
                groups.append(CommentGroup(lines=lines))
        strings = tuple(
            StringLiteral(raw=str(s["value"]), position=Position.parse(s["pos"], path))
            for s in entry.get("strings") or []
        )
        return SourceFile(
            path=path,
            primary_declaration=Position.parse(entry.get("package", 1), path),
            comment_groups=tuple(groups),
            string_literals=strings,
        )

    def _parse_type(self, entry: dict[str, Any], default_file: str) -> TypeDeclaration:
        position = Position.parse(entry["pos"], default_file)
        fields = tuple(
            StructField(
                name=f.get("name"),
                type_expr=str(f["type"]),
                ordinal=ordinal,
                position=Position.parse(f["pos"], position.file) if "pos" in f else position,
                embedded=bool(f.get("embedded", False)) or not f.get("name"),
            )
            for ordinal, f in enumerate(entry.get("fields") or [])
        )
        methods = tuple(
            Method(
                name=str(m["name"]),
                params=tuple(str(p) for p in m.get("params") or []),
                results=tuple(str(r) for r in m.get("results") or []),
                pointer_receiver=bool(m.get("pointer_receiver", False)),
            )
            for m in entry.get("methods") or []
        )
        return TypeDeclaration(
            name=str(entry["name"]),
            kind=TypeKind(entry.get("kind", TypeKind.OTHER.value)),
            position=position,
            fields=fields,
            methods=methods,
        )

    def _parse_constant_group(self, entry: dict[str, Any], default_file: str) -> ConstantGroup:
        position = Position.parse(entry["pos"], default_file)
        specs = tuple(
            ConstantSpec(
                name=str(s["name"]),
                declared_type=s.get("type"),
                value_kind=ValueKind(s.get("value", ValueKind.OTHER.value)),
                position=Position.parse(s["pos"], position.file) if "pos" in s else position,
            )
            for s in entry.get("specs") or []
        )
        return ConstantGroup(position=position, specs=specs)

    def _parse_variable(self, entry: dict[str, Any], default_file: str) -> VariableDeclaration:
        position = Position.parse(entry["pos"], default_file)
        names = []
        for raw in entry.get("names") or []:
            if isinstance(raw, str):
                names.append(DeclaredName(name=raw, position=position))
            else:
                names.append(
                    DeclaredName(
                        name=str(raw["name"]),
                        position=Position.parse(raw["pos"], position.file) if "pos" in raw else position,
                        resolved_type=raw.get("type"),
                    )
                )
        return VariableDeclaration(
            position=position,
            scope=Scope(entry.get("scope", Scope.PACKAGE.value)),
            names=tuple(names),
            type_expr=entry.get("type"),
            values=tuple(str(v) for v in entry.get("values") or []),
        )

    def _parse_function(self, entry: dict[str, Any], default_file: str) -> FunctionSignature:
        params = []
        for p in entry.get("params") or []:
            type_expr = str(p["type"])
            variadic = bool(p.get("variadic", False)) or type_expr.startswith("...")
            params.append(Parameter(name=p.get("name"), type_expr=type_expr.removeprefix("..."), variadic=variadic))
        return FunctionSignature(
            name=str(entry["name"]),
            position=Position.parse(entry["pos"], default_file),
            receiver=entry.get("receiver"),
            params=tuple(params),
            results=tuple(str(r) for r in entry.get("results") or []),
        )


def load_unit(path: str | Path, max_file_size_mb: int = 50) -> SourceUnit:
    """
    Convenience function to load a unit document.

    Args:
        path: Path to the unit document
        max_file_size_mb: Maximum document size to read in MB

    Returns:
        Loaded SourceUnit
    """
    loader = UnitLoader(max_file_size_mb=max_file_size_mb)
    return loader.load_unit(path)
