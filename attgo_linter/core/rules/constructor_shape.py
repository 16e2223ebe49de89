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
Constructor shape rule.

Constructors of service-like structs (``NewOrderService``, ``CreateClient``)
that take more than three parameters should switch to functional options.
``context.Context`` parameters are not counted, and a constructor that
already accepts variadic options is left alone.
"""

from __future__ import annotations

import re

from ..index import DeclarationIndex
from ..models import Diagnostic, FunctionSignature, Parameter
from ..patterns import INDIRECTION_MARKER, base_type_name, has_name_suffix
from ..resolver import TypeResolver
from .base import BaseRule

CONSTRUCTOR_PREFIXES = ("New", "Create")
SERVICE_TYPE_SUFFIXES = ("Service", "Manager", "Handler", "Controller", "Provider", "Client", "Server")
OPTION_SUFFIXES = ("Option", "Opt")
CONTEXT_TYPE = "context.Context"
VARIADIC_MARKER = "..."
MAX_PARAMS = 3

_IDENT_RE = re.compile(r"^\*?\s*([A-Za-z_]\w*)$")
_FUNC_TYPE_RE = re.compile(r"^func\s*\(")


def returned_type_name(fn: FunctionSignature) -> str | None:
    """Name of the first result written as ``T`` or ``*T`` (unqualified)."""
    for result in fn.results:
        match = _IDENT_RE.match(result.strip())
        if match:
            return match.group(1)
    return None


def is_context_param(param: Parameter) -> bool:
    return param.type_expr.strip() == CONTEXT_TYPE


def is_options_param(param: Parameter) -> bool:
    type_expr = param.type_expr.strip()
    if not (param.variadic or type_expr.startswith(VARIADIC_MARKER)):
        return False
    element = type_expr.removeprefix(VARIADIC_MARKER).strip()
    if _FUNC_TYPE_RE.match(element):
        return True
    if element.startswith(INDIRECTION_MARKER):
        return False
    return base_type_name(element).endswith(OPTION_SUFFIXES)


def counted_params(fn: FunctionSignature) -> int | None:
    """Number of non-context parameters, or ``None`` if options are already used."""
    count = 0
    for param in fn.params:
        if is_context_param(param):
            continue
        if is_options_param(param):
            return None
        count += 1
    return count


class ConstructorShapeRule(BaseRule):
    """Suggests functional options for wide service constructors."""

    name = "func_opts"
    config_key = "enable_func_opts"
    default_enabled = False
    description = "Service constructors with many parameters should use functional options."
    remediation = "Keep required dependencies as parameters and move the rest into `...Option` arguments."

    def evaluate(self, index: DeclarationIndex, resolver: TypeResolver) -> list[Diagnostic]:
        service_types = {s.name for s in index.structs() if has_name_suffix(s.name, SERVICE_TYPE_SUFFIXES)}
        diagnostics: list[Diagnostic] = []
        if not service_types:
            return diagnostics

        for fn in index.free_functions():
            if not fn.name.startswith(CONSTRUCTOR_PREFIXES):
                continue
            if returned_type_name(fn) not in service_types:
                continue
            count = counted_params(fn)
            if count is not None and count > MAX_PARAMS:
                diagnostics.append(
                    self._report(
                        fn.position,
                        f'constructor "{fn.name}" has many parameters; consider using functional options pattern',
                    )
                )
        return diagnostics
