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
Interface conformance rule.

When a struct already satisfies an interface declared in the same unit, the
relationship should be pinned with a compile-time assertion::

    var _ Store = (*MemoryStore)(nil)

Existing assertions are recognised by name only: the declared type's last
component must be the interface name and the single initializer must have
the form ``(*T)(nil)``.  Two interfaces with the same simple name from
different packages are therefore indistinguishable.
"""

from __future__ import annotations

import logging
import re

from ..index import DeclarationIndex
from ..models import Diagnostic, VariableDeclaration
from ..patterns import BLANK_IDENTIFIER, MEMBER_SEPARATOR
from ..resolver import TypeResolver
from .base import BaseRule

logger = logging.getLogger(__name__)

_NIL_POINTER_CONVERSION_RE = re.compile(r"^\(\s*\*\s*([\w.]+)\s*\)\s*\(\s*nil\s*\)$")


def _last_component(name: str) -> str:
    return name.rsplit(MEMBER_SEPARATOR, 1)[-1]


def parse_assertion(var: VariableDeclaration) -> tuple[str, str] | None:
    """Return ``(interface, struct)`` if *var* is a conformance assertion."""
    if len(var.names) != 1 or var.names[0].name != BLANK_IDENTIFIER:
        return None
    if not var.type_expr or len(var.values) != 1:
        return None
    match = _NIL_POINTER_CONVERSION_RE.match(var.values[0].strip())
    if not match:
        return None
    return _last_component(var.type_expr.strip()), _last_component(match.group(1))


class InterfaceConformanceRule(BaseRule):
    """Suggests compile-time assertions for structs that satisfy local interfaces."""

    name = "interface_check"
    config_key = "enable_interface_check"
    default_enabled = False
    description = "Structs implementing a local interface should assert it at compile time."
    remediation = "Add `var _ Interface = (*Struct)(nil)` next to the struct."

    def evaluate(self, index: DeclarationIndex, resolver: TypeResolver) -> list[Diagnostic]:
        interfaces = [i for i in index.interfaces() if i.methods]
        if not interfaces:
            return []

        asserted: set[tuple[str, str]] = set()
        for var in index.package_variables():
            pair = parse_assertion(var)
            if pair is not None:
                logger.debug("Existing assertion: %s = (*%s)(nil)", *pair)
                asserted.add(pair)

        diagnostics: list[Diagnostic] = []
        for struct in index.structs():
            if not resolver.method_set(struct.name, indirect=True):
                continue
            for iface in interfaces:
                if (iface.name, struct.name) in asserted:
                    continue
                if not resolver.satisfies(struct.name, iface.name):
                    continue
                diagnostics.append(
                    self._report(
                        struct.position,
                        f'struct "{struct.name}" implements interface "{iface.name}"; '
                        f"consider adding: var _ {iface.name} = (*{struct.name})(nil)",
                    )
                )
        return diagnostics
