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
String literal style rule.

Interpreted string literals with many escape sequences are hard to read.
Newline, tab and carriage-return escapes are not counted since a raw string
cannot express them.  Literals whose content contains a backtick are never
reported because they cannot be written as raw strings.
"""

from __future__ import annotations

from ..index import DeclarationIndex
from ..models import Diagnostic
from ..resolver import TypeResolver
from .base import BaseRule

DOUBLE_QUOTE = '"'
BACKTICK = "`"
ESCAPE = "\\"
MIN_ESCAPES = 3

_CONTROL_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


def decode(body: str) -> str:
    """Approximate the runtime value of a literal body (quotes removed)."""
    out: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == ESCAPE and i + 1 < len(body):
            nxt = body[i + 1]
            out.append(_CONTROL_ESCAPES.get(nxt, nxt))
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def count_escapes(raw: str) -> int:
    """Count escape pairs that a raw string would make unnecessary."""
    count = 0
    i = 0
    while i < len(raw) - 1:
        if raw[i] == ESCAPE:
            if raw[i + 1] not in _CONTROL_ESCAPES:
                count += 1
            i += 2
            continue
        i += 1
    return count


class StringLiteralStyleRule(BaseRule):
    """Flags interpreted string literals that would read better as raw strings."""

    name = "raw_string"
    config_key = "enable_raw_string"
    default_enabled = False
    description = "Strings with many escape sequences should be raw strings."
    remediation = "Rewrite the literal with backticks."

    def evaluate(self, index: DeclarationIndex, resolver: TypeResolver) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for literal in index.string_literals():
            raw = literal.raw
            if len(raw) < 2 or not raw.startswith(DOUBLE_QUOTE):
                continue
            if BACKTICK in decode(raw[1:-1]):
                continue
            count = count_escapes(raw)
            if count >= MIN_ESCAPES:
                diagnostics.append(
                    self._report(
                        literal.position,
                        f"string has {count} escape sequences; consider using a raw string "
                        "(backticks) for better readability",
                    )
                )
        return diagnostics
