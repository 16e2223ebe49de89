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
Type pattern matching for configurable type lists.

A pattern is a type name as a user would write it in configuration, e.g.
``zerolog.Logger`` or ``*zap.SugaredLogger``.  The type string it is matched
against is fully resolved by the host and includes the module path, e.g.
``*github.com/rs/zerolog.Logger``.

Two dimensions are matched:

* **indirection** – a ``*`` pattern only matches ``*`` types and a plain
  pattern never matches a ``*`` type;
* **suffix at a boundary** – the pattern must be a suffix of the type string
  that starts right after a module-path (``/``) or member (``.``) separator,
  or cover the whole string.  ``zerolog.Logger`` therefore matches
  ``github.com/rs/zerolog.Logger`` but not ``example.com/myzerolog.Logger``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

INDIRECTION_MARKER = "*"
PATH_SEPARATOR = "/"
MEMBER_SEPARATOR = "."
BLANK_IDENTIFIER = "_"

_BOUNDARY_CHARS = (PATH_SEPARATOR, MEMBER_SEPARATOR)


def matches(type_name: str, pattern: str) -> bool:
    """Return True if *type_name* matches *pattern* at a separator boundary."""
    if pattern.startswith(INDIRECTION_MARKER):
        if not type_name.startswith(INDIRECTION_MARKER):
            return False
        type_name = type_name[len(INDIRECTION_MARKER) :]
        pattern = pattern[len(INDIRECTION_MARKER) :]
    elif type_name.startswith(INDIRECTION_MARKER):
        return False

    if not pattern or not type_name.endswith(pattern):
        return False

    prefix = type_name[: len(type_name) - len(pattern)]
    return prefix == "" or prefix.endswith(_BOUNDARY_CHARS)


def matches_any(type_name: str | None, patterns: Iterable[str]) -> bool:
    """Return True if *type_name* matches at least one of *patterns*."""
    if not type_name:
        return False
    return any(matches(type_name, p) for p in patterns)


def has_name_suffix(name: str, suffixes: Iterable[str]) -> bool:
    """Plain suffix test used for enum-like type names (``SANType``)."""
    return any(suffix and name.endswith(suffix) for suffix in suffixes)


def base_type_name(type_expr: str | None) -> str:
    """Strip indirection, variadic and qualifier from a type expression.

    ``*pkg.Service`` → ``Service``; ``...Option`` → ``Option``.
    """
    if not type_expr:
        return ""
    name = type_expr.strip()
    if name.startswith("..."):
        name = name[3:]
    name = name.lstrip(INDIRECTION_MARKER).strip()
    return name.rsplit(MEMBER_SEPARATOR, 1)[-1]


@dataclass(frozen=True)
class TypePattern:
    """A parsed type pattern, compiled once from configuration."""

    text: str
    indirect: bool
    suffix: str

    @classmethod
    def parse(cls, text: str) -> TypePattern:
        text = text.strip()
        indirect = text.startswith(INDIRECTION_MARKER)
        suffix = text[len(INDIRECTION_MARKER) :] if indirect else text
        return cls(text=text, indirect=indirect, suffix=suffix)

    def matches(self, type_name: str) -> bool:
        return matches(type_name, self.text)


class TypePatternSet:
    """An ordered collection of :class:`TypePattern`."""

    def __init__(self, patterns: Iterable[str]):
        self.patterns: tuple[TypePattern, ...] = tuple(TypePattern.parse(p) for p in patterns if p and p.strip())

    def match(self, type_name: str | None) -> TypePattern | None:
        """Return the first pattern matching *type_name*, or ``None``."""
        if not type_name:
            return None
        for pattern in self.patterns:
            if pattern.matches(type_name):
                return pattern
        return None

    def __contains__(self, type_name: str | None) -> bool:
        return self.match(type_name) is not None

    def __len__(self) -> int:
        return len(self.patterns)
