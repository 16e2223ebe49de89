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
Comment style rule.

The first line of every comment group should start with a capital letter.
Lines that start with an identifier (``someFunc is ...``), directives,
task markers, URLs and license boilerplate are left alone.
"""

from __future__ import annotations

import unicodedata

from ..index import DeclarationIndex
from ..models import CommentLine, Diagnostic
from ..resolver import TypeResolver
from .base import BaseRule

SKIP_PREFIXES = ("nolint", "todo", "fixme", "hack", "xxx", "bug")
DIRECTIVE_PREFIXES = ("+build", "go:")
URL_MARKER = "://"

LICENSE_PHRASES = (
    "you may not use this file",
    "distributed under the license",
    "without warranties or conditions",
    "limitations under the license",
    "permission is hereby granted",
    "the above copyright notice",
    "in no event shall",
    '"as is"',
)

COMMON_WORDS = frozenset(
    "this that these those it its the a an here there where when "
    "see use set get all any some each for not but and or".split()
)

IDENTIFIER_FOLLOWERS = frozenset(
    "is are was were has have had contains returns holds stores "
    "represents defines implements provides specifies".split()
)


def comment_body(raw: str) -> str:
    """Strip one set of comment markers and surrounding whitespace."""
    text = raw.strip()
    if text.startswith("//"):
        text = text[2:]
    elif text.startswith("/*"):
        text = text[2:]
    if text.endswith("*/"):
        text = text[:-2]
    return text.strip()


def is_punctuation(ch: str) -> bool:
    return unicodedata.category(ch).startswith("P")


def should_skip(text: str) -> bool:
    lower = text.lower()
    if lower.startswith(SKIP_PREFIXES):
        return True
    if URL_MARKER in text:
        return True
    if text.startswith(DIRECTIVE_PREFIXES):
        return True
    return any(phrase in lower for phrase in LICENSE_PHRASES)


def looks_like_identifier(text: str) -> bool:
    """True if the comment opens with a code reference such as ``myVar is``."""
    words = text.split()
    if not words:
        return False
    first = words[0]
    if first.lower() in COMMON_WORDS:
        return False
    if "_" in first:
        return True
    if any(ch.isupper() for ch in first[1:]):
        return True
    return len(words) >= 2 and words[1].lower() in IDENTIFIER_FOLLOWERS


class CommentStyleRule(BaseRule):
    """Flags comment groups that open with a lower-case word."""

    name = "capital_comment"
    config_key = "enable_capital_comment"
    default_enabled = False
    description = "Comments should start with a capital letter."
    remediation = "Capitalise the first word of the comment."

    def evaluate(self, index: DeclarationIndex, resolver: TypeResolver) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for _source_file, group in index.comment_groups():
            line = group.first_line
            if line is not None and self._violates(line):
                diagnostics.append(self._report(line.position, "comment should start with a capital letter"))
        return diagnostics

    @staticmethod
    def _violates(line: CommentLine) -> bool:
        text = comment_body(line.text)
        if not text:
            return False
        first = text[0]
        if is_punctuation(first) or first.isdigit():
            return False
        if should_skip(text):
            return False
        return first.islower() and not looks_like_identifier(text)
