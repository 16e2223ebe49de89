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
Copyright freshness rule.

The header comment of a file (the first comment group before its package
clause) should carry the current year, either alone or as the end of a
range such as ``2023-2026``.  Files without a header or without a parseable
year are left to header-format tooling.
"""

from __future__ import annotations

import re
from datetime import datetime

from ..index import DeclarationIndex
from ..models import Diagnostic
from ..resolver import TypeResolver
from .base import BaseRule

COPYRIGHT_YEAR_RE = re.compile(r"copyright\s*(?:©|\(c\))?\s*(?:\d{4}\s*-\s*)?(\d{4})", re.IGNORECASE | re.ASCII)


def extract_year(text: str) -> int | None:
    """Return the (last) copyright year found in *text*."""
    match = COPYRIGHT_YEAR_RE.search(text)
    if not match:
        return None
    return int(match.group(1))


class CopyrightFreshnessRule(BaseRule):
    """Flags file headers whose copyright year is in the past."""

    name = "current_year"
    config_key = "enable_current_year"
    default_enabled = True
    description = "Copyright headers should carry the current year."
    remediation = "Update the copyright year (or the end of the year range) to the current year."

    def __init__(self, current_year: int | None = None):
        self.current_year = current_year if current_year is not None else datetime.now().year

    def evaluate(self, index: DeclarationIndex, resolver: TypeResolver) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for source_file in index.files:
            header = index.header_comment(source_file)
            if header is None or header.position is None:
                continue
            year = extract_year(header.text())
            if year is not None and year < self.current_year:
                diagnostics.append(
                    self._report(
                        header.position,
                        f"copyright year {year} is outdated; should be {self.current_year} "
                        "for new or modified files",
                    )
                )
        return diagnostics
