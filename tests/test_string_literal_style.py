# Copyright 2026 Cisco Systems, Inc. and its affiliates
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

"""Tests for the raw string suggestion rule."""

from __future__ import annotations

import pytest

from attgo_linter.core.rules.string_literal_style import StringLiteralStyleRule, count_escapes, decode

RULE_ID = "attgo_raw_string"


def _unit_with(make_unit, *raw_literals: str):
    strings = [{"pos": f"{i + 10}:5", "value": raw} for i, raw in enumerate(raw_literals)]
    return make_unit(files=[{"path": "str.go", "package": "1:1", "strings": strings}])


class TestEscapeCounting:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (r'"C:\\Users\\name\\Documents\\file.txt"', 4),
            (r'"hello \"world\""', 2),
            (r'"line1\nline2"', 0),
            (r'"\t\r\n"', 0),
            (r'"\d+\.\d+"', 3),
            (r'"\\n"', 1),
            ('"plain"', 0),
        ],
    )
    def test_count_escapes(self, raw, expected):
        assert count_escapes(raw) == expected

    def test_decode(self):
        assert decode(r"a\nb") == "a\nb"
        assert decode(r"\"q\"") == '"q"'
        assert decode(r"\`") == "`"
        assert decode("trailing\\") == "trailing\\"


class TestStringLiteralStyle:
    def test_windows_path_is_flagged(self, make_unit, evaluate):
        unit = _unit_with(make_unit, r'"C:\\Users\\name\\Documents\\file.txt"')
        diagnostics = evaluate(StringLiteralStyleRule(), unit)
        assert len(diagnostics) == 1
        d = diagnostics[0]
        assert d.rule_id == RULE_ID
        assert (d.position.file, d.position.line, d.position.column) == ("str.go", 10, 5)
        assert d.message == (
            "string has 4 escape sequences; consider using a raw string (backticks) for better readability"
        )

    def test_two_escapes_are_not_flagged(self, make_unit, evaluate):
        unit = _unit_with(make_unit, r'"hello \"world\""')
        assert evaluate(StringLiteralStyleRule(), unit) == []

    def test_control_escapes_are_not_counted(self, make_unit, evaluate):
        unit = _unit_with(make_unit, r'"line1\nline2\tline3\r\n"')
        assert evaluate(StringLiteralStyleRule(), unit) == []

    def test_exactly_three_escapes_are_flagged(self, make_unit, evaluate):
        unit = _unit_with(make_unit, r'"\"a\" \\ b"')
        diagnostics = evaluate(StringLiteralStyleRule(), unit)
        assert len(diagnostics) == 1
        assert diagnostics[0].message.startswith("string has 3 escape sequences")

    def test_literal_containing_backtick_is_never_flagged(self, make_unit, evaluate):
        unit = _unit_with(make_unit, r'"\\a\\b\\c\\d `cmd`"', r'"\"\"\"\`"')
        assert evaluate(StringLiteralStyleRule(), unit) == []

    def test_raw_and_short_literals_are_skipped(self, make_unit, evaluate):
        unit = _unit_with(make_unit, r"`C:\Users\name\file`", '"', "")
        assert evaluate(StringLiteralStyleRule(), unit) == []
