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

"""Tests for the type pattern matcher."""

from __future__ import annotations

import pytest

from attgo_linter.core.patterns import (
    TypePattern,
    TypePatternSet,
    base_type_name,
    has_name_suffix,
    matches,
    matches_any,
)


class TestBoundaryMatching:
    @pytest.mark.parametrize(
        "type_name, pattern",
        [
            ("github.com/rs/zerolog.Logger", "zerolog.Logger"),
            ("*github.com/rs/zerolog.Logger", "*zerolog.Logger"),
            ("go.uber.org/zap.SugaredLogger", "zap.SugaredLogger"),
            ("log/slog.Logger", "slog.Logger"),
            ("log.Logger", "log.Logger"),
            ("github.com/rs/zerolog.Logger", "Logger"),
        ],
    )
    def test_matches(self, type_name, pattern):
        assert matches(type_name, pattern)

    @pytest.mark.parametrize(
        "type_name, pattern",
        [
            # suffix does not start at a separator
            ("example.com/myzerolog.Logger", "zerolog.Logger"),
            ("github.com/acme/catalog.Logger", "log.Logger"),
            # indirection must agree
            ("*github.com/rs/zerolog.Logger", "zerolog.Logger"),
            ("github.com/rs/zerolog.Logger", "*zerolog.Logger"),
            # not a suffix at all
            ("github.com/rs/zerolog.Event", "zerolog.Logger"),
            ("github.com/rs/zerolog.Logger", ""),
        ],
    )
    def test_does_not_match(self, type_name, pattern):
        assert not matches(type_name, pattern)

    def test_slog_pattern_does_not_match_plain_log(self):
        assert not matches("log.Logger", "slog.Logger")

    def test_matches_any(self):
        patterns = ["zap.Logger", "*zap.Logger"]
        assert matches_any("*go.uber.org/zap.Logger", patterns)
        assert not matches_any("go.uber.org/zap.SugaredLogger", patterns)
        assert not matches_any(None, patterns)
        assert not matches_any("", patterns)


class TestTypePattern:
    def test_parse_indirect(self):
        pattern = TypePattern.parse(" *zap.Logger ")
        assert pattern.indirect is True
        assert pattern.suffix == "zap.Logger"
        assert pattern.text == "*zap.Logger"

    def test_parse_direct(self):
        pattern = TypePattern.parse("zap.Logger")
        assert pattern.indirect is False
        assert pattern.matches("go.uber.org/zap.Logger")

    def test_pattern_set_skips_blank_entries(self):
        patterns = TypePatternSet(["", "  ", "zap.Logger"])
        assert len(patterns) == 1
        assert "go.uber.org/zap.Logger" in patterns
        assert "*go.uber.org/zap.Logger" not in patterns

    def test_pattern_set_returns_first_match(self):
        patterns = TypePatternSet(["Logger", "zap.Logger"])
        assert patterns.match("go.uber.org/zap.Logger").text == "Logger"
        assert patterns.match(None) is None


class TestNameHelpers:
    def test_has_name_suffix(self):
        assert has_name_suffix("SANType", ["Type", "Status"])
        assert has_name_suffix("OrderStatus", ["Type", "Status"])
        assert not has_name_suffix("Color", ["Type", "Status"])
        assert not has_name_suffix("Color", [""])

    @pytest.mark.parametrize(
        "expr, expected",
        [
            ("*pkg.Service", "Service"),
            ("Service", "Service"),
            ("...Option", "Option"),
            ("...pkg.Option", "Option"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_base_type_name(self, expr, expected):
        assert base_type_name(expr) == expected
