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

"""Tests for the package-level logger rule."""

from __future__ import annotations

from attgo_linter.core.rules.logger_placement import LoggerPlacementRule

RULE_ID = "attgo_no_pkg_logger"


def _var(name: str, resolved: str, line: int, scope: str = "package") -> dict:
    return {
        "pos": f"log.go:{line}:1",
        "scope": scope,
        "names": [{"name": name, "pos": f"log.go:{line}:5", "type": resolved}],
    }


class TestLoggerPlacement:
    def test_flags_package_level_zerolog(self, make_unit, evaluate):
        unit = make_unit(variables=[_var("logger", "github.com/rs/zerolog.Logger", 5)])
        diagnostics = evaluate(LoggerPlacementRule(), unit)
        assert len(diagnostics) == 1
        d = diagnostics[0]
        assert d.rule_id == RULE_ID
        assert d.position.line == 5
        assert d.position.column == 5
        assert d.message == (
            'package-level logger "logger" detected; loggers should be struct fields '
            "for better dependency injection and testability"
        )

    def test_flags_pointer_loggers(self, make_unit, evaluate):
        unit = make_unit(
            variables=[
                _var("sugar", "*go.uber.org/zap.SugaredLogger", 3),
                _var("std", "*log.Logger", 4),
                _var("structured", "*log/slog.Logger", 5),
            ]
        )
        diagnostics = evaluate(LoggerPlacementRule(), unit)
        assert [d.position.line for d in diagnostics] == [3, 4, 5]

    def test_every_name_in_one_statement_is_flagged(self, make_unit, evaluate):
        unit = make_unit(
            variables=[
                {
                    "pos": "log.go:7:1",
                    "scope": "package",
                    "names": [
                        {"name": "a", "pos": "log.go:7:5", "type": "github.com/sirupsen/logrus.Logger"},
                        {"name": "b", "pos": "log.go:7:8", "type": "github.com/sirupsen/logrus.Logger"},
                    ],
                }
            ]
        )
        diagnostics = evaluate(LoggerPlacementRule(), unit)
        assert ['"a"' in diagnostics[0].message, '"b"' in diagnostics[1].message] == [True, True]

    def test_function_local_loggers_are_ignored(self, make_unit, evaluate):
        unit = make_unit(variables=[_var("logger", "github.com/rs/zerolog.Logger", 9, scope="function")])
        assert evaluate(LoggerPlacementRule(), unit) == []

    def test_struct_fields_are_ignored(self, make_unit, evaluate):
        unit = make_unit(
            types=[
                {
                    "name": "Service",
                    "kind": "struct",
                    "pos": "svc.go:3:6",
                    "fields": [{"name": "log", "type": "zerolog.Logger", "pos": "svc.go:4:2"}],
                }
            ]
        )
        assert evaluate(LoggerPlacementRule(), unit) == []

    def test_lookalike_packages_are_not_loggers(self, make_unit, evaluate):
        unit = make_unit(
            variables=[
                _var("x", "example.com/myzerolog.Logger", 3),
                _var("y", "github.com/acme/catalog.Logger", 4),
                _var("z", "github.com/rs/zerolog.Event", 5),
            ]
        )
        assert evaluate(LoggerPlacementRule(), unit) == []

    def test_indirection_must_match_pattern(self, make_unit, evaluate):
        unit = make_unit(variables=[_var("logger", "*github.com/rs/zerolog.Logger", 3)])
        rule = LoggerPlacementRule(logger_type_patterns=["zerolog.Logger"])
        assert evaluate(rule, unit) == []

    def test_custom_patterns_replace_defaults(self, make_unit, evaluate):
        unit = make_unit(
            variables=[
                _var("a", "example.com/obs.Tracer", 3),
                _var("b", "github.com/rs/zerolog.Logger", 4),
            ]
        )
        diagnostics = evaluate(LoggerPlacementRule(logger_type_patterns=["obs.Tracer"]), unit)
        assert len(diagnostics) == 1
        assert '"a"' in diagnostics[0].message

    def test_unresolved_names_are_skipped(self, make_unit, evaluate):
        unit = make_unit(variables=[{"pos": "log.go:3:1", "scope": "package", "names": ["logger"]}])
        assert evaluate(LoggerPlacementRule(), unit) == []

    def test_blank_identifier_is_not_a_logger(self, make_unit, evaluate):
        unit = make_unit(
            variables=[
                _var("_", "github.com/rs/zerolog.Logger", 3),
                _var("logger", "github.com/rs/zerolog.Logger", 4),
            ]
        )
        diagnostics = evaluate(LoggerPlacementRule(), unit)
        assert [d.position.line for d in diagnostics] == [4]
