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

"""Tests for the functional options rule."""

from __future__ import annotations

import pytest

from attgo_linter.core.rules.constructor_shape import ConstructorShapeRule

RULE_ID = "attgo_func_opts"

SERVICE = {"name": "OrderService", "kind": "struct", "pos": "svc.go:3:6"}
HELPER = {"name": "orderHelper", "kind": "struct", "pos": "svc.go:8:6"}


def _params(*types: str) -> list[dict]:
    return [{"name": f"p{i}", "type": t} for i, t in enumerate(types)]


def _fn(name: str, params: list[dict], results: list[str], receiver: str | None = None) -> dict:
    return {"name": name, "pos": "svc.go:20:6", "params": params, "results": results, "receiver": receiver}


class TestConstructorShape:
    def test_wide_constructor_is_flagged(self, make_unit, evaluate):
        unit = make_unit(
            types=[SERVICE],
            functions=[_fn("NewOrderService", _params("DB", "Cache", "string", "int"), ["*OrderService", "error"])],
        )
        diagnostics = evaluate(ConstructorShapeRule(), unit)
        assert len(diagnostics) == 1
        d = diagnostics[0]
        assert d.rule_id == RULE_ID
        assert d.position.line == 20
        assert d.message == (
            'constructor "NewOrderService" has many parameters; consider using functional options pattern'
        )

    def test_three_parameters_are_fine(self, make_unit, evaluate):
        unit = make_unit(
            types=[SERVICE],
            functions=[_fn("NewOrderService", _params("DB", "Cache", "string"), ["*OrderService"])],
        )
        assert evaluate(ConstructorShapeRule(), unit) == []

    def test_context_is_not_counted(self, make_unit, evaluate):
        unit = make_unit(
            types=[SERVICE],
            functions=[
                _fn("CreateOrderService", _params("context.Context", "DB", "Cache", "string"), ["OrderService"])
            ],
        )
        assert evaluate(ConstructorShapeRule(), unit) == []

    @pytest.mark.parametrize(
        "options_param",
        [
            {"name": "opts", "type": "Option", "variadic": True},
            {"name": "opts", "type": "...ServiceOpt"},
            {"name": "opts", "type": "...config.Option"},
            {"name": "opts", "type": "func(*OrderService)", "variadic": True},
        ],
    )
    def test_variadic_options_exempt(self, make_unit, evaluate, options_param):
        params = _params("DB", "Cache", "string", "int") + [options_param]
        unit = make_unit(types=[SERVICE], functions=[_fn("NewOrderService", params, ["*OrderService"])])
        assert evaluate(ConstructorShapeRule(), unit) == []

    def test_plain_variadic_is_counted(self, make_unit, evaluate):
        params = _params("DB", "Cache", "string") + [{"name": "tags", "type": "string", "variadic": True}]
        unit = make_unit(types=[SERVICE], functions=[_fn("NewOrderService", params, ["*OrderService"])])
        assert len(evaluate(ConstructorShapeRule(), unit)) == 1

    def test_unnamed_parameters_count(self, make_unit, evaluate):
        params = [{"type": "DB"}, {"type": "Cache"}, {"type": "string"}, {"type": "int"}]
        unit = make_unit(types=[SERVICE], functions=[_fn("NewOrderService", params, ["*OrderService"])])
        assert len(evaluate(ConstructorShapeRule(), unit)) == 1

    @pytest.mark.parametrize(
        "fn",
        [
            # not a constructor name
            _fn("BuildOrderService", _params("A", "B", "C", "D"), ["*OrderService"]),
            # method, not a free function
            _fn("NewOrderService", _params("A", "B", "C", "D"), ["*OrderService"], receiver="Factory"),
            # returns a type without a service suffix
            _fn("NewOrderHelper", _params("A", "B", "C", "D"), ["*orderHelper"]),
            # returns a type declared elsewhere
            _fn("NewClient", _params("A", "B", "C", "D"), ["*http.Client"]),
            # first simple result is not the service
            _fn("NewOrderService", _params("A", "B", "C", "D"), ["error", "*OrderService"]),
        ],
    )
    def test_not_applicable(self, make_unit, evaluate, fn):
        unit = make_unit(types=[SERVICE, HELPER], functions=[fn])
        assert evaluate(ConstructorShapeRule(), unit) == []

    def test_service_suffix_must_name_a_struct(self, make_unit, evaluate):
        iface = {"name": "PaymentProvider", "kind": "interface", "pos": "svc.go:3:6"}
        unit = make_unit(
            types=[iface],
            functions=[_fn("NewPaymentProvider", _params("A", "B", "C", "D"), ["PaymentProvider"])],
        )
        assert evaluate(ConstructorShapeRule(), unit) == []
