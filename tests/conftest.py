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

"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before running tests.
All fixtures defined here are available to every test module without
explicit imports.
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any

import pytest
import yaml

from attgo_linter.core.index import DeclarationIndex
from attgo_linter.core.lint_policy import LintPolicy
from attgo_linter.core.linter import Linter
from attgo_linter.core.loader import UnitLoader
from attgo_linter.core.models import Diagnostic, SourceUnit
from attgo_linter.core.resolver import TypeResolver
from attgo_linter.core.rules.base import BaseRule

# Fixed year so copyright checks do not depend on the system clock
CURRENT_YEAR = 2026


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def current_year() -> int:
    return CURRENT_YEAR


@pytest.fixture
def make_unit():
    """Factory fixture for creating :class:`SourceUnit` objects.

    Accepts the same document layout the host exports, either as a YAML
    string or as a mapping.  ``package`` defaults to ``sample`` and
    ``module`` to ``example.com/sample``.

    Usage::

        unit = make_unit('''
            types:
              - {name: SANType, kind: text, pos: "a.go:3:6"}
        ''')
    """
    loader = UnitLoader()

    def _make(doc: str | dict[str, Any] | None = None, **sections: Any) -> SourceUnit:
        if isinstance(doc, str):
            data = yaml.safe_load(textwrap.dedent(doc)) or {}
        else:
            data = dict(doc or {})
        data.update(sections)
        data.setdefault("package", "sample")
        data.setdefault("module", "example.com/sample")
        return loader.load_document(data, source="test-unit")

    return _make


@pytest.fixture
def evaluate():
    """Run one rule against one unit, the way the linter does."""

    def _evaluate(rule: BaseRule, unit: SourceUnit) -> list[Diagnostic]:
        return rule.evaluate(DeclarationIndex.build(unit), TypeResolver.from_unit(unit))

    return _evaluate


@pytest.fixture
def make_policy(tmp_path: Path):
    """Factory fixture for creating :class:`LintPolicy` from a YAML string.

    Usage::

        policy = make_policy('''
            enable_func_opts: true
            enum_type_suffixes: [Kind]
        ''')
    """
    _counter = [0]

    def _make(yaml_str: str) -> LintPolicy:
        _counter[0] += 1
        p = tmp_path / f"config-{_counter[0]}.yaml"
        p.write_text(textwrap.dedent(yaml_str))
        return LintPolicy.from_yaml(str(p))

    return _make


@pytest.fixture
def make_linter():
    """Factory fixture for creating a :class:`Linter` with a fixed year.

    Usage::

        linter = make_linter(policy=LintPolicy.from_preset("strict"))
        result = linter.lint_unit(unit)
    """

    def _make(policy: LintPolicy | None = None, **kwargs: Any) -> Linter:
        kwargs.setdefault("current_year", CURRENT_YEAR)
        return Linter(policy=policy or LintPolicy.default(), **kwargs)

    return _make


@pytest.fixture
def write_unit(tmp_path: Path):
    """Write a unit document to disk and return its path."""
    _counter = [0]

    def _write(doc: str | dict[str, Any], suffix: str = ".yaml") -> Path:
        _counter[0] += 1
        p = tmp_path / f"unit-{_counter[0]}{suffix}"
        if isinstance(doc, str):
            p.write_text(textwrap.dedent(doc))
        elif suffix == ".json":
            p.write_text(json.dumps(doc))
        else:
            p.write_text(yaml.safe_dump(doc))
        return p

    return _write
