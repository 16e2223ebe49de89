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
Tests for the attgo-linter command line.
"""

import json
from unittest.mock import patch

import pytest
import yaml

from attgo_linter.cli.cli import main

UNIT = {
    "package": "orders",
    "module": "example.com/shop/orders",
    "files": [
        {
            "path": "a.go",
            "package": "3:1",
            "comments": [[{"pos": "1:1", "text": "// Copyright 2024 Acme Ltd."}]],
        }
    ],
    "variables": [
        {
            "pos": "a.go:5:1",
            "names": [{"name": "log", "pos": "a.go:5:5", "type": "github.com/rs/zerolog.Logger"}],
        }
    ],
}

CLEAN_UNIT = {"package": "clean", "files": [{"path": "c.go", "package": "1:1"}]}


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """No discovered config file and no ATTGO_LINTER_* variables."""
    monkeypatch.chdir(tmp_path)
    with patch.dict("os.environ", {}, clear=True):
        yield


class TestLintCommand:
    def test_text_output(self, write_unit, capsys):
        assert main(["lint", str(write_unit(UNIT)), "--current-year", "2026"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0].startswith("a.go:1:1: copyright year 2024 is outdated")
        assert out[0].endswith("(attgo_current_year)")
        assert out[1].startswith('a.go:5:5: package-level logger "log" detected')
        assert out[-1] == "2 issue(s) found in 1 unit"

    def test_fail_on_findings(self, write_unit):
        path = str(write_unit(UNIT))
        assert main(["lint", path, "--current-year", "2026", "--fail-on-findings"]) == 1
        assert main(["lint", str(write_unit(CLEAN_UNIT)), "--fail-on-findings"]) == 0

    def test_json_output(self, write_unit, capsys):
        main(["lint", str(write_unit(UNIT)), "--current-year", "2026", "--format", "json"])
        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["total_diagnostics"] == 2

    def test_sarif_output_file(self, write_unit, tmp_path):
        out = tmp_path / "attgo.sarif"
        assert main(["lint", str(write_unit(UNIT)), "--current-year", "2026", "--format", "sarif", "-o", str(out)]) == 0
        sarif = json.loads(out.read_text())
        assert {r["ruleId"] for r in sarif["runs"][0]["results"]} == {"attgo_current_year", "attgo_no_pkg_logger"}

    def test_config_file_disables_rules(self, write_unit, tmp_path, capsys):
        config = tmp_path / "team.yaml"
        config.write_text("enable_current_year: false\n")
        main(["lint", str(write_unit(UNIT)), "--current-year", "2026", "--config", str(config)])
        out = capsys.readouterr().out
        assert "attgo_current_year" not in out
        assert "attgo_no_pkg_logger" in out

    def test_env_year(self, write_unit, capsys):
        with patch.dict("os.environ", {"ATTGO_LINTER_CURRENT_YEAR": "2024"}):
            main(["lint", str(write_unit(UNIT))])
        assert "attgo_current_year" not in capsys.readouterr().out

    def test_strict_preset(self, write_unit, capsys):
        assert main(["lint", str(write_unit(CLEAN_UNIT)), "--config", "strict", "--verbose"]) == 0
        assert capsys.readouterr().out.strip() == "0 issue(s) found in 1 unit"

    def test_missing_unit(self, tmp_path, capsys):
        assert main(["lint", str(tmp_path / "missing.yaml")]) == 1
        assert "does not exist" in capsys.readouterr().err

    def test_malformed_config(self, write_unit, tmp_path, capsys):
        config = tmp_path / "bad.yaml"
        config.write_text('enable_func_opts: "yes"\n')
        assert main(["lint", str(write_unit(UNIT)), "--config", str(config)]) == 1
        err = capsys.readouterr().err
        assert "Error loading configuration" in err
        assert "enable_func_opts" in err

    def test_missing_config(self, write_unit, tmp_path, capsys):
        assert main(["lint", str(write_unit(UNIT)), "--config", str(tmp_path / "nope.yaml")]) == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_size_limit_from_env(self, write_unit, capsys):
        oversized = {**UNIT, "padding": "x" * (1024 * 1024 + 1)}
        with patch.dict("os.environ", {"ATTGO_LINTER_MAX_FILE_SIZE_MB": "1"}):
            assert main(["lint", str(write_unit(oversized))]) == 1
        assert "No units linted." in capsys.readouterr().err

    def test_only_bad_units(self, write_unit, capsys):
        assert main(["lint", str(write_unit("- not a mapping\n"))]) == 1
        assert "No units linted." in capsys.readouterr().err


class TestOtherCommands:
    def test_list_rules(self, capsys):
        assert main(["list-rules"]) == 0
        out = capsys.readouterr().out
        assert "1. attgo_no_pkg_logger (enabled by default)" in out
        assert "8. attgo_interface_check (disabled by default)" in out
        assert "Config key: enable_struct_field_order" in out

    def test_generate_config_stdout(self, capsys):
        assert main(["generate-config", "--preset", "strict"]) == 0
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["policy_name"] == "strict"
        assert data["enable_interface_check"] is True

    def test_generate_config_file(self, tmp_path):
        out = tmp_path / ".attgo.yaml"
        assert main(["generate-config", "-o", str(out)]) == 0
        data = yaml.safe_load(out.read_text())
        assert data["enable_func_opts"] is False
        assert data["enum_type_suffixes"] == ["Type", "Status", "State", "Kind", "Mode"]

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "attgo-linter" in capsys.readouterr().out
