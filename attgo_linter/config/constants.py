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
Constants for attgo-linter.
"""

try:
    from .._version import __version__ as PACKAGE_VERSION
except Exception:  # pragma: no cover
    PACKAGE_VERSION = "0.0.0-dev"


class LinterConstants:
    """Constants used throughout the linter."""

    VERSION = PACKAGE_VERSION
    TOOL_NAME = "attgo-linter"

    # Diagnostic identifiers are "<namespace>_<rule_name>"
    NAMESPACE = "attgo"

    # Default values
    DEFAULT_JOBS = 1
    DEFAULT_OUTPUT_FORMAT = "text"
    DEFAULT_MAX_FILE_SIZE_MB = 50
    OUTPUT_FORMATS = ("text", "json", "sarif")

    # Config file names looked up in the working directory
    CONFIG_FILE_NAMES = (".attgo.yaml", ".attgo.yml", "attgo.yaml")
