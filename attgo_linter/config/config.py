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
Runtime configuration for attgo-linter.

Settings that vary per invocation rather than per team: which
configuration file to load, how many units to lint in parallel, the output
format, the unit document size limit and the calendar year used by the
copyright check.  Each can be set
through an ``ATTGO_LINTER_*`` environment variable.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from ..core.exceptions import ConfigError
from .constants import LinterConstants

ENV_CONFIG = "ATTGO_LINTER_CONFIG"
ENV_JOBS = "ATTGO_LINTER_JOBS"
ENV_FORMAT = "ATTGO_LINTER_FORMAT"
ENV_CURRENT_YEAR = "ATTGO_LINTER_CURRENT_YEAR"
ENV_MAX_FILE_SIZE_MB = "ATTGO_LINTER_MAX_FILE_SIZE_MB"


def _int_from_env(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}", field=name) from e


@dataclass
class Config:
    """Configuration for one attgo-linter run."""

    # Policy: a preset name or a path to a YAML file
    config_path: str | None = None

    # Execution
    jobs: int = LinterConstants.DEFAULT_JOBS
    max_file_size_mb: int = LinterConstants.DEFAULT_MAX_FILE_SIZE_MB

    # Host-provided calendar year; None means the system clock
    current_year: int | None = None

    # Output Options
    output_format: str = LinterConstants.DEFAULT_OUTPUT_FORMAT

    def __post_init__(self):
        """Load configuration from environment variables if not provided."""
        if self.config_path is None:
            self.config_path = os.getenv(ENV_CONFIG) or self._discover_config_file()

        if self.jobs == LinterConstants.DEFAULT_JOBS:
            if (env_jobs := _int_from_env(ENV_JOBS)) is not None:
                self.jobs = env_jobs
        if self.jobs < 1:
            raise ConfigError(f"jobs must be at least 1, got {self.jobs}", field="jobs")

        if self.max_file_size_mb == LinterConstants.DEFAULT_MAX_FILE_SIZE_MB:
            if (env_size := _int_from_env(ENV_MAX_FILE_SIZE_MB)) is not None:
                self.max_file_size_mb = env_size
        if self.max_file_size_mb < 1:
            raise ConfigError(
                f"max_file_size_mb must be at least 1, got {self.max_file_size_mb}", field="max_file_size_mb"
            )

        if self.current_year is None:
            self.current_year = _int_from_env(ENV_CURRENT_YEAR)

        if self.output_format == LinterConstants.DEFAULT_OUTPUT_FORMAT:
            if env_format := os.getenv(ENV_FORMAT):
                self.output_format = env_format.lower()
        if self.output_format not in LinterConstants.OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output format '{self.output_format}'. "
                f"Available: {', '.join(LinterConstants.OUTPUT_FORMATS)}",
                field="output_format",
            )

    @staticmethod
    def _discover_config_file() -> str | None:
        for name in LinterConstants.CONFIG_FILE_NAMES:
            candidate = Path.cwd() / name
            if candidate.is_file():
                return str(candidate)
        return None

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        Returns:
            Config instance with values from environment
        """
        return cls()

    @classmethod
    def from_file(cls, config_file: Path) -> "Config":
        """
        Load configuration from a .env file.

        Variables already set in the environment take precedence.

        Args:
            config_file: Path to .env file

        Returns:
            Config instance
        """
        if config_file.exists():
            load_dotenv(config_file, override=False)

        return cls.from_env()
