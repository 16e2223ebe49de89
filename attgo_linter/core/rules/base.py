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
Base rule interface for house-style checks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from ...config.constants import LinterConstants
from ..index import DeclarationIndex
from ..models import Diagnostic, Position
from ..resolver import TypeResolver

RULE_ID_PREFIX = f"{LinterConstants.NAMESPACE}_"


class BaseRule(ABC):
    """Abstract base class for all rules.

    Subclasses declare their metadata as class attributes and implement
    :meth:`evaluate`.  A rule holds only immutable configuration, so one
    instance may be evaluated against many units.
    """

    name: ClassVar[str] = ""
    """Short rule name; the diagnostic identifier is ``attgo_<name>``."""

    config_key: ClassVar[str] = ""
    """Boolean configuration key that enables the rule."""

    default_enabled: ClassVar[bool] = False

    description: ClassVar[str] = ""
    """One-line summary of the convention."""

    remediation: ClassVar[str] = ""
    """Suggested fix for a true positive."""

    @classmethod
    def rule_id(cls) -> str:
        return f"{RULE_ID_PREFIX}{cls.name}"

    @abstractmethod
    def evaluate(self, index: DeclarationIndex, resolver: TypeResolver) -> list[Diagnostic]:
        """
        Inspect one unit.

        Args:
            index: Declaration index of the unit
            resolver: Type resolver of the unit

        Returns:
            Diagnostics for every violation, in discovery order
        """
        pass

    def _report(self, position: Position, message: str) -> Diagnostic:
        return Diagnostic(position=position, message=message, rule_id=self.rule_id())

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
