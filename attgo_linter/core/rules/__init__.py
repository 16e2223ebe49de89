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
House-style rules.

Each rule is an independent :class:`~attgo_linter.core.rules.base.BaseRule`
evaluated against a unit's declaration index and type resolver.
"""

from .base import BaseRule
from .comment_style import CommentStyleRule
from .constructor_shape import ConstructorShapeRule
from .copyright_freshness import CopyrightFreshnessRule
from .enum_encoding import EnumEncodingRule
from .field_order import FieldOrderRule
from .interface_conformance import InterfaceConformanceRule
from .logger_placement import LoggerPlacementRule
from .string_literal_style import StringLiteralStyleRule

# Registration order; also the order rules are listed and evaluated.
ALL_RULES: tuple[type[BaseRule], ...] = (
    LoggerPlacementRule,
    EnumEncodingRule,
    CopyrightFreshnessRule,
    CommentStyleRule,
    ConstructorShapeRule,
    StringLiteralStyleRule,
    FieldOrderRule,
    InterfaceConformanceRule,
)

__all__ = [
    "ALL_RULES",
    "BaseRule",
    "CommentStyleRule",
    "ConstructorShapeRule",
    "CopyrightFreshnessRule",
    "EnumEncodingRule",
    "FieldOrderRule",
    "InterfaceConformanceRule",
    "LoggerPlacementRule",
    "StringLiteralStyleRule",
]
