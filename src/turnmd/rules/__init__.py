#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/rules/__init__.py
"""Conversion rules, the rule selector and the built-in rule tables."""

from turnmd.rules.base import (
    ConversionRule,
    ExactTag,
    Predicate,
    RuleFilter,
    RuleTable,
    TagSet,
    build_rule_table,
    coerce_filter,
    coerce_rule,
)
from turnmd.rules.commonmark import ReferenceLinkCollector, commonmark_rules
from turnmd.rules.selector import filter_matches, select_rule
from turnmd.rules.special import blank_rule, default_rule, keep_rule, remove_rule

__all__ = [
    "ConversionRule",
    "ExactTag",
    "Predicate",
    "RuleFilter",
    "RuleTable",
    "TagSet",
    "build_rule_table",
    "coerce_filter",
    "coerce_rule",
    "ReferenceLinkCollector",
    "commonmark_rules",
    "filter_matches",
    "select_rule",
    "blank_rule",
    "default_rule",
    "keep_rule",
    "remove_rule",
]
