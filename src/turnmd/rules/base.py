#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/rules/base.py
"""Conversion rule types.

A conversion rule pairs a *filter*, which decides whether the rule applies
to a node, with a *replacement* function producing the node's Markdown.
A rule may also define ``append``, called once at the end of a conversion
to contribute trailing output such as collected link definitions.

Filters are one of three variants:

- :class:`ExactTag` - a single tag name, compared case-insensitively
- :class:`TagSet` - a collection of tag names
- :class:`Predicate` - a callable ``(node, options) -> bool``

Plain strings, collections of strings and callables are coerced to the
matching variant by :func:`coerce_filter`. Anything else is a
:class:`~turnmd.exceptions.ConfigurationError`.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Union

from turnmd.exceptions import ConfigurationError

if TYPE_CHECKING:
    from turnmd.dom.node import BaseNode
    from turnmd.options import ConversionOptions

ReplacementFunc = Callable[[str, "BaseNode", "ConversionOptions"], str]
AppendFunc = Callable[["ConversionOptions"], str]
PredicateFunc = Callable[["BaseNode", "ConversionOptions"], Any]


@dataclass(frozen=True)
class ExactTag:
    """Match a single tag name, case-insensitively."""

    tag: str

    def matches(self, node: BaseNode, options: ConversionOptions) -> bool:
        return node.tag_name.lower() == self.tag.lower()


@dataclass(frozen=True)
class TagSet:
    """Match any of a set of tag names.

    The node's tag name is lower-cased before the membership test.
    """

    tags: frozenset[str]

    def matches(self, node: BaseNode, options: ConversionOptions) -> bool:
        return node.tag_name.lower() in self.tags


@dataclass(frozen=True)
class Predicate:
    """Match when ``func(node, options)`` is truthy."""

    func: PredicateFunc

    def matches(self, node: BaseNode, options: ConversionOptions) -> bool:
        return bool(self.func(node, options))


RuleFilter = Union[ExactTag, TagSet, Predicate]


def coerce_filter(value: Any, rule_name: str | None = None) -> RuleFilter:
    """Turn a filter value into one of the filter variants.

    Parameters
    ----------
    value : str, collection of str, callable, or a filter variant
        Filter as supplied by the rule author
    rule_name : str, optional
        Rule key, used in error messages

    Returns
    -------
    ExactTag, TagSet or Predicate

    Raises
    ------
    ConfigurationError
        If ``value`` has any other shape

    """
    if isinstance(value, (ExactTag, TagSet, Predicate)):
        return value
    if isinstance(value, str):
        return ExactTag(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        if not all(isinstance(tag, str) for tag in value):
            raise ConfigurationError(rule_name=rule_name, filter_value=value)
        return TagSet(frozenset(value))
    if callable(value):
        return Predicate(value)
    raise ConfigurationError(rule_name=rule_name, filter_value=value)


@dataclass(frozen=True)
class ConversionRule:
    """A filter and the replacement applied to nodes it matches.

    Parameters
    ----------
    filter : str, collection of str, callable, filter variant, or None
        Which nodes the rule applies to. ``None`` is only meaningful for the
        blank and default rules, which are chosen without filtering.
    replacement : callable
        ``replacement(content, node, options) -> str``, where ``content`` is
        the already converted Markdown of the node's children
    append : callable, optional
        ``append(options) -> str``, called once per conversion
    name : str, optional
        Rule key, used in log and error messages

    Raises
    ------
    ConfigurationError
        If ``filter`` has an unrecognised shape or ``replacement`` is not
        callable

    Examples
    --------
        >>> strike = ConversionRule(
        ...     filter=["del", "s", "strike"],
        ...     replacement=lambda content, node, options: f"~~{content}~~",
        ... )

    """

    filter: Any
    replacement: ReplacementFunc
    append: AppendFunc | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if self.filter is not None:
            object.__setattr__(self, "filter", coerce_filter(self.filter, self.name))
        if not callable(self.replacement):
            raise ConfigurationError(f"Rule '{self.name}': `replacement` must be callable", rule_name=self.name)
        if self.append is not None and not callable(self.append):
            raise ConfigurationError(f"Rule '{self.name}': `append` must be callable", rule_name=self.name)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], name: str | None = None) -> ConversionRule:
        """Build a rule from a ``{"filter": ..., "replacement": ..., "append": ...}`` mapping."""
        if "replacement" not in mapping:
            raise ConfigurationError(f"Rule '{name}': `replacement` is required", rule_name=name)
        unknown = set(mapping) - {"filter", "replacement", "append", "name"}
        if unknown:
            raise ConfigurationError(f"Rule '{name}': unknown keys {sorted(unknown)}", rule_name=name)
        return cls(
            filter=mapping.get("filter"),
            replacement=mapping["replacement"],
            append=mapping.get("append"),
            name=mapping.get("name", name),
        )


RuleTable = Mapping[str, ConversionRule]


def coerce_rule(value: Any, name: str | None = None) -> Any:
    """Return ``value`` as a rule.

    Mappings become :class:`ConversionRule`. Other objects exposing a
    callable ``replacement`` are accepted unchanged; their filter is checked
    when the rule is first consulted.
    """
    if isinstance(value, ConversionRule):
        return value
    if isinstance(value, Mapping):
        return ConversionRule.from_mapping(value, name=name)
    if callable(getattr(value, "replacement", None)):
        return value
    raise ConfigurationError(
        f"Rule '{name}' must be a ConversionRule or a mapping with a `replacement`, got {type(value).__name__}",
        rule_name=name,
    )


def build_rule_table(rules: Mapping[str, Any]) -> dict[str, Any]:
    """Coerce every entry of ``rules``, keeping insertion order."""
    if not isinstance(rules, Mapping):
        raise ConfigurationError(f"Rule table must be a mapping of rule keys to rules, got {type(rules).__name__}")
    return {key: coerce_rule(rule, name=key) for key, rule in rules.items()}


__all__ = [
    "ExactTag",
    "TagSet",
    "Predicate",
    "RuleFilter",
    "coerce_filter",
    "ConversionRule",
    "RuleTable",
    "coerce_rule",
    "build_rule_table",
]
