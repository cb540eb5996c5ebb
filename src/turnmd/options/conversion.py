#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/options/conversion.py
"""Configuration options for HTML-to-Markdown conversion.

:class:`ConversionOptions` is passed, unchanged, to every rule's filter,
``replacement`` and ``append`` call during a conversion.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

from turnmd.constants import (
    BULLET_LIST_MARKERS,
    CODE_BLOCK_STYLES,
    DEFAULT_BR,
    DEFAULT_BULLET_LIST_MARKER,
    DEFAULT_CODE_BLOCK_STYLE,
    DEFAULT_EM_DELIMITER,
    DEFAULT_FENCE,
    DEFAULT_HEADING_STYLE,
    DEFAULT_HR,
    DEFAULT_HTML_PARSER,
    DEFAULT_LINK_REFERENCE_STYLE,
    DEFAULT_LINK_STYLE,
    DEFAULT_STRONG_DELIMITER,
    EM_DELIMITERS,
    HEADING_STYLES,
    HTML_PARSERS,
    LINK_REFERENCE_STYLES,
    LINK_STYLES,
    MIN_FENCE_LENGTH,
    STRONG_DELIMITERS,
    BulletListMarker,
    CodeBlockStyle,
    EmDelimiter,
    HeadingStyle,
    HtmlParserType,
    LinkReferenceStyle,
    LinkStyle,
    StrongDelimiter,
)
from turnmd.exceptions import ValidationError
from turnmd.options.base import CloneFrozenMixin
from turnmd.rules.base import build_rule_table, coerce_rule
from turnmd.rules.commonmark import commonmark_rules
from turnmd.rules.special import blank_rule, default_rule, keep_rule, remove_rule

_FENCE = re.compile(rf"`{{{MIN_FENCE_LENGTH},}}|~{{{MIN_FENCE_LENGTH},}}")

# camelCase names accepted by ``from_dict`` in addition to field names
_OPTION_ALIASES: dict[str, str] = {
    "headingStyle": "heading_style",
    "bulletListMarker": "bullet_list_marker",
    "codeBlockStyle": "code_block_style",
    "emDelimiter": "em_delimiter",
    "strongDelimiter": "strong_delimiter",
    "linkStyle": "link_style",
    "linkReferenceStyle": "link_reference_style",
    "blankRule": "blank_rule",
    "defaultRule": "default_rule",
    "keepRule": "keep_rule",
    "removeRule": "remove_rule",
    "blankConverter": "blank_rule",
    "defaultConverter": "default_rule",
    "keepConverter": "keep_rule",
    "removeConverter": "remove_rule",
    "htmlParser": "html_parser",
}

_CHOICE_FIELDS: dict[str, tuple[str, ...]] = {
    "heading_style": HEADING_STYLES,
    "bullet_list_marker": BULLET_LIST_MARKERS,
    "code_block_style": CODE_BLOCK_STYLES,
    "em_delimiter": EM_DELIMITERS,
    "strong_delimiter": STRONG_DELIMITERS,
    "link_style": LINK_STYLES,
    "link_reference_style": LINK_REFERENCE_STYLES,
    "html_parser": HTML_PARSERS,
}

_SPECIAL_RULE_FIELDS = ("blank_rule", "default_rule", "keep_rule", "remove_rule")


@dataclass(frozen=True)
class ConversionOptions(CloneFrozenMixin):
    r"""Options controlling HTML-to-Markdown conversion.

    Parameters
    ----------
    converters : Mapping[str, ConversionRule]
        Ordered rule table. Earlier rules win. Defaults to a fresh
        CommonMark table for every instance.
    heading_style : {"setext", "atx"}, default "setext"
        ``setext`` underlines h1/h2 with ``=``/``-``; ``atx`` prefixes ``#``.
    hr : str, default "\* \* \*"
        Literal text for horizontal rules.
    bullet_list_marker : {"\*", "-", "+"}, default "\*"
        Marker for unordered list items.
    code_block_style : {"indented", "fenced"}, default "indented"
        How ``pre > code`` blocks are rendered.
    fence : str, default "\`\`\`"
        Fence for fenced code blocks: three or more backticks or tildes.
    em_delimiter : {"\_", "\*"}, default "\_"
        Delimiter for emphasis.
    strong_delimiter : {"\*\*", "\_\_"}, default "\*\*"
        Delimiter for strong emphasis.
    link_style : {"inlined", "referenced"}, default "inlined"
        Inline links or reference links with definitions at the end.
    link_reference_style : {"full", "collapsed", "shortcut"}, default "full"
        Form of reference links when ``link_style="referenced"``.
    br : str, default "  "
        Text emitted before the newline of a hard line break.
    blank_rule, default_rule, keep_rule, remove_rule : ConversionRule
        The special rules consulted around the rule table.
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup tree builder for string input.

    Raises
    ------
    ValidationError
        If a field has a value outside its allowed set
    ConfigurationError
        If a rule is malformed

    Examples
    --------
        >>> options = ConversionOptions(heading_style="atx", code_block_style="fenced")
        >>> options.create_updated(bullet_list_marker="-").bullet_list_marker
        '-'

    """

    converters: Mapping[str, Any] = field(
        default_factory=commonmark_rules,
        metadata={"help": "Ordered conversion rule table", "exclude_from_cli": True},
    )
    heading_style: HeadingStyle = field(
        default=DEFAULT_HEADING_STYLE,
        metadata={"help": "Heading style for h1/h2", "choices": list(HEADING_STYLES), "importance": "core"},
    )
    hr: str = field(
        default=DEFAULT_HR,
        metadata={"help": "Text used for horizontal rules", "importance": "core"},
    )
    bullet_list_marker: BulletListMarker = field(
        default=DEFAULT_BULLET_LIST_MARKER,
        metadata={"help": "Marker for unordered list items", "choices": list(BULLET_LIST_MARKERS), "importance": "core"},
    )
    code_block_style: CodeBlockStyle = field(
        default=DEFAULT_CODE_BLOCK_STYLE,
        metadata={"help": "Code block rendering style", "choices": list(CODE_BLOCK_STYLES), "importance": "core"},
    )
    fence: str = field(
        default=DEFAULT_FENCE,
        metadata={"help": "Fence for fenced code blocks (3+ backticks or tildes)", "importance": "advanced"},
    )
    em_delimiter: EmDelimiter = field(
        default=DEFAULT_EM_DELIMITER,
        metadata={"help": "Delimiter for emphasis", "choices": list(EM_DELIMITERS), "importance": "core"},
    )
    strong_delimiter: StrongDelimiter = field(
        default=DEFAULT_STRONG_DELIMITER,
        metadata={"help": "Delimiter for strong emphasis", "choices": list(STRONG_DELIMITERS), "importance": "core"},
    )
    link_style: LinkStyle = field(
        default=DEFAULT_LINK_STYLE,
        metadata={"help": "Inline or reference-style links", "choices": list(LINK_STYLES), "importance": "core"},
    )
    link_reference_style: LinkReferenceStyle = field(
        default=DEFAULT_LINK_REFERENCE_STYLE,
        metadata={
            "help": "Reference link form when link style is 'referenced'",
            "choices": list(LINK_REFERENCE_STYLES),
            "importance": "advanced",
        },
    )
    br: str = field(
        default=DEFAULT_BR,
        metadata={"help": "Text emitted for a hard line break, before the newline", "importance": "advanced"},
    )
    blank_rule: Any = field(default_factory=blank_rule, metadata={"exclude_from_cli": True})
    default_rule: Any = field(default_factory=default_rule, metadata={"exclude_from_cli": True})
    keep_rule: Any = field(default_factory=keep_rule, metadata={"exclude_from_cli": True})
    remove_rule: Any = field(default_factory=remove_rule, metadata={"exclude_from_cli": True})
    html_parser: HtmlParserType = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "BeautifulSoup tree builder for string input",
            "choices": list(HTML_PARSERS),
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values and normalise rules.

        Raises
        ------
        ValidationError
            If any field value is outside its valid range.

        """
        for name, choices in _CHOICE_FIELDS.items():
            value = getattr(self, name)
            if value not in choices:
                raise ValidationError(
                    f"{name} must be one of {', '.join(repr(c) for c in choices)}, got {value!r}",
                    parameter_name=name,
                    parameter_value=value,
                )

        if not isinstance(self.hr, str) or not self.hr:
            raise ValidationError(f"hr must be a non-empty string, got {self.hr!r}", "hr", self.hr)
        if not isinstance(self.br, str):
            raise ValidationError(f"br must be a string, got {self.br!r}", "br", self.br)
        if not isinstance(self.fence, str) or not _FENCE.fullmatch(self.fence):
            raise ValidationError(
                f"fence must be {MIN_FENCE_LENGTH} or more backticks or tildes, got {self.fence!r}",
                "fence",
                self.fence,
            )

        object.__setattr__(self, "converters", MappingProxyType(build_rule_table(self.converters)))
        for name in _SPECIAL_RULE_FIELDS:
            object.__setattr__(self, name, coerce_rule(getattr(self, name), name=name))

    @classmethod
    def normalize_keys(cls, values: Mapping[str, Any]) -> dict[str, Any]:
        """Map option names, camelCase spellings included, to field names.

        Raises
        ------
        ValidationError
            If a key is not a known option

        """
        field_names = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in field_names:
                raise ValidationError(f"Unknown option: {key!r}", parameter_name=key, parameter_value=value)
            kwargs[name] = value
        return kwargs

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> ConversionOptions:
        """Build options from a plain mapping.

        Keys may be field names or their camelCase spellings
        (``headingStyle``, ``bulletListMarker``, ...).

        Raises
        ------
        ValidationError
            If a key is not a known option or a value is invalid

        """
        return cls(**cls.normalize_keys(values))
