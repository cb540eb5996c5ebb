#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/options/base.py
"""Immutable-options support shared by turnmd option classes.

A conversion reads its options but never changes them. Variants are made
with :meth:`CloneFrozenMixin.create_updated`, which re-runs the subclass's
``__post_init__`` validation on the copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from turnmd.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Frozen dataclass base with validated copy-on-update."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New, validated instance; ``self`` is unchanged

        Raises
        ------
        ValidationError
            If a keyword is not a field of this class, or a new value is
            rejected by validation

        """
        known = {f.name for f in fields(self)}
        for name, value in kwargs.items():
            if name not in known:
                raise ValidationError(
                    f"Unknown option for {type(self).__name__}: {name!r}",
                    parameter_name=name,
                    parameter_value=value,
                )
        return replace(self, **kwargs)

    def to_dict(self, include_excluded: bool = False) -> dict[str, Any]:
        """Return field values keyed by field name.

        Fields marked ``exclude_from_cli`` (rule tables and rule objects)
        are left out unless ``include_excluded`` is true.
        """
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if include_excluded or not f.metadata.get("exclude_from_cli", False)
        }
