#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/cli_builder.py
"""Dynamic CLI argument builder for turnmd.

Command line flags for conversion options are generated from the
``ConversionOptions`` dataclass and its field metadata, so a new option
only needs to be declared once.
"""

from __future__ import annotations

import argparse
from dataclasses import MISSING, Field, fields, is_dataclass
from typing import Any

from turnmd.options import ConversionOptions


class DynamicCLIBuilder:
    """Builds CLI arguments dynamically from an options dataclass.

    Fields whose metadata sets ``exclude_from_cli`` (rule tables and rule
    objects) get no flag.
    """

    def __init__(self, options_class: type = ConversionOptions):
        self.options_class = options_class

    @staticmethod
    def snake_to_kebab(name: str) -> str:
        """Convert snake_case to kebab-case."""
        return name.replace("_", "-")

    def cli_fields(self) -> list[Field]:
        """Return the dataclass fields exposed as flags."""
        if not is_dataclass(self.options_class):
            return []
        return [f for f in fields(self.options_class) if not f.metadata.get("exclude_from_cli", False)]

    def get_argument_kwargs(self, field: Field, metadata: dict[str, Any]) -> dict[str, Any]:
        """Build argparse kwargs from field metadata.

        Parameters
        ----------
        field : Field
            Dataclass field
        metadata : dict
            Field metadata

        Returns
        -------
        dict
            Kwargs for argparse.add_argument()

        """
        kwargs: dict[str, Any] = {
            "help": metadata.get("help", f"Configure {field.name}"),
            "dest": field.name,
        }
        if "choices" in metadata:
            kwargs["choices"] = metadata["choices"]
        if field.default is not MISSING:
            kwargs["default"] = field.default
            kwargs["help"] += f" (default: {field.default!r})"
        return kwargs

    def add_options_arguments(self, parser: argparse.ArgumentParser, group_name: str | None = None) -> None:
        """Add one flag per exposed options field to ``parser``."""
        group = parser.add_argument_group(group_name) if group_name else parser
        for field in self.cli_fields():
            metadata = dict(field.metadata or {})
            cli_name = "--" + metadata.get("cli_name", self.snake_to_kebab(field.name))
            group.add_argument(cli_name, **self.get_argument_kwargs(field, metadata))

    def map_args_to_options(self, parsed_args: argparse.Namespace) -> dict[str, Any]:
        """Collect option values from parsed arguments, keyed by field name."""
        return {
            field.name: getattr(parsed_args, field.name)
            for field in self.cli_fields()
            if hasattr(parsed_args, field.name)
        }


__all__ = ["DynamicCLIBuilder"]
