#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/options/__init__.py
"""Configuration options for turnmd conversions."""

from turnmd.options.base import CloneFrozenMixin
from turnmd.options.conversion import ConversionOptions

__all__ = ["CloneFrozenMixin", "ConversionOptions"]
