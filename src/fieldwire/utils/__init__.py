"""Utility functions for fieldwire.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_size, field_sizes, value_size

__all__ = [
    "encoded_size",
    "field_sizes",
    "value_size",
]
