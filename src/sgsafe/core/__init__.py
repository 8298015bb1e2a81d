"""
Core SgSafe components.

This package provides the type definitions shared across the parsing pipeline
and the case registry.
"""

from sgsafe.core.types import FlagMap, FlagValue, TypedFlagMap

__all__ = [
    "FlagMap",
    "FlagValue",
    "TypedFlagMap",
]
