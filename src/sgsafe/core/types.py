"""
Core type definitions for the SgSafe command interpreter.

This module contains the type aliases shared by the tokenizer, the type coercer
and the case registry.
"""

from datetime import date

FlagMap = dict[str, str]

FlagValue = str | int | date

TypedFlagMap = dict[str, FlagValue]
