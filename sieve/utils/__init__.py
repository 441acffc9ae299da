"""
Shared utilities for SIEVE.

Common functionality used across contexts:
- Logger setup
- Date formatting
- Text display helpers
"""

from sieve.utils.timestamp import format_long_date, parse_iso_date

__all__ = ["format_long_date", "parse_iso_date"]
