"""Diagnostics package.

- round_trip, month_table: no extra dependencies
- year_lengths: needs the diagnostics extras (numpy, matplotlib for --plot)
"""

__all__ = ["round_trip", "month_table", "year_lengths"]
