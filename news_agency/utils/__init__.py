"""
Utility functions module.

Money conversion and date-window helpers shared across the ledger.

Date Semantics:
- Dates are plain strings and are never parsed
- Comparisons are lexicographic, so callers must use ISO-8601 (YYYY-MM-DD)
"""
