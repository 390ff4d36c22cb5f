"""
Date-window helpers.

Dates are compared as strings. ISO-8601 calendar dates sort the same way
lexicographically and chronologically, which is the only format these
helpers are correct for.
"""


def is_within_window(current_date: str, start_date: str, end_date: str) -> bool:
    """
    Check whether a date falls inside an inclusive window.

    Args:
        current_date: Date to test
        start_date: First day of the window
        end_date: Last day of the window

    Returns:
        True if start_date <= current_date <= end_date (string comparison)
    """
    return start_date <= current_date <= end_date
