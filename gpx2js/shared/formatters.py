"""
Formatting utilities for console output.
"""


def format_distance_km(km: float) -> str:
    """
    Format distance.

    Args:
        km: Distance in kilometers

    Returns:
        Formatted string (e.g., '12.5 km' or '850 m')
    """
    if km < 1:
        return f"{int(km * 1000)} m"
    return f"{km:.1f} km"


def format_count(n: int, noun: str) -> str:
    """'1 file', '3 files'."""
    return f"{n} {noun}" if n == 1 else f"{n} {noun}s"
