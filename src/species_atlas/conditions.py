"""Weather condition labels.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

# WMO weather interpretation code buckets (https://open-meteo.com/en/docs),
# inclusive ranges checked in order.
CONDITION_BUCKETS: list[tuple[int, int, str]] = [
    (0, 0, "Clear sky"),
    (1, 3, "Cloudy"),
    (45, 48, "Foggy"),
    (51, 67, "Rainy"),
    (71, 86, "Snowy"),
]

STORM_THRESHOLD = 95


def describe_condition(code: int) -> str:
    """Convert a WMO weather code to a short human-readable label."""
    for low, high, label in CONDITION_BUCKETS:
        if low <= code <= high:
            return label
    if code >= STORM_THRESHOLD:
        return "Stormy"
    return "Variable"


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32
