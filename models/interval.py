"""Half-open interval overlap predicate and booking duration constants."""

from datetime import datetime, timedelta

# Shortest event the validation rules accept.
MIN_EVENT_DURATION = timedelta(minutes=15)

# Duration assumed for a grid slot when probing it for conflicts.
SLOT_PROBE_DURATION = timedelta(minutes=30)

# Length of a freshly opened create candidate.
DEFAULT_EVENT_DURATION = timedelta(minutes=30)


def overlaps(
    a_start: datetime,
    a_end: datetime,
    b_start: datetime,
    b_end: datetime,
) -> bool:
    """Check whether [a_start, a_end) and [b_start, b_end) share an instant.

    Intervals that merely touch (one ends exactly when the other starts) do
    not overlap.

    Examples:
        - 10:00-10:30 vs 10:30-11:00 → False
        - 10:00-10:30 vs 10:15-10:45 → True

    Args:
        a_start: Start of the first interval.
        a_end: End of the first interval.
        b_start: Start of the second interval.
        b_end: End of the second interval.

    Returns:
        True if the intervals overlap.
    """
    return a_start < b_end and b_start < a_end
