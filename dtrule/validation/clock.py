"""Time-of-day range checks for parsed time fields."""


def is_valid_time(hour: int, minute: int, second: int) -> bool:
    """Hour in 0..23, minute and second in 0..59. No leap seconds, no 24:00:00."""
    return 0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 60
