"""Leading timestamp token parser."""

from datetime import datetime, timezone

from sclogparser.core.errors import MalformedTimestamp
from sclogparser.parser.patterns import TIMESTAMP_PATTERN


def parse_timestamp(token: str) -> datetime:
    """
    Parse a log timestamp token as an aware UTC datetime.

    The layout is fixed: YYYY-MM-DDThh:mm:ss.sssZ with exactly three
    fraction digits.

    Args:
        token: Text between the first '<' and the first '>' of a line

    Returns:
        datetime with tzinfo=UTC, millisecond precision

    Raises:
        MalformedTimestamp: If the token does not match the layout exactly
    """
    match = TIMESTAMP_PATTERN.fullmatch(token)
    if match is None:
        raise MalformedTimestamp(f"Malformed timestamp: {token!r}")

    try:
        return datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            int(match.group("millis")) * 1000,
            tzinfo=timezone.utc,
        )
    except ValueError as e:
        # Right shape, impossible values (month 13, hour 25, ...)
        raise MalformedTimestamp(f"Malformed timestamp: {token!r} ({e})") from e
