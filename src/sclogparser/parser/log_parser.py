"""Log line dispatcher - converts raw lines to typed entries."""

from typing import Callable, Iterable, Iterator, Optional

from sclogparser.config.logging import get_logger
from sclogparser.core.errors import LogParseError, MalformedTimestamp
from sclogparser.core.models import EventKind, LogEntry
from sclogparser.parser.grammar import GRAMMARS
from sclogparser.parser.timestamp import parse_timestamp

logger = get_logger()


def parse_line(line: str) -> Optional[LogEntry]:
    """
    Parse a single Game.log line into a typed entry.

    Lines look like "<timestamp> [Notice] <Event Tag> body...". The first
    bracketed token is the timestamp, the next <...> pair is the event tag,
    and the rest is handed to the grammar for that tag.

    Args:
        line: Raw log line (may include a trailing newline)

    Returns:
        Parsed entry, or None when the line is not an event line or its tag
        is not one we model

    Raises:
        LogParseError: The timestamp is malformed, or the tag is known but
            the body does not match its grammar. The raw line is attached
            to the exception.
    """
    line = line.rstrip("\r\n")

    if not line.strip() or not line.startswith("<"):
        return None

    timestamp_end = line.find(">")
    if timestamp_end == -1:
        raise MalformedTimestamp("Missing '>' after timestamp", line)

    try:
        timestamp = parse_timestamp(line[1:timestamp_end])
    except MalformedTimestamp as e:
        raise e.with_line(line)

    tag_start = line.find("<", timestamp_end)
    if tag_start == -1:
        return None
    tag_end = line.find(">", tag_start + 1)
    if tag_end == -1:
        return None

    kind = EventKind.from_tag(line[tag_start + 1:tag_end])
    if kind is None:
        return None

    rest = line[tag_end + 1:].lstrip()
    try:
        return GRAMMARS[kind](rest, timestamp)
    except LogParseError as e:
        raise e.with_line(line)


def iter_parsed(
    lines: Iterable[str],
    strict: bool = False,
    on_error: Optional[Callable[[LogParseError], None]] = None,
) -> Iterator[LogEntry]:
    """
    Parse lines lazily, in order.

    Args:
        lines: Raw log lines
        strict: If True, the first hard parse error propagates; otherwise the
            offending line is logged and skipped
        on_error: Called with each skipped error (non-strict mode only)

    Yields:
        Parsed entries (lines that are not events are skipped silently)
    """
    for line in lines:
        try:
            entry = parse_line(line)
        except LogParseError as e:
            if strict:
                raise
            logger.warning(f"Skipping unparseable line: {e}")
            if on_error is not None:
                on_error(e)
            continue
        if entry is not None:
            yield entry


def iter_entries(
    text: str,
    strict: bool = False,
    on_error: Optional[Callable[[LogParseError], None]] = None,
) -> Iterator[LogEntry]:
    """
    Parse a complete in-memory log text.

    Lines are split on LF only; parse_line drops the CR of a CRLF ending.
    """
    return iter_parsed(text.split("\n"), strict=strict, on_error=on_error)


def parse_lines(lines: list[str], strict: bool = False) -> list[LogEntry]:
    """
    Parse multiple log lines in one go.

    Args:
        lines: Raw log lines
        strict: Propagate hard parse errors instead of skipping the line

    Returns:
        List of parsed entries (None values filtered)
    """
    return list(iter_parsed(lines, strict=strict))
