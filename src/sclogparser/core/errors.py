"""Parse error taxonomy.

A line that is not shaped like an event line at all is rejected softly (the
dispatcher returns None). Everything else here is a hard failure raised for a
recognized event tag whose body does not match the grammar: it usually means
the game shipped a log format variant we do not handle yet.
"""

from typing import Optional


class LogParseError(ValueError):
    """Base class for all log parsing failures."""

    def __init__(self, message: str, line: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def with_line(self, line: str) -> "LogParseError":
        """Attach the offending raw line and return self for re-raising."""
        self.line = line
        return self

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message}. Please report this bug with the line: {self.line}"


class LineRejected(LogParseError):
    """Line is not an event line. Never surfaces from parse_line."""


class MalformedTimestamp(LogParseError):
    """Leading timestamp does not match YYYY-MM-DDThh:mm:ss.sssZ."""


class DelimiterNotFound(LogParseError):
    """A literal marker the grammar expects is missing."""

    def __init__(self, token: str, line: Optional[str] = None) -> None:
        super().__init__(f"Delimiter not found: {token!r}", line)
        self.token = token


class MalformedVector(LogParseError):
    """Vector text is not 'x: .., y: .., z: ..'."""


class MalformedInteger(LogParseError):
    """An integer field (destroy level) is not a non-negative integer."""
