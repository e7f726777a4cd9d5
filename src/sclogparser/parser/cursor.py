"""Forward-only cursor over a single log line."""

from sclogparser.core.errors import DelimiterNotFound


class Cursor:
    """
    Scan a string left to right between literal markers.

    The position only ever moves forward. Every lookup starts at the current
    position; matching is exact and case-sensitive with no escaping.
    """

    def __init__(self, source: str, position: int = 0) -> None:
        """
        Initialize cursor.

        Args:
            source: Text to scan (usually the tag-stripped rest of a line)
            position: Starting index
        """
        self.source = source
        self._position = position

    @property
    def position(self) -> int:
        """Current scan position."""
        return self._position

    @property
    def remaining(self) -> str:
        """Text from the current position to the end."""
        return self.source[self._position:]

    def _find_between(self, left: str, right: str) -> tuple[int, int]:
        """Return (start, end) of the text strictly between left and right."""
        left_at = self.source.find(left, self._position)
        if left_at == -1:
            raise DelimiterNotFound(left)
        start = left_at + len(left)
        end = self.source.find(right, start)
        if end == -1:
            raise DelimiterNotFound(right)
        return start, end

    def take_between(self, left: str, right: str) -> str:
        """
        Extract text between the next left marker and the following right marker.

        The cursor moves to the first character after right.

        Raises:
            DelimiterNotFound: If either marker is missing
        """
        start, end = self._find_between(left, right)
        self._position = end + len(right)
        return self.source[start:end]

    def peek_between(self, left: str, right: str) -> str:
        """
        Like take_between, but leave the cursor on right itself.

        Used when right also opens the next token (e.g. a '[' starting a tag).
        """
        start, end = self._find_between(left, right)
        self._position = end
        return self.source[start:end]

    def skip_past(self, token: str) -> None:
        """Move the cursor just past the next occurrence of token."""
        at = self.source.find(token, self._position)
        if at == -1:
            raise DelimiterNotFound(token)
        self._position = at + len(token)

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, remaining={self.remaining!r})"
