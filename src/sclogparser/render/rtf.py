"""Minimal RTF document writer."""

# Color table: 1 = black, 2 = grey (muted lines). Keep the trailing space.
RTF_HEADER = r"{\rtf1\ansi{\colortbl ;\red0\green0\blue0;\red128\green128\blue128;}\fs20 "
RTF_FOOTER = "}"
BOLD_ON = r"\b "
BOLD_OFF = r"\b0 "
MUTED_ON = r"\cf2 "
COLOR_OFF = r"\cf0 "
PARAGRAPH = r"\par "

_RESERVED = {"\\": "\\\\", "{": "\\{", "}": "\\}"}


def escape_rtf(text: str) -> str:
    """
    Escape free text for insertion into an RTF document.

    Control characters (backslash and braces) are backslash-escaped and
    anything outside ASCII becomes a \\uN? escape (UTF-16 code units, signed).
    """
    out = []
    for ch in text:
        if ch in _RESERVED:
            out.append(_RESERVED[ch])
        elif ord(ch) < 128:
            out.append(ch)
        else:
            encoded = ch.encode("utf-16-le")
            for i in range(0, len(encoded), 2):
                unit = int.from_bytes(encoded[i:i + 2], "little")
                if unit > 0x7FFF:
                    unit -= 0x10000
                out.append(f"\\u{unit}?")
    return "".join(out)


class RtfWriter:
    """Accumulates one RTF document: header, lines of styled text, footer."""

    def __init__(self) -> None:
        self._parts: list[str] = [RTF_HEADER]

    def text(self, text: str) -> "RtfWriter":
        """Append escaped text."""
        self._parts.append(escape_rtf(text))
        return self

    def bold(self, text: str) -> "RtfWriter":
        """Append escaped text in bold."""
        self._parts.append(BOLD_ON)
        self._parts.append(escape_rtf(text))
        self._parts.append(BOLD_OFF)
        return self

    def muted(self) -> "RtfWriter":
        """Switch the rest of the current line to the muted color."""
        self._parts.append(MUTED_ON)
        return self

    def end_line(self) -> "RtfWriter":
        """Reset color and start a new paragraph."""
        self._parts.append(COLOR_OFF)
        self._parts.append(PARAGRAPH)
        return self

    def getvalue(self) -> str:
        """Return the finished document (footer appended)."""
        return "".join(self._parts) + RTF_FOOTER
