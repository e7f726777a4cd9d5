"""Game.log line grammar: cursor scanning, vectors, timestamps, dispatch."""

from sclogparser.parser.log_parser import iter_entries, parse_line, parse_lines

__all__ = ["iter_entries", "parse_line", "parse_lines"]
