"""Rendering of parsed entries as an annotated RTF event stream."""

from sclogparser.render.stream_renderer import EventStreamRenderer, render_log

__all__ = ["EventStreamRenderer", "render_log"]
