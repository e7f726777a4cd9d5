"""Event stream renderer - parsed entries to an annotated RTF document."""

from dataclasses import dataclass
from datetime import tzinfo
from typing import Callable, Iterable, Optional

from sclogparser.config.logging import get_logger
from sclogparser.core.errors import LogParseError
from sclogparser.core.models import (
    ActorDeathEntry,
    HostilityEventEntry,
    LogEntry,
    VehicleDestructionEntry,
)
from sclogparser.data.friendly_names import FriendlyNames
from sclogparser.parser.log_parser import iter_entries
from sclogparser.parser.patterns import NPC_MARKER
from sclogparser.render.rtf import RtfWriter

logger = get_logger()

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

NameResolver = Callable[[str], str]


def _is_npc(name: str) -> bool:
    return NPC_MARKER.casefold() in name.casefold()


@dataclass
class RenderStats:
    """Counters for one rendering pass."""

    events: int = 0  # Display lines written
    suppressed: int = 0  # Hostility hits folded into a previous line
    skipped: int = 0  # Lines dropped on a hard parse error


class EventStreamRenderer:
    """
    Render entries as one line each, collapsing runs of identical hits.

    Hostility events are noisy: the game logs the same hit many times in a
    row. Consecutive hits with the same source, target and child element are
    written once, followed by a "(+ N identical events)" counter. Run state
    lives on the instance and is reset at the start of every pass.
    """

    def __init__(
        self,
        names: Optional[NameResolver] = None,
        strict: bool = False,
        tz: Optional[tzinfo] = None,
    ) -> None:
        """
        Initialize renderer.

        Args:
            names: Raw code -> display name resolver (default: empty table,
                which only strips numeric id suffixes)
            strict: Propagate hard parse errors instead of skipping the line
            tz: Timezone for displayed timestamps (default: local time)
        """
        self._names: NameResolver = names if names is not None else FriendlyNames.empty()
        self._strict = strict
        self._tz = tz
        self.stats = RenderStats()
        self._writer = RtfWriter()
        self._pending: Optional[HostilityEventEntry] = None
        self._repeat_count = 0

    def render(self, text: str) -> str:
        """
        Parse and render a complete log text.

        Raises:
            LogParseError: Only in strict mode
        """
        self._reset()
        entries = iter_entries(text, strict=self._strict, on_error=self._on_parse_error)
        return self._render(entries)

    def render_entries(self, entries: Iterable[LogEntry]) -> str:
        """Render already-parsed entries, in order."""
        self._reset()
        return self._render(entries)

    def _reset(self) -> None:
        self.stats = RenderStats()
        self._writer = RtfWriter()
        self._pending = None
        self._repeat_count = 0

    def _on_parse_error(self, error: LogParseError) -> None:
        self.stats.skipped += 1

    def _render(self, entries: Iterable[LogEntry]) -> str:
        for entry in entries:
            self._feed(entry)

        if self._pending is not None:
            self._flush_run()

        logger.info(
            f"Rendered {self.stats.events} events "
            f"({self.stats.suppressed} repeats folded, {self.stats.skipped} lines skipped)"
        )
        return self._writer.getvalue()

    def _feed(self, entry: LogEntry) -> None:
        if isinstance(entry, HostilityEventEntry):
            if self._pending is not None:
                if entry.display_key == self._pending.display_key:
                    self._repeat_count += 1
                    self.stats.suppressed += 1
                    return
                self._flush_run()
            self._start_line(entry)
            self._append_hostility(entry)
            self._pending = entry
            return

        if self._pending is not None:
            self._flush_run()

        self._start_line(entry)
        if isinstance(entry, ActorDeathEntry):
            self._append_actor_death(entry)
        elif isinstance(entry, VehicleDestructionEntry):
            self._append_vehicle_destruction(entry)
        else:
            self._writer.text(f"Unknown event: {getattr(entry, 'kind', type(entry).__name__)}")
        self._writer.end_line()

    def _flush_run(self) -> None:
        """Close the line of the pending hostility run."""
        if self._repeat_count > 0:
            self._writer.text(f" (+ {self._repeat_count} identical events)")
        self._writer.end_line()
        self._pending = None
        self._repeat_count = 0

    def _start_line(self, entry: LogEntry) -> None:
        local = entry.timestamp.astimezone(self._tz)
        self._writer.text(local.strftime(TIMESTAMP_FORMAT)).text(" - ")
        self.stats.events += 1

    def _friendly(self, raw: str) -> str:
        return self._names(raw)

    def _append_actor_death(self, entry: ActorDeathEntry) -> None:
        if entry.victim_name == entry.killer_name == entry.weapon_name:
            self._writer.bold(self._friendly(entry.killer_name)).text(" backspaced")
            return

        if _is_npc(entry.victim_name):
            self._writer.muted()

        (
            self._writer.bold(self._friendly(entry.killer_name))
            .text(" killed ")
            .text(self._friendly(entry.victim_name))
            .text(" with ")
            .text(self._friendly(entry.weapon_name))
            .text(" in ")
            .text(self._friendly(entry.zone))
        )

    def _append_vehicle_destruction(self, entry: VehicleDestructionEntry) -> None:
        if entry.driver_name == entry.caused_by_name == entry.vehicle_name:
            self._writer.bold(self._friendly(entry.caused_by_name)).text(" backspaced")
            return

        (
            self._writer.bold(self._friendly(entry.caused_by_name))
            .text(" destroyed ")
            .text(self._friendly(entry.vehicle_name))
            .text(" of ")
            .text(self._friendly(entry.driver_name))
        )
        if entry.zone:
            self._writer.text(" in ").text(self._friendly(entry.zone))

    def _append_hostility(self, entry: HostilityEventEntry) -> None:
        if _is_npc(entry.source_name) or _is_npc(entry.target_name):
            self._writer.muted()

        (
            self._writer.bold(self._friendly(entry.source_name))
            .text(" hit ")
            .text(self._friendly(entry.target_name))
            .text(" (child element : ")
            .text(self._friendly(entry.child_name))
            .text(")")
        )


def render_log(
    text: str,
    names: Optional[NameResolver] = None,
    strict: bool = False,
    tz: Optional[tzinfo] = None,
) -> str:
    """
    Render a complete Game.log text as an RTF document.

    Args:
        text: Whole log contents
        names: Raw code -> display name resolver
        strict: Propagate hard parse errors instead of skipping the line
        tz: Timezone for displayed timestamps (default: local time)

    Returns:
        RTF document string
    """
    return EventStreamRenderer(names=names, strict=strict, tz=tz).render(text)
