"""Per-event-kind grammars over the tag-stripped rest of a log line."""

from datetime import datetime
from typing import Callable

from sclogparser.core.errors import MalformedInteger
from sclogparser.core.models import (
    ActorDeathEntry,
    EventKind,
    HostilityEventEntry,
    LogEntry,
    VehicleDestructionEntry,
)
from sclogparser.parser.cursor import Cursor
from sclogparser.parser.patterns import (
    BRACKET_CLOSE,
    BRACKET_OPEN,
    CAUSE_OPEN,
    CAUSER_OPEN,
    CLASS_BLOCK_OPEN,
    DAMAGE_TYPE_OPEN,
    DESTROY_LEVEL_OPEN,
    DESTROY_LEVEL_TO,
    DIRECTION_OPEN,
    DRIVER_OPEN,
    HIT_CHILD_OPEN,
    HIT_CHILD_TERMINATORS,
    HIT_SOURCE_OPEN,
    HIT_TARGET_END,
    HIT_TARGET_OPEN,
    INTEGER_PATTERN,
    KILLER_OPEN,
    POSITION_OPEN,
    QUOTE,
    VEHICLE_NAME_OPEN,
    VICTIM_OPEN,
    WEAPON_OPEN,
    ZONE_OPEN,
)
from sclogparser.parser.vectors import parse_vector, parse_vectors


def _parse_level(text: str) -> int:
    if not INTEGER_PATTERN.fullmatch(text):
        raise MalformedInteger(f"Malformed destroy level: {text!r}")
    return int(text)


def _take_bracketed(cursor: Cursor) -> str:
    return cursor.take_between(BRACKET_OPEN, BRACKET_CLOSE)


def parse_vehicle_destruction(rest: str, timestamp: datetime) -> VehicleDestructionEntry:
    """
    Parse the body of a <Vehicle Destruction> line.

    Fields are read in the order the game writes them; the first missing
    marker fails the whole line.
    """
    cursor = Cursor(rest)
    vehicle_name = cursor.take_between(VEHICLE_NAME_OPEN, QUOTE)
    vehicle_id = _take_bracketed(cursor)
    zone = cursor.take_between(ZONE_OPEN, QUOTE)

    position, velocity = parse_vectors(cursor.take_between(POSITION_OPEN, BRACKET_CLOSE))

    driver_name = cursor.take_between(DRIVER_OPEN, QUOTE)
    driver_id = _take_bracketed(cursor)

    # Stop on " to " so the next lookup can start from it
    from_level = _parse_level(cursor.peek_between(DESTROY_LEVEL_OPEN, DESTROY_LEVEL_TO))
    to_level = _parse_level(cursor.take_between(DESTROY_LEVEL_TO, " "))

    caused_by_name = cursor.take_between(CAUSER_OPEN, QUOTE)
    caused_by_id = _take_bracketed(cursor)

    cursor.take_between(CAUSE_OPEN, QUOTE)
    cause_tag_team = _take_bracketed(cursor)
    cause_tag_category = _take_bracketed(cursor)

    return VehicleDestructionEntry(
        timestamp=timestamp,
        vehicle_name=vehicle_name,
        vehicle_id=vehicle_id,
        zone=zone,
        position=position,
        velocity=velocity,
        driver_name=driver_name,
        driver_id=driver_id,
        from_level=from_level,
        to_level=to_level,
        caused_by_name=caused_by_name,
        caused_by_id=caused_by_id,
        cause_tag_team=cause_tag_team,
        cause_tag_category=cause_tag_category,
    )


def parse_actor_death(rest: str, timestamp: datetime) -> ActorDeathEntry:
    """Parse the body of an <Actor Death> line."""
    cursor = Cursor(rest)
    victim_name = cursor.take_between(VICTIM_OPEN, QUOTE)
    victim_id = _take_bracketed(cursor)
    zone = cursor.take_between(ZONE_OPEN, QUOTE)

    killer_name = cursor.take_between(KILLER_OPEN, QUOTE)
    killer_id = _take_bracketed(cursor)

    weapon_name = cursor.take_between(WEAPON_OPEN, QUOTE)
    # Newer builds add "[Class <weapon class>]" after the weapon
    if cursor.remaining.lstrip().startswith(CLASS_BLOCK_OPEN):
        cursor.skip_past(BRACKET_CLOSE)

    damage_type = cursor.take_between(DAMAGE_TYPE_OPEN, QUOTE)

    # Vector text runs up to the '[' opening the first team tag
    direction = parse_vector(cursor.peek_between(DIRECTION_OPEN, BRACKET_OPEN))
    team_tag_1 = _take_bracketed(cursor)
    team_tag_2 = _take_bracketed(cursor)

    return ActorDeathEntry(
        timestamp=timestamp,
        victim_name=victim_name,
        victim_id=victim_id,
        zone=zone,
        killer_name=killer_name,
        killer_id=killer_id,
        weapon_name=weapon_name,
        damage_type=damage_type,
        direction=direction,
        team_tag_1=team_tag_1,
        team_tag_2=team_tag_2,
    )


def _trailing_tags(rest: str, floor: int) -> tuple[str, str]:
    """
    Find up to two trailing [tag] groups by scanning backward from the end.

    The scan never looks left of floor, so bracketed markers before the
    hit description are not mistaken for tags.
    """
    tags: list[str] = []
    limit = len(rest)
    while len(tags) < 2:
        close = rest.rfind(BRACKET_CLOSE, floor, limit)
        if close == -1:
            break
        open_ = rest.rfind(BRACKET_OPEN, floor, close)
        if open_ == -1:
            break
        tags.append(rest[open_ + 1:close])
        limit = open_

    while len(tags) < 2:
        tags.append("")
    # Collected right to left
    return tags[1], tags[0]


def parse_hostility_event(rest: str, timestamp: datetime) -> HostilityEventEntry:
    """
    Parse the body of a <Debug Hostility Events> line.

    This grammar is deliberately loose: only FROM and TO are required, the
    child section and the trailing tags may be missing.
    """
    cursor = Cursor(rest)
    source_name = cursor.take_between(HIT_SOURCE_OPEN, HIT_TARGET_OPEN)

    target_start = cursor.position
    target_end = rest.find(HIT_TARGET_END, target_start)
    if target_end == -1:
        target_name = rest[target_start:].strip()
        tail_start = len(rest)
    else:
        target_name = rest[target_start:target_end]
        tail_start = target_end + len(HIT_TARGET_END)

    child_name = ""
    if target_end != -1:
        child_at = rest.find(HIT_CHILD_OPEN, tail_start)
        if child_at != -1:
            child_start = child_at + len(HIT_CHILD_OPEN)
            child_end = len(rest)
            for terminator in HIT_CHILD_TERMINATORS:
                found = rest.find(terminator, child_start)
                if found != -1:
                    child_end = min(child_end, found)
            child_name = rest[child_start:child_end]

    tag_1, tag_2 = _trailing_tags(rest, tail_start)

    return HostilityEventEntry(
        timestamp=timestamp,
        source_name=source_name,
        target_name=target_name,
        child_name=child_name,
        tag_1=tag_1,
        tag_2=tag_2,
    )


GrammarParser = Callable[[str, datetime], LogEntry]

# Event tag -> grammar; tags not listed here are skipped by the dispatcher
GRAMMARS: dict[EventKind, GrammarParser] = {
    EventKind.VEHICLE_DESTRUCTION: parse_vehicle_destruction,
    EventKind.ACTOR_DEATH: parse_actor_death,
    EventKind.HOSTILITY_EVENT: parse_hostility_event,
}
