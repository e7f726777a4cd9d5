"""Core domain models - dataclasses with no I/O dependencies."""

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum


class EventKind(Enum):
    """Kind of combat event, valued by the log event tag it is read from."""

    VEHICLE_DESTRUCTION = "Vehicle Destruction"
    ACTOR_DEATH = "Actor Death"
    HOSTILITY_EVENT = "Debug Hostility Events"

    @classmethod
    def from_tag(cls, tag: str) -> "EventKind | None":
        """Look up the kind for an exact event tag, None if not modelled."""
        for kind in cls:
            if kind.value == tag:
                return kind
        return None


@dataclass(frozen=True)
class Vec3:
    """Three-component vector (position, velocity or direction)."""

    x: float
    y: float
    z: float

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


ZERO_VEC3 = Vec3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class _Entry:
    """Fields and helpers shared by every parsed log entry."""

    timestamp: datetime  # Always UTC-aware

    def to_dict(self) -> dict:
        # kind is defined by each concrete entry class
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        data["kind"] = self.kind.name
        return data


@dataclass(frozen=True)
class VehicleDestructionEntry(_Entry):
    """Parsed <Vehicle Destruction> line."""

    vehicle_name: str
    vehicle_id: str
    zone: str
    position: Vec3
    velocity: Vec3
    driver_name: str
    driver_id: str
    from_level: int
    to_level: int  # Destroy level reached after the event
    caused_by_name: str
    caused_by_id: str
    cause_tag_team: str
    cause_tag_category: str

    @property
    def kind(self) -> EventKind:
        return EventKind.VEHICLE_DESTRUCTION


@dataclass(frozen=True)
class ActorDeathEntry(_Entry):
    """Parsed <Actor Death> line."""

    victim_name: str
    victim_id: str
    zone: str
    killer_name: str
    killer_id: str
    weapon_name: str
    damage_type: str
    direction: Vec3
    team_tag_1: str
    team_tag_2: str

    @property
    def kind(self) -> EventKind:
        return EventKind.ACTOR_DEATH


@dataclass(frozen=True)
class HostilityEventEntry(_Entry):
    """Parsed <Debug Hostility Events> line (high-frequency hit noise)."""

    source_name: str
    target_name: str
    child_name: str  # Empty when the line has no child section
    tag_1: str
    tag_2: str

    @property
    def kind(self) -> EventKind:
        return EventKind.HOSTILITY_EVENT

    @property
    def display_key(self) -> tuple[str, str, str]:
        """Fields two hits must share to be collapsed into one display line."""
        return (self.source_name, self.target_name, self.child_name)


# Type alias for any parsed entry
LogEntry = VehicleDestructionEntry | ActorDeathEntry | HostilityEventEntry
