"""Parser for 'x: .., y: .., z: ..' vector text."""

from sclogparser.core.errors import MalformedVector
from sclogparser.core.models import Vec3, ZERO_VEC3
from sclogparser.parser.patterns import DECIMAL_PATTERN, VELOCITY_SEPARATOR


def _parse_component(text: str) -> float:
    _, colon, value = text.partition(":")
    value = value.strip()
    if not colon or not DECIMAL_PATTERN.fullmatch(value):
        raise MalformedVector(f"Malformed vector component: {text.strip()!r}")
    return float(value)


def _parse_half(text: str) -> Vec3:
    parts = text.split(",")
    if len(parts) < 3:
        raise MalformedVector(
            f"Expected 3 vector components, got {len(parts)}: {text.strip()!r}"
        )
    x, y, z = (_parse_component(part) for part in parts[:3])
    return Vec3(x, y, z)


def parse_vectors(text: str) -> tuple[Vec3, Vec3]:
    """
    Parse a position and optional velocity.

    Args:
        text: e.g. "x: 1, y: 2, z: 3" or "x: 1, y: 2, z: 3 vel x: 4, y: 5, z: 6"

    Returns:
        (position, velocity); velocity is the zero vector when absent

    Raises:
        MalformedVector: If either half has fewer than 3 components or a
            number is not in plain decimal form
    """
    position_text, separator, velocity_text = text.partition(VELOCITY_SEPARATOR)
    position = _parse_half(position_text)
    if not separator:
        return position, ZERO_VEC3
    return position, _parse_half(velocity_text)


def parse_vector(text: str) -> Vec3:
    """Parse a single vector, ignoring any velocity part."""
    return parse_vectors(text)[0]
