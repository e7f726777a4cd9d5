"""Tests for vector text parsing."""

import pytest

from sclogparser.core.errors import MalformedVector
from sclogparser.core.models import Vec3
from sclogparser.parser.vectors import parse_vector, parse_vectors


class TestParseVectors:
    """Tests for position/velocity parsing."""

    def test_position_only(self):
        position, velocity = parse_vectors("x: 1.5, y: -2.25, z: 0")
        assert position == Vec3(1.5, -2.25, 0.0)
        assert velocity == Vec3(0.0, 0.0, 0.0)

    def test_position_and_velocity(self):
        position, velocity = parse_vectors("x: 1, y: 2, z: 3 vel x: 4, y: 5, z: 6")
        assert position == Vec3(1.0, 2.0, 3.0)
        assert velocity == Vec3(4.0, 5.0, 6.0)

    def test_game_log_precision(self):
        position, _ = parse_vectors(
            "x: -141105.640836, y: 312066.617001, z: 228710.641646"
        )
        assert position.x == pytest.approx(-141105.640836)
        assert position.y == pytest.approx(312066.617001)
        assert position.z == pytest.approx(228710.641646)

    def test_trailing_whitespace(self):
        assert parse_vector("x: -0.592138, y: 0.206040, z: -0.779051 ") == Vec3(
            -0.592138, 0.206040, -0.779051
        )

    def test_parse_vector_drops_velocity(self):
        assert parse_vector("x: 1, y: 2, z: 3 vel x: 4, y: 5, z: 6") == Vec3(1, 2, 3)

    def test_too_few_components(self):
        with pytest.raises(MalformedVector):
            parse_vectors("x: 1, y: 2")

    def test_too_few_velocity_components(self):
        with pytest.raises(MalformedVector):
            parse_vectors("x: 1, y: 2, z: 3 vel x: 4, y: 5")

    def test_missing_colon(self):
        with pytest.raises(MalformedVector):
            parse_vectors("x 1, y: 2, z: 3")

    def test_non_numeric(self):
        with pytest.raises(MalformedVector):
            parse_vectors("x: one, y: 2, z: 3")

    def test_rejects_scientific_notation(self):
        with pytest.raises(MalformedVector):
            parse_vectors("x: 1e5, y: 2, z: 3")

    @pytest.mark.parametrize(
        "text",
        [
            "x: \u0661.\u0665, y: 2, z: 3",  # Arabic-Indic digits
            "x: 1, y: \uff12, z: 3",  # full-width digit
            "x: 1, y: 2, z: 3 vel x: \u0664, y: 5, z: 6",
        ],
    )
    def test_rejects_non_ascii_digits(self, text):
        with pytest.raises(MalformedVector):
            parse_vectors(text)

    def test_rejects_comma_decimal_separator(self):
        # "1,5" splits into an extra component without a colon
        with pytest.raises(MalformedVector):
            parse_vectors("x: 1,5, y: 2, z: 3")
