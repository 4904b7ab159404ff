"""Tests for colour parsing and hex encoding."""

import numpy as np
import pytest

from rgbshade import Color, parse_colors, to_hex


class TestColor:
    """Test the Color value type."""

    def test_named_colour(self):
        """Test parsing a named colour."""
        assert Color.from_spec("red").hex == "#FF0000"
        assert Color.from_spec("navy").hex == "#000080"

    def test_hex_strings(self):
        """Test long, short, lower-case and alpha hex forms."""
        assert Color.from_spec("#CC0000").hex == "#CC0000"
        assert Color.from_spec("#cc0000").hex == "#CC0000"
        assert Color.from_spec("#abc").hex == "#AABBCC"
        assert Color.from_spec("#FF000080").hex == "#FF0000"

    def test_integer_triple(self):
        """Test integer tuples are 8-bit channels."""
        assert Color.from_spec((0, 128, 255)).hex == "#0080FF"
        assert Color.from_spec([10, 20, 30, 255]).as_tuple() == (10, 20, 30)

    def test_float_triple(self):
        """Test float tuples are normalized channels, rounded half up."""
        assert Color.from_spec((1.0, 0.5, 0.0)).hex == "#FF8000"

    def test_numpy_triple(self):
        """Test 1D NumPy arrays are accepted like tuples."""
        assert Color.from_spec(np.array([1, 2, 3])).as_tuple() == (1, 2, 3)

    def test_invalid_specs(self):
        """Test unparseable specs raise ValueError."""
        with pytest.raises(ValueError, match="Invalid colour"):
            Color.from_spec("notacolor")
        with pytest.raises(ValueError, match="Invalid colour"):
            Color.from_spec((256, 0, 0))
        with pytest.raises(ValueError, match="Invalid colour"):
            Color.from_spec((1.5, 0.0, 0.0))
        with pytest.raises(ValueError, match="Invalid colour"):
            Color.from_spec(42)
        with pytest.raises(ValueError, match="Invalid colour"):
            Color.from_spec("none")
        with pytest.raises(ValueError, match="Invalid colour"):
            Color.from_spec(" None ")

    def test_channel_validation(self):
        """Test direct construction checks channels."""
        with pytest.raises(ValueError, match="outside valid range"):
            Color(0, 300, 0)
        with pytest.raises(TypeError, match="must be an integer"):
            Color(0.5, 0, 0)

    def test_immutable(self):
        """Test Color is frozen."""
        color = Color(1, 2, 3)
        with pytest.raises(AttributeError):
            color.r = 4

    def test_str_is_hex(self):
        assert str(Color(255, 255, 255)) == "#FFFFFF"


class TestParseColors:
    """Test batch parsing."""

    def test_mixed_batch(self):
        """Test mixed spec kinds keep input order."""
        channels = parse_colors(["red", "#00FF00", (0, 0, 255)])

        assert channels.dtype == np.uint8
        assert channels.shape == (3, 3)
        assert channels.tolist() == [[255, 0, 0], [0, 255, 0], [0, 0, 255]]

    def test_single_string_is_batch_of_one(self):
        assert parse_colors("white").tolist() == [[255, 255, 255]]

    def test_single_tuple_is_batch_of_one(self):
        assert parse_colors((1, 2, 3)).tolist() == [[1, 2, 3]]

    def test_integer_matrix(self):
        """Test [N, 3] integer arrays pass through as channels."""
        cols = np.array([[255, 0, 0], [0, 0, 0]])
        assert parse_colors(cols).tolist() == [[255, 0, 0], [0, 0, 0]]

    def test_float_matrix_with_alpha(self):
        """Test [N, 4] float arrays are scaled and alpha dropped."""
        cols = np.array([[1.0, 0.0, 0.0, 0.5]])
        assert parse_colors(cols).tolist() == [[255, 0, 0]]

    def test_matrix_errors(self):
        """Test malformed channel arrays."""
        with pytest.raises(ValueError, match="shape"):
            parse_colors(np.zeros((2, 2)))
        with pytest.raises(ValueError, match="integer channels"):
            parse_colors(np.array([[0, 0, 256]]))
        with pytest.raises(ValueError, match="float channels"):
            parse_colors(np.array([[0.0, 0.0, 2.0]]))
        with pytest.raises(ValueError, match="NA"):
            parse_colors(np.array([[0.0, np.nan, 0.0]]))
        with pytest.raises(ValueError, match="empty"):
            parse_colors(np.zeros((0, 3), dtype=np.uint8))

    def test_empty_batch(self):
        with pytest.raises(ValueError, match="cols must not be empty"):
            parse_colors([])

    @pytest.mark.parametrize("missing", [None, float("nan"), np.nan, (255, float("nan"), 0)])
    def test_na_elements(self, missing):
        """Test NA markers anywhere in the batch are rejected."""
        with pytest.raises(ValueError, match="One or more cols is NA"):
            parse_colors(["red", missing])

    def test_invalid_elements_are_named(self):
        """Test every offending spec appears in the message."""
        with pytest.raises(ValueError, match="Invalid colours: foo, bar") as exc_info:
            parse_colors(["red", "foo", "blue", "bar"])

        # Underlying parse error is chained
        assert exc_info.value.__cause__ is not None


class TestToHex:
    """Test hex encoding."""

    def test_upper_case(self):
        channels = np.array([[204, 0, 0], [10, 171, 255]], dtype=np.uint8)
        assert to_hex(channels) == ["#CC0000", "#0AABFF"]

    def test_matches_color_hex(self):
        """Test batch encoding agrees with Color.hex."""
        channels = np.array([[1, 2, 3], [254, 127, 0]], dtype=np.uint8)

        assert to_hex(channels) == [Color(*row).hex for row in channels.tolist()]

    def test_empty(self):
        assert to_hex(np.zeros((0, 3), dtype=np.uint8)) == []
