"""Tests for argument coercion and validation helpers."""

import numpy as np
import pytest

from rgbshade.validators import coerce_factor, coerce_flag, is_na, validate_range


class TestIsNa:
    def test_nan_values(self):
        assert is_na(float("nan"))
        assert is_na(np.float32("nan"))

    def test_non_nan_values(self):
        assert not is_na(None)
        assert not is_na(0.0)
        assert not is_na("nan")
        assert not is_na((1, 2, 3))


class TestCoerceFactor:
    """Test adjustment factor coercion."""

    @pytest.mark.parametrize(
        "value, expected",
        [(0, 0.0), (1, 1.0), (-1, -1.0), (0.25, 0.25), ("-0.5", -0.5), (np.float32(0.5), 0.5), (True, 1.0)],
    )
    def test_valid(self, value, expected):
        assert coerce_factor(value) == expected

    @pytest.mark.parametrize("value", [1.5, -1.01, float("inf"), "2"])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError, match="adj must be between -1 and 1"):
            coerce_factor(value)

    def test_unparseable_string(self):
        with pytest.raises(ValueError, match="can not be coerced to numeric: 'abc'"):
            coerce_factor("abc")

    @pytest.mark.parametrize("value", [float("nan"), "nan"])
    def test_na(self, value):
        with pytest.raises(ValueError, match="adj is NA"):
            coerce_factor(value)

    def test_wrong_type(self):
        with pytest.raises(TypeError, match="must be a number"):
            coerce_factor([0.1])

    def test_param_name_in_messages(self):
        with pytest.raises(ValueError, match="factor must be between"):
            coerce_factor(3, "factor")


class TestCoerceFlag:
    """Test logical flag coercion."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, True),
            (False, False),
            (np.bool_(True), True),
            (1, True),
            (0, False),
            (0.5, True),
            ("TRUE", True),
            ("T", True),
            ("false", False),
            ("F", False),
        ],
    )
    def test_valid(self, value, expected):
        assert coerce_flag(value) is expected

    def test_unparseable_string(self):
        with pytest.raises(ValueError, match="plot can not be coerced to logical"):
            coerce_flag("maybe")

    def test_na(self):
        with pytest.raises(ValueError, match="plot is NA"):
            coerce_flag(float("nan"))

    def test_wrong_type(self):
        with pytest.raises(TypeError, match="plot is not logical"):
            coerce_flag([True])


class _Target:
    @validate_range(0.0, 1.0, "amount")
    def set(self, amount):
        return amount


class TestValidateRange:
    """Test the range-checking decorator."""

    def test_in_range_passes_through(self):
        assert _Target().set(0.5) == 0.5
        assert _Target().set(amount=1.0) == 1.0

    def test_out_of_range(self):
        with pytest.raises(ValueError, match=r"amount=1.5 is outside valid range \[0.0, 1.0\]"):
            _Target().set(1.5)

    def test_wrong_type(self):
        with pytest.raises(TypeError, match="amount must be a number"):
            _Target().set("0.5")
        with pytest.raises(TypeError):
            _Target().set(True)
