import pytest

from commontests.assertions import (
    convert_time,
    generate_number,
    generate_string,
    get_index_object_in_array,
)
from commontests.validation import ArgumentRangeError, ArgumentTypeError


class TestConvertTime:
    """Unit tests for rendering milliseconds."""

    @pytest.mark.parametrize(
        "ms,expected",
        [
            (999, "999ms"),
            (1000, "1s"),
            (1500, "1.5s"),
            (250.5, "250.5ms"),
            (2000.0, "2s"),
        ],
    )
    def test_converts(self, ms, expected):
        assert convert_time(ms) == expected

    def test_non_number_raises(self):
        with pytest.raises(ArgumentTypeError) as excinfo:
            convert_time("1000")
        assert excinfo.value.function == "convert_time"


class TestGetIndexObjectInArray:
    """Unit tests for finding objects by property."""

    def test_finds_first_match(self):
        assert get_index_object_in_array([{"id": 1}, {"id": 2}], "id", 2) == 1
        assert get_index_object_in_array([{"id": 2}, {"id": 2}], "id", 2) == 0

    def test_no_match(self):
        assert get_index_object_in_array([{"id": 1}], "id", 9) == -1
        assert get_index_object_in_array([{"name": "x"}], "id", None) == -1

    def test_empty_array(self):
        assert get_index_object_in_array([], "id", 1) == -1

    @pytest.mark.parametrize(
        "array,prop",
        [
            ({"id": 1}, "id"),
            ("[{}]", "id"),
            ([{"id": 1}, 2], "id"),
            ([{"id": 1}], 1),
        ],
    )
    def test_bad_arguments_raise(self, array, prop):
        with pytest.raises(ArgumentTypeError) as excinfo:
            get_index_object_in_array(array, prop, 1)
        assert excinfo.value.function == "get_index_object_in_array"


class TestGenerators:
    """Unit tests for random value generators."""

    def test_number_equal_bounds(self):
        assert all(generate_number(5, 5) == 5 for _ in range(20))

    def test_number_in_range(self):
        values = {generate_number(-2, 2) for _ in range(200)}
        assert values <= {-2, -1, 0, 1, 2}

    def test_number_swapped_bounds_raise(self):
        with pytest.raises(ArgumentRangeError) as excinfo:
            generate_number(3, 1)
        assert excinfo.value.function == "generate_number"

    def test_number_non_number_raises(self):
        with pytest.raises(ArgumentTypeError):
            generate_number("1", 3)

    def test_string_length_and_alphabet(self):
        text = generate_string(32)
        assert len(text) == 32
        assert text.isascii() and text.isalpha()

    def test_string_zero_length(self):
        assert generate_string(0) == ""

    def test_string_bad_length(self):
        with pytest.raises(ArgumentTypeError):
            generate_string("5")
        with pytest.raises(ArgumentRangeError):
            generate_string(-1)
