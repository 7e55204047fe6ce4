import re

import pytest
from jsonschema import Draft7Validator

from commontests.schemas import (
    get_regex_guid,
    get_regex_iso_datetime,
    get_regex_url,
    get_schema_hal,
)
from commontests.validation import ArgumentRangeError, ArgumentTypeError


class TestPatterns:
    """Unit tests for the regex pattern providers."""

    def test_guid(self):
        pattern = re.compile(get_regex_guid())
        assert pattern.search("123e4567-e89b-12d3-a456-426614174000")
        assert not pattern.search("00000000-0000-0000-0000-000000000000")
        assert not pattern.search("123e4567-e89b-12d3-a456-42661417400")

    def test_guid_extra_exclusions(self):
        pattern = re.compile(get_regex_guid("11111111-1111-1111-1111-111111111111"))
        assert not pattern.search("11111111-1111-1111-1111-111111111111")
        assert not pattern.search("00000000-0000-0000-0000-000000000000")
        assert pattern.search("123e4567-e89b-12d3-a456-426614174000")

    @pytest.mark.parametrize(
        "value,matches",
        [
            ("2019-05-26T10:15:30Z", True),
            ("2019-05-26T10:15:30.123Z", True),
            ("0001-01-01T00:00:00Z", False),
            ("2019-05-26 10:15:30Z", False),
            ("2019-05-26T10:15:30+02:00", False),
        ],
    )
    def test_iso_datetime(self, value, matches):
        assert bool(re.search(get_regex_iso_datetime(), value)) is matches

    @pytest.mark.parametrize(
        "value,matches",
        [
            ("https://api.example.com/items", True),
            ("http://localhost:8080/items", True),
            ("ftp://example.com", False),
            ("https://intranet/items", False),
        ],
    )
    def test_url(self, value, matches):
        assert bool(re.search(get_regex_url(), value)) is matches


class TestSchemaHAL:
    """Unit tests for the HAL list schema builder."""

    def test_default_accepts_any_item(self, hal_body):
        schema = get_schema_hal()
        assert schema["properties"]["_embedded"]["properties"]["resourceList"]["items"] == {}
        hal_body["_embedded"]["resourceList"].append({"anything": True})
        assert not list(Draft7Validator(schema).iter_errors(hal_body))

    def test_item_schema_is_applied(self, hal_body):
        schema = get_schema_hal({"type": "object", "required": ["id"]})
        assert not list(Draft7Validator(schema).iter_errors(hal_body))

        hal_body["_embedded"]["resourceList"].append({"name": "no id"})
        errors = list(Draft7Validator(schema).iter_errors(hal_body))
        assert len(errors) == 1
        assert "'id' is a required property" in errors[0].message

    def test_requires_envelope(self):
        schema = get_schema_hal()
        assert schema["required"] == ["_links", "_embedded", "_page"]
        assert schema["properties"]["_links"]["required"] == ["self", "first", "last"]
        assert schema["properties"]["_page"]["required"] == ["size", "number"]

    def test_strict_links(self, hal_body):
        schema = get_schema_hal(strict_links=True)
        assert schema["properties"]["_links"]["required"] == [
            "self", "first", "last", "next", "previous",
        ]
        # previous is present but null, which is allowed
        assert not list(Draft7Validator(schema).iter_errors(hal_body))

        del hal_body["_links"]["previous"]
        assert list(Draft7Validator(schema).iter_errors(hal_body))

    def test_page_number_minimum(self, hal_body):
        hal_body["_page"]["number"] = 0
        assert list(Draft7Validator(get_schema_hal()).iter_errors(hal_body))
        assert not list(Draft7Validator(get_schema_hal(first_page=0)).iter_errors(hal_body))

    def test_rejects_bad_link(self, hal_body):
        hal_body["_links"]["self"]["href"] = "not a url"
        assert list(Draft7Validator(get_schema_hal()).iter_errors(hal_body))

    def test_returns_independent_copies(self):
        items = {"type": "object", "required": ["id"]}
        schema = get_schema_hal(items)
        schema["properties"]["_embedded"]["properties"]["resourceList"]["items"]["required"].append("x")
        assert items["required"] == ["id"]

    @pytest.mark.parametrize("bad", [[], "object", 42])
    def test_rejects_non_object_item_schema(self, bad):
        with pytest.raises(ArgumentTypeError) as excinfo:
            get_schema_hal(bad)
        assert excinfo.value.function == "get_schema_hal"

    def test_rejects_bad_first_page(self):
        with pytest.raises(ArgumentRangeError):
            get_schema_hal(first_page=2)

    def test_schema_is_valid_draft7(self):
        Draft7Validator.check_schema(get_schema_hal({"type": "object"}, strict_links=True))
