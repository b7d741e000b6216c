"""Tests for input validation."""

import json

import pytest

from moverchart.errors import InputError
from moverchart.validation import (
    Invalid,
    Valid,
    load_request,
    validate,
    validate_or_raise,
)


class TestValidate:
    """Test cases for validate."""

    def test_example_is_valid(self, example_raw):
        """✅ The bundled example passes validation."""
        result = validate(example_raw)

        assert isinstance(result, Valid)
        assert result.ok is True
        request = result.request
        assert request.title_main == "Sep 15"
        assert len(request.records) == 8
        assert request.records[0].ticker == "CHEK"
        assert request.records[0].logo_ref == "https://cdn.ainvest.com/icon/us/CHEK.png"
        assert request.records[-1].change_pct == "+22.43%"

    def test_empty_data_rejected(self, example_raw):
        """❌ An empty record list gets the specific empty-data message."""
        example_raw["data"] = []
        result = validate(example_raw)

        assert isinstance(result, Invalid)
        assert result.ok is False
        assert result.errors == ("Data list must not be empty",)

    def test_all_errors_are_collected(self, example_raw):
        """❌ Every problem is reported, in check order."""
        del example_raw["title_main"]
        del example_raw["data"][1]["ticker"]
        example_raw["data"][1]["driver"] = ""
        del example_raw["data"][4]["logo"]

        result = validate(example_raw)

        assert result.errors == (
            "Missing title_main field",
            "Item 2 is missing ticker field",
            "Item 2 is missing driver field",
            "Item 5 is missing logo field",
        )

    def test_missing_titles(self, example_raw):
        example_raw["title_main"] = ""
        del example_raw["title_sub"]
        assert validate(example_raw).errors == (
            "Missing title_main field",
            "Missing title_sub field",
        )

    @pytest.mark.parametrize("data", [None, "rows", {"ticker": "A"}, 7])
    def test_data_must_be_a_list(self, example_raw, data):
        example_raw["data"] = data
        assert validate(example_raw).errors == ("data field must be a list",)

    def test_item_must_be_an_object(self, example_raw):
        example_raw["data"] = [example_raw["data"][0], "oops"]
        assert validate(example_raw).errors == ("Item 2 must be an object",)

    @pytest.mark.parametrize("raw", [None, [], "text", 42])
    def test_non_object_input(self, raw):
        assert validate(raw).errors == ("Input must be a JSON object",)

    @pytest.mark.parametrize("logo", ["", "   ", None])
    def test_blank_logo_means_no_logo(self, example_raw, logo):
        """✅ An empty or null logo is accepted and becomes None."""
        example_raw["data"][0]["logo"] = logo
        result = validate(example_raw)

        assert isinstance(result, Valid)
        assert result.request.records[0].logo_ref is None

    def test_non_string_fields_rejected(self, example_raw):
        example_raw["data"][0]["change_pct"] = 12.5
        example_raw["data"][0]["logo"] = 3
        assert validate(example_raw).errors == (
            "Item 1 is missing logo field",
            "Item 1 is missing change_pct field",
        )


class TestValidateOrRaise:
    """Test cases for validate_or_raise and load_request."""

    def test_returns_request(self, example_raw):
        request = validate_or_raise(example_raw)
        assert request.title_sub == "Big Movers & Drivers"

    def test_raises_with_every_error(self, example_raw):
        example_raw["data"] = []
        del example_raw["title_sub"]

        with pytest.raises(InputError) as exc_info:
            validate_or_raise(example_raw)

        assert exc_info.value.errors == (
            "Missing title_sub field",
            "Data list must not be empty",
        )

    def test_load_request_from_file(self, tmp_path, example_raw):
        path = tmp_path / "movers.json"
        path.write_text(json.dumps(example_raw), encoding="utf-8")

        request = load_request(path)

        assert len(request.records) == 8

    def test_load_request_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(InputError) as exc_info:
            load_request(path)

        assert len(exc_info.value.errors) == 1
        assert exc_info.value.errors[0].startswith("Invalid JSON:")

    def test_load_request_non_utf8_bytes(self, tmp_path):
        """❌ A file in a legacy encoding is reported, not raised raw."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"title_main": "\xff"}')

        with pytest.raises(InputError) as exc_info:
            load_request(path)

        assert len(exc_info.value.errors) == 1
        assert exc_info.value.errors[0].startswith("Invalid JSON:")
