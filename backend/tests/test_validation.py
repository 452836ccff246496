"""
Posts API — Validation and Identifier Unit Tests
=================================================

What:  Tests for validate_payload() with the create/update schemas, and for
       post identifier generation and format checks.
How:   Pure function calls; no database, no HTTP.
"""

import pytest

from app.exceptions import ValidationError
from app.models.post import is_valid_post_id, new_post_id
from app.schemas.post import PostCreate, PostUpdate
from app.services.validation import format_errors, parse_json_body, validate_payload


def _paths(exc_info):
    return [tuple(err["path"]) for err in exc_info.value.errors]


class TestCreateValidation:
    """PostCreate requires title, body and a list of string tags."""

    def test_valid_payload(self, sample_post_data):
        data = validate_payload(PostCreate, sample_post_data)
        assert data.title == "Hello"
        assert data.tags == ["intro", "python"]

    def test_empty_tags_allowed(self):
        data = validate_payload(PostCreate, {"title": "t", "body": "b", "tags": []})
        assert data.tags == []

    @pytest.mark.parametrize("missing", ["title", "body", "tags"])
    def test_missing_required_field(self, sample_post_data, missing):
        del sample_post_data[missing]
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(PostCreate, sample_post_data)
        assert (missing,) in _paths(exc_info)

    def test_non_string_tag_rejected(self, sample_post_data):
        sample_post_data["tags"] = ["ok", 3]
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(PostCreate, sample_post_data)
        assert ("tags", 1) in _paths(exc_info)

    def test_tags_must_be_a_list(self, sample_post_data):
        sample_post_data["tags"] = "python"
        with pytest.raises(ValidationError):
            validate_payload(PostCreate, sample_post_data)

    def test_empty_title_rejected(self, sample_post_data):
        sample_post_data["title"] = ""
        with pytest.raises(ValidationError):
            validate_payload(PostCreate, sample_post_data)

    def test_number_is_not_coerced_to_string(self, sample_post_data):
        sample_post_data["body"] = 42
        with pytest.raises(ValidationError):
            validate_payload(PostCreate, sample_post_data)

    def test_unknown_field_rejected(self, sample_post_data):
        sample_post_data["author"] = "someone"
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(PostCreate, sample_post_data)
        assert ("author",) in _paths(exc_info)

    def test_non_object_payload_rejected(self):
        with pytest.raises(ValidationError):
            validate_payload(PostCreate, ["title", "body"])

    def test_missing_body_reports_every_required_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(PostCreate, None)
        assert set(_paths(exc_info)) == {("title",), ("body",), ("tags",)}

    def test_error_entries_are_structured(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(PostCreate, {"title": "t", "body": "b"})
        err = exc_info.value.errors[0]
        assert set(err) == {"path", "message", "type"}
        assert err["type"] == "missing"
        assert exc_info.value.context["errors"] == exc_info.value.errors


class TestUpdateValidation:
    """PostUpdate has no required fields but checks the ones supplied."""

    def test_empty_payload_is_valid(self):
        data = validate_payload(PostUpdate, {})
        assert data.model_dump(exclude_unset=True) == {}

    def test_only_supplied_fields_are_set(self):
        data = validate_payload(PostUpdate, {"title": "New title"})
        assert data.model_dump(exclude_unset=True) == {"title": "New title"}

    def test_bad_tags_rejected(self):
        with pytest.raises(ValidationError):
            validate_payload(PostUpdate, {"tags": [None]})

    def test_null_field_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(PostUpdate, {"body": None})
        assert ("body",) in _paths(exc_info)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            validate_payload(PostUpdate, {"id": "0" * 24})


class TestFormatErrors:

    def test_strips_body_prefix(self):
        errors = [{"loc": ("body", "title"), "msg": "Field required", "type": "missing"}]
        assert format_errors(errors, strip_prefix="body") == [
            {"path": ["title"], "message": "Field required", "type": "missing"}
        ]

    def test_keeps_other_locations(self):
        errors = [{"loc": ("query", "q"), "msg": "bad", "type": "value_error"}]
        assert format_errors(errors, strip_prefix="body")[0]["path"] == ["query", "q"]


class TestParseJsonBody:

    @pytest.mark.parametrize("raw", [b"", b"  \n"])
    def test_empty_body_is_none(self, raw):
        assert parse_json_body(raw) is None

    def test_object_body(self):
        assert parse_json_body(b'{"title": "x"}') == {"title": "x"}

    @pytest.mark.parametrize("raw", [b"{", b'{"title": ', b"\x80"])
    def test_invalid_json_rejected(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            parse_json_body(raw)

        assert exc_info.value.errors[0]["type"] == "json_invalid"
        assert exc_info.value.errors[0]["path"] == []


class TestPostIdentifiers:

    def test_new_ids_are_valid_and_distinct(self):
        ids = {new_post_id() for _ in range(100)}
        assert len(ids) == 100
        assert all(len(i) == 24 and is_valid_post_id(i) for i in ids)

    @pytest.mark.parametrize(
        "value",
        ["", "123", "z" * 24, "0" * 23, "0" * 25, "5f1d7f3e9b1e8a3c4d5e6f7g", "../" + "0" * 21],
    )
    def test_malformed_ids(self, value):
        assert is_valid_post_id(value) is False

    def test_uppercase_hex_accepted(self):
        assert is_valid_post_id("5F1D7F3E9B1E8A3C4D5E6F70") is True
