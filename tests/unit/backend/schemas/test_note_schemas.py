"""
Unit Tests for Note Schemas.

Tests structural validation of the note creation request.
"""

import pytest
from pydantic import ValidationError

from notebox.backend.models.note import Note
from notebox.backend.schemas.base import ApiResponse
from notebox.backend.schemas.note import ID_MAX, NoteCreate, NoteCreated


def _payload(**overrides):
    payload = {"idAccount": 1, "idUser": 5, "title": "Groceries", "content": "Milk, eggs"}
    payload.update(overrides)
    return payload


class TestNoteCreate:
    """Tests for NoteCreate."""

    def test_accepts_camel_case_payload(self):
        data = NoteCreate.model_validate(_payload())

        assert data.id_account == 1
        assert data.id_user == 5
        assert data.title == "Groceries"
        assert data.content == "Milk, eggs"

    def test_accepts_field_names(self):
        data = NoteCreate(id_account=1, id_user=5, title="t", content="c")

        assert data.id_account == 1

    def test_keeps_surrounding_whitespace(self):
        data = NoteCreate.model_validate(_payload(title="  t  ", content=" "))

        assert data.title == "  t  "
        assert data.content == " "

    @pytest.mark.parametrize("value", ["1", 1.0, True, None])
    def test_rejects_non_integer_account(self, value):
        with pytest.raises(ValidationError) as exc_info:
            NoteCreate.model_validate(_payload(idAccount=value))

        assert exc_info.value.errors()[0]["loc"] == ("idAccount",)

    @pytest.mark.parametrize("value", [0, -1])
    def test_rejects_non_positive_user(self, value):
        with pytest.raises(ValidationError) as exc_info:
            NoteCreate.model_validate(_payload(idUser=value))

        assert exc_info.value.errors()[0]["type"] == "greater_than"

    def test_accepts_largest_column_value(self):
        data = NoteCreate.model_validate(_payload(idAccount=ID_MAX, idUser=ID_MAX))

        assert data.id_account == 2_147_483_647

    @pytest.mark.parametrize("field", ["idAccount", "idUser"])
    @pytest.mark.parametrize("value", [ID_MAX + 1, 2**70])
    def test_rejects_ids_beyond_column_range(self, field, value):
        """Ids that cannot fit the INTEGER column fail structurally."""
        with pytest.raises(ValidationError) as exc_info:
            NoteCreate.model_validate(_payload(**{field: value}))

        error = exc_info.value.errors()[0]
        assert error["loc"] == (field,)
        assert error["type"] == "less_than_equal"

    def test_rejects_non_string_title(self):
        with pytest.raises(ValidationError):
            NoteCreate.model_validate(_payload(title=42))

    def test_title_limit_matches_column(self):
        """The request bound and the stored column share one limit."""
        title_field = NoteCreate.model_fields["title"]
        max_length = next(m.max_length for m in title_field.metadata if hasattr(m, "max_length"))

        assert max_length == Note.__table__.c.title.type.length == 255

    def test_title_length_bounds(self):
        NoteCreate.model_validate(_payload(title="x" * 255))

        with pytest.raises(ValidationError):
            NoteCreate.model_validate(_payload(title="x" * 256))
        with pytest.raises(ValidationError):
            NoteCreate.model_validate(_payload(title=""))

    def test_rejects_empty_content(self):
        with pytest.raises(ValidationError):
            NoteCreate.model_validate(_payload(content=""))

    def test_reports_all_missing_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            NoteCreate.model_validate({})

        locs = {err["loc"][0] for err in exc_info.value.errors()}
        assert locs == {"idAccount", "idUser", "title", "content"}


class TestNoteCreated:
    """Tests for NoteCreated."""

    def test_serializes_with_alias(self):
        assert NoteCreated(id_note=7).model_dump(by_alias=True) == {"idNote": 7}

    def test_envelope_serialization(self):
        response = ApiResponse[NoteCreated](data=NoteCreated(id_note=7))

        dumped = response.model_dump(mode="json", by_alias=True)

        assert dumped["success"] is True
        assert dumped["data"] == {"idNote": 7}
        assert dumped["error"] is None
        assert "timestamp" in dumped["metadata"]
