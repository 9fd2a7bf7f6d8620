"""
test_schemas.py - Create / update validation and the resource kind table.
"""

import pytest
from pydantic import ValidationError

from schemas import (
    EVENTS,
    EXCOS,
    RESOURCE_KINDS,
    DeveloperCreate,
    EventCreate,
    EventUpdate,
    ExcoCreate,
    ExcoUpdate,
    ResourceCreate,
    UiSettingsBase,
    UiSettingsUpdate,
    build_filter_model,
)


def _error_fields(exc: ValidationError) -> set:
    return {".".join(str(p) for p in err["loc"]) for err in exc.errors()}


class TestCreateModels:
    def test_event_defaults(self, town_hall):
        event = EventCreate.model_validate(town_hall)
        assert event.status == "draft"
        assert event.image_url is None

    def test_exco_defaults(self):
        exco = ExcoCreate.model_validate(
            {"name": "Ngozi Okeke", "position": "Treasurer", "email": "ngozi.okeke@nysc.gov.ng"}
        )
        assert exco.is_active is True
        assert exco.phone is None
        assert exco.image_url is None

    def test_developer_defaults(self):
        dev = DeveloperCreate.model_validate(
            {"name": "Tunde Bello", "email": "tunde.bello@nysc.gov.ng", "role": "Backend Developer"}
        )
        assert dev.status == "active"
        assert dev.skills is None

    def test_all_failing_fields_are_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            EventCreate.model_validate({"description": "", "category": "Sports", "status": "done"})
        fields = _error_fields(exc_info.value)
        assert {"title", "description", "date", "time", "location", "category", "status"} <= fields

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ExcoCreate.model_validate({"name": "A", "position": "B", "email": "not-an-email"})
        assert _error_fields(exc_info.value) == {"email"}

    def test_whitespace_only_required_string_rejected(self, town_hall):
        with pytest.raises(ValidationError) as exc_info:
            EventCreate.model_validate({**town_hall, "location": "   "})
        assert _error_fields(exc_info.value) == {"location"}

    def test_blank_optional_string_becomes_none(self):
        res = ResourceCreate.model_validate(
            {"title": "Guide", "category": "Documents", "fileType": "PDF", "fileUrl": ""}
        )
        assert res.file_url is None

    def test_camel_case_and_snake_case_accepted(self):
        by_alias = ResourceCreate.model_validate(
            {"title": "Guide", "category": "Forms", "fileType": "DOCX", "fileSize": "1 MB"}
        )
        by_name = ResourceCreate.model_validate(
            {"title": "Guide", "category": "Forms", "file_type": "DOCX", "file_size": "1 MB"}
        )
        assert by_alias == by_name
        assert by_alias.model_dump(by_alias=True)["fileSize"] == "1 MB"

    def test_server_owned_fields_ignored(self, town_hall):
        event = EventCreate.model_validate({**town_hall, "id": "mine", "createdAt": "yesterday"})
        assert "id" not in event.model_dump()
        assert "created_at" not in event.model_dump()

    def test_unknown_file_type_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ResourceCreate.model_validate({"title": "Guide", "category": "Documents", "fileType": "EXE"})
        assert _error_fields(exc_info.value) == {"fileType"}


class TestUpdateModels:
    def test_changes_only_contains_sent_fields(self):
        update = EventUpdate.model_validate({"status": "published"})
        assert update.changes() == {"status": "published"}

    def test_empty_update_is_valid(self):
        assert ExcoUpdate.model_validate({}).changes() == {}

    def test_constraints_apply_when_present(self):
        with pytest.raises(ValidationError) as exc_info:
            EventUpdate.model_validate({"status": "archived", "title": ""})
        assert _error_fields(exc_info.value) == {"status", "title"}

    def test_null_for_required_field_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ExcoUpdate.model_validate({"name": None, "isActive": None})
        assert _error_fields(exc_info.value) == {"name", "isActive"}

    def test_null_for_optional_field_clears_it(self):
        update = ExcoUpdate.model_validate({"phone": None})
        assert update.changes() == {"phone": None}


class TestUiSettingsModels:
    def test_defaults(self):
        settings = UiSettingsBase()
        assert settings.primary_color == "#006600"
        assert settings.secondary_color == "#C3B091"
        assert settings.accent_color == "#FFD700"
        assert settings.logo_url is None
        assert settings.contact_email == "contact@nyscjosnorth.gov.ng"

    @pytest.mark.parametrize("color", ["#123ABC", "#abcdef", "#000000"])
    def test_valid_hex_colors(self, color):
        assert UiSettingsUpdate.model_validate({"primaryColor": color}).primary_color == color

    @pytest.mark.parametrize("color", ["123ABC", "#12345", "#GGGGGG", "red", "#1234567"])
    def test_invalid_hex_colors(self, color):
        with pytest.raises(ValidationError) as exc_info:
            UiSettingsUpdate.model_validate({"accentColor": color})
        assert _error_fields(exc_info.value) == {"accentColor"}


class TestResourceKinds:
    def test_table_covers_plural_kinds(self):
        assert [k.name for k in RESOURCE_KINDS] == ["excos", "developers", "events", "resources"]

    def test_filter_fields_exist_on_record_models(self):
        for kind in RESOURCE_KINDS:
            for name in kind.filter_fields + kind.search_fields:
                assert name in kind.record_model.model_fields

    def test_filter_model_coerces_query_strings(self):
        filters = build_filter_model(EXCOS).model_validate({"isActive": "false"})
        assert filters.model_dump(exclude_none=True) == {"is_active": False}

    def test_filter_model_rejects_unknown_values(self):
        with pytest.raises(ValidationError):
            build_filter_model(EVENTS).model_validate({"status": "archived"})
