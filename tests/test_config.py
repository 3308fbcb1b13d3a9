"""Settings, form field mapping and store selection."""

import pytest
from pydantic import ValidationError

from meal_tracker.config import DEFAULT_FORM_FIELDS, Settings, get_form_fields, get_settings
from meal_tracker.store import InMemoryMealStore, SheetsMealStore, create_store


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_form_fields_from_yaml(tmp_path):
    (tmp_path / "form_fields.yaml").write_text(
        "fields:\n  date: entry.10\n  lunch: entry.20\n  dinner: entry.30\n"
    )
    assert get_form_fields(str(tmp_path)) == {
        "date": "entry.10",
        "lunch": "entry.20",
        "dinner": "entry.30",
    }


def test_form_fields_partial_yaml_uses_defaults(tmp_path):
    (tmp_path / "form_fields.yaml").write_text("fields:\n  lunch: entry.20\n")
    fields = get_form_fields(str(tmp_path))
    assert fields["lunch"] == "entry.20"
    assert fields["date"] == DEFAULT_FORM_FIELDS["date"]


def test_form_fields_missing_file(tmp_path):
    assert get_form_fields(str(tmp_path / "nowhere")) == DEFAULT_FORM_FIELDS


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SHEET_ID", "sheet-1")
    monkeypatch.setenv("FORM_ID", "form-1")
    monkeypatch.setenv("SUBMIT_DELAY_SECONDS", "0.25")
    monkeypatch.setenv("CONFIRM_WRITES", "true")
    settings = Settings(_env_file=None)
    assert settings.uses_sheets
    assert settings.submit_delay_seconds == 0.25
    assert settings.confirm_writes is True
    assert settings.sheet_name == "Sheet1"


def test_create_store_without_ids_is_in_memory(monkeypatch, fresh_settings):
    monkeypatch.setenv("SHEET_ID", "")
    monkeypatch.setenv("FORM_ID", "")
    assert isinstance(create_store(), InMemoryMealStore)


def test_create_store_with_ids_uses_sheets(monkeypatch, fresh_settings):
    monkeypatch.setenv("SHEET_ID", "sheet-1")
    monkeypatch.setenv("FORM_ID", "form-1")
    store = create_store()
    assert isinstance(store, SheetsMealStore)
    assert "form-1" in store.form_url


def test_log_level_is_normalized():
    assert Settings(_env_file=None, log_level=" debug ").log_level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError, match="unknown log level"):
        Settings(_env_file=None, log_level="verbose")
