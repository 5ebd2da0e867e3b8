"""Tests for fieldlog.lib.catalog module."""

import json

import pytest

from fieldlog.lib import validate
from fieldlog.lib.catalog import (
    DEFAULT_LABELS,
    DETAIL_FIELDS,
    LOCALES,
    Catalog,
    apply_overrides,
    builtin_catalog,
    load_catalog,
)
from fieldlog.lib.validate import ValidationError


class TestBuiltinCatalog:
    """Tests for builtin_catalog()."""

    def test_locales(self):
        assert LOCALES == ("en", "es")

    def test_default_is_english(self):
        catalog = builtin_catalog()
        assert catalog.locale == "en"
        assert catalog.message("empty") == "The field log is empty."

    def test_labels_shared_by_locales(self):
        for locale in LOCALES:
            assert builtin_catalog(locale).labels == DEFAULT_LABELS

    def test_locales_define_same_keys(self):
        en, es = builtin_catalog("en"), builtin_catalog("es")
        assert set(en.messages) == set(es.messages)
        assert set(en.details) == set(es.details) == set(DETAIL_FIELDS)

    def test_unknown_locale_falls_back(self, caplog):
        catalog = builtin_catalog("fr")
        assert catalog.locale == "en"
        assert "Unknown locale 'fr'" in caplog.text

    def test_returns_independent_copies(self):
        first = builtin_catalog()
        first.messages["empty"] = "changed"
        assert builtin_catalog().message("empty") == "The field log is empty."

    def test_detail_formatting(self):
        catalog = builtin_catalog("es")
        assert catalog.detail("shrub_stems", count=3) == "Tallos: 3"
        assert catalog.detail("tree_height", height="4.5") == "4.5 m"

    def test_schema_lists_every_message_key(self):
        schema_path = validate.SCHEMAS_DIR / "catalog.schema.json"
        schema = json.loads(schema_path.read_text())
        names = schema["properties"]["messages"]["propertyNames"]["enum"]
        assert set(names) == set(builtin_catalog().messages)
        assert set(schema["properties"]["details"]["properties"]) == set(DETAIL_FIELDS)
        assert set(schema["properties"]["labels"]["properties"]) == set(DEFAULT_LABELS)


class TestApplyOverrides:
    """Tests for apply_overrides()."""

    def test_overrides_single_keys(self):
        base = builtin_catalog()
        catalog = apply_overrides(base, {
            "labels": {"tree": "TREE"},
            "messages": {"header": "== Plants =="},
        })
        assert catalog.label("tree") == "TREE"
        assert catalog.label("herb") == "HIERBA"
        assert catalog.message("header") == "== Plants =="
        assert catalog.message("footer") == base.message("footer")

    def test_does_not_modify_base(self):
        base = builtin_catalog()
        apply_overrides(base, {"labels": {"herb": "HERB"}})
        assert base.label("herb") == "HIERBA"

    def test_rejects_unknown_section(self):
        with pytest.raises(ValidationError, match=r"\[catalog\]"):
            apply_overrides(builtin_catalog(), {"colors": {}})

    def test_rejects_unknown_message_key(self):
        with pytest.raises(ValidationError):
            apply_overrides(builtin_catalog(), {"messages": {"bogus": "x"}})

    def test_rejects_empty_label(self):
        with pytest.raises(ValidationError, match="labels.herb"):
            apply_overrides(builtin_catalog(), {"labels": {"herb": ""}})

    def test_rejects_bad_template(self):
        with pytest.raises(ValidationError, match="details.shrub_stems"):
            apply_overrides(builtin_catalog(), {"details": {"shrub_stems": "{stems} stems"}})

    @pytest.mark.parametrize("template", ["{count[0]} stems", "{count.total} stems"])
    def test_rejects_template_with_bad_field_access(self, template):
        """Indexing or attribute access on a sample value fails at load time."""
        with pytest.raises(ValidationError, match="details.shrub_stems"):
            apply_overrides(builtin_catalog(), {"details": {"shrub_stems": template}})

    def test_rejects_non_mapping(self):
        with pytest.raises(ValidationError):
            apply_overrides(builtin_catalog(), ["not", "a", "mapping"])


class TestLoadCatalog:
    """Tests for load_catalog()."""

    def test_no_path_returns_builtin(self):
        assert load_catalog("es") == builtin_catalog("es")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog("en", tmp_path / "nope.yaml")

    def test_loads_yaml_overrides(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "labels:\n"
            "  tree: TREE\n"
            "details:\n"
            "  tree_height: \"{height} meters\"\n"
        )
        catalog = load_catalog("en", path)
        assert isinstance(catalog, Catalog)
        assert catalog.label("tree") == "TREE"
        assert catalog.detail("tree_height", height="3") == "3 meters"

    def test_file_locale_wins(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("locale: es\nmessages:\n  goodbye: Chao\n")
        catalog = load_catalog("en", path)
        assert catalog.locale == "es"
        assert catalog.message("goodbye") == "Chao"
        assert catalog.message("empty") == "La bitacora esta vacia."

    def test_empty_file_uses_builtin(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("")
        assert load_catalog("es", path) == builtin_catalog("es")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("labels: [unclosed\n")
        with pytest.raises(ValidationError, match="Invalid YAML"):
            load_catalog("en", path)

    def test_non_string_locale_is_validation_error(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("locale: [fr]\n")
        with pytest.raises(ValidationError, match="locale"):
            load_catalog("en", path)

    def test_error_names_source_file(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("labels:\n  herb: 5\n  cactus: CACTUS\n")
        with pytest.raises(ValidationError) as excinfo:
            load_catalog("en", path)
        message = str(excinfo.value)
        assert str(path) in message
        assert "labels.herb" in message
        assert "cactus" in message
