"""Tests for the locale catalogues."""
import json

import pytest

from numformat import LocaleCatalogue, get_locale, set_locale
from numformat.i18n import gettext


@pytest.fixture
def catalogue():
    return LocaleCatalogue("fr", {
        "labels": {"NaN": "Pas un nombre", "-Infinity": "-Infini"},
        "number": {"decimal_point": ",", "thousands_sep": " "},
    })


class TestLocaleCatalogue:

    def test_find(self, catalogue):
        assert catalogue.find("NaN") == "Pas un nombre"
        assert catalogue.find("decimal_point") == ","
        assert catalogue.find("thousands_sep") == " "

    def test_find_missing(self, catalogue):
        assert catalogue.find("NaN", "de") is None

    def test_region_falls_back_to_language(self, catalogue):
        catalogue.load_from_value({"number": {"thousands_sep": " "}}, "fr_CA")
        assert catalogue.find("thousands_sep", "fr_CA") == " "
        assert catalogue.find("decimal_point", "fr_CA") == ","
        assert catalogue.find("NaN", "fr-BE") == "Pas un nombre"

    def test_active_locale(self, catalogue):
        catalogue.load_from_value({"labels": {"NaN": "Keine Zahl"}}, "de")
        catalogue.locale = "de"
        assert catalogue.gettext("NaN") == "Keine Zahl"
        assert catalogue.find("decimal_point") is None

    def test_gettext_falls_back_to_message(self):
        assert LocaleCatalogue("en").gettext("-Infinity") == "-Infinity"

    def test_reload_replaces_entries(self, catalogue):
        catalogue.load_from_value({"labels": {"NaN": "NaN"}})
        assert catalogue.find("NaN") == "NaN"
        assert catalogue.find("-Infinity") == "-Infini"

    def test_empty_thousands_separator_is_kept(self):
        catalogue = LocaleCatalogue("C", {"number": {"thousands_sep": ""}})
        assert catalogue.find("thousands_sep") == ""

    @pytest.mark.parametrize("data", [
        {"currency": {"symbol": "€"}},
        {"labels": {"Zero": "0"}},
        {"number": {"decimal_point": 1}},
        {"number": ","},
    ])
    def test_invalid_data(self, data):
        with pytest.raises(ValueError):
            LocaleCatalogue("en", data)


class TestLoading:

    def test_json(self, tmp_path):
        path = tmp_path / "fr.json"
        path.write_text(json.dumps({"labels": {"NaN": "Pas un nombre"}}), encoding="utf-8")
        assert LocaleCatalogue("fr", path).find("NaN") == "Pas un nombre"

    def test_empty_json(self, tmp_path):
        path = tmp_path / "en.json"
        path.write_text("", encoding="utf-8")
        assert LocaleCatalogue("en", path).find("NaN") is None

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "en.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            LocaleCatalogue("en", path)

    def test_yaml(self, tmp_path):
        path = tmp_path / "de.yaml"
        path.write_text("number:\n  decimal_point: ','\n  thousands_sep: '.'\n", encoding="utf-8")
        catalogue = LocaleCatalogue("de", str(path))
        assert catalogue.find("thousands_sep") == "."

    def test_toml(self, tmp_path):
        path = tmp_path / "it.toml"
        path.write_text('[labels]\n"-Infinity" = "-Infinito"\n', encoding="utf-8")
        assert LocaleCatalogue("it", path).find("-Infinity") == "-Infinito"

    def test_load_into_other_locale(self, tmp_path):
        path = tmp_path / "de.json"
        path.write_text(json.dumps({"number": {"decimal_point": ","}}), encoding="utf-8")
        catalogue = LocaleCatalogue("en")
        catalogue.load_from_file(path, "de")
        assert catalogue.locales == ["de"]
        assert catalogue.find("decimal_point", "de") == ","

    def test_file_must_hold_a_table(self, tmp_path):
        path = tmp_path / "en.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError):
            LocaleCatalogue("en", path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LocaleCatalogue("en", tmp_path / "missing.json")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "en.ini"
        path.write_text("NaN=NaN", encoding="utf-8")
        with pytest.raises(ValueError):
            LocaleCatalogue("en", path)


class TestActiveLocale:

    def test_set_locale_returns_previous(self, catalogue):
        assert set_locale(catalogue) is None
        assert get_locale() is catalogue
        assert set_locale(None) is catalogue

    def test_gettext_without_locale(self):
        assert gettext("NaN") == "NaN"

    def test_gettext_with_locale(self, catalogue):
        set_locale(catalogue)
        assert gettext("NaN") == "Pas un nombre"
