"""Unit tests for translation file formats."""

import json

import pytest

from localization.i18n.exceptions import UnsupportedFormatError
from localization.i18n.models import Gender
from localization.management import interchange
from tests.factories import make_value

pytestmark = pytest.mark.unit


@pytest.fixture
def translations():
    return {
        "nav.home": make_value("nav.home", "Accueil", context="button"),
        "greet": make_value("greet", "Bonjour {name}", variables={"name": "Ali"}),
    }


class TestCheckFormat:
    def test_case_insensitive(self):
        assert interchange.check_format("PO") == "po"

    def test_unsupported(self):
        with pytest.raises(UnsupportedFormatError):
            interchange.check_format("yaml")


class TestJson:
    def test_export_document(self, translations):
        document = json.loads(
            interchange.export_translations(translations, "json", "fr", "MA", author="ops")
        )

        assert document["language"] == "fr"
        assert document["market"] == "MA"
        assert document["metadata"]["author"] == "ops"
        assert document["translations"]["nav.home"] == {"value": "Accueil", "context": "button"}

    def test_parse_bare_map(self):
        parsed = interchange.parse_translations('{"a": "Un", "b": {"value": "Deux"}}', "json")

        assert parsed["a"].value == "Un"
        assert parsed["b"].value == "Deux"

    def test_invalid_gender_is_ignored(self):
        parsed = interchange.parse_translations(
            '{"a": {"value": "Un", "gender": "plural", "plural": "one"}}', "json"
        )

        assert parsed["a"].gender is None
        assert parsed["a"].plural_category.value == "one"

    def test_malformed_json_raises_value_error(self):
        with pytest.raises(ValueError):
            interchange.parse_translations("{not json", "json")


class TestPo:
    def test_round_trip_keeps_context(self, translations):
        content = interchange.export_translations(translations, "po", "fr", "FR")

        assert 'msgid "nav.home"' in content
        assert "#. Context: button" in content

        parsed = interchange.parse_translations(content, "po")
        assert parsed["nav.home"].value == "Accueil"
        assert parsed["nav.home"].context == "button"
        assert parsed["greet"].value == "Bonjour {name}"

    def test_untranslated_entries_are_skipped(self):
        content = 'msgid "a"\nmsgstr ""\n\nmsgid "b"\nmsgstr "Bee"\n'

        parsed = interchange.parse_translations(content, "po")

        assert list(parsed) == ["b"]


class TestXlf:
    def test_export_structure(self, translations):
        content = interchange.export_translations(translations, "xlf", "ar", "MA")

        assert content.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert 'target-language="ar"' in content
        assert '<trans-unit id="nav.home" resname="nav.home">' in content

    def test_parse_with_namespace(self, translations):
        content = interchange.export_translations(translations, "xlf", "fr", "FR")

        parsed = interchange.parse_translations(content, "xlf")

        assert parsed["nav.home"].value == "Accueil"
        assert parsed["nav.home"].context == "button"

    def test_malformed_xml(self):
        with pytest.raises(ValueError):
            interchange.parse_translations("<xliff><file>", "xlf")


class TestCsv:
    def test_export_header_and_variables(self, translations):
        content = interchange.export_translations(translations, "csv", "fr", "FR")
        lines = content.splitlines()

        assert lines[0] == "key,value,context,gender,plural,variables"
        assert lines[1] == "nav.home,Accueil,button,,,"

    def test_parse_rows(self):
        content = (
            "key,value,context,gender,plural,variables\n"
            'welcome,Bienvenue,title,feminine,,"{""name"": ""x""}"\n'
            "short,Court\n"
            ",orphan\n"
        )

        parsed = interchange.parse_translations(content, "csv")

        assert set(parsed) == {"welcome", "short"}
        assert parsed["welcome"].gender == Gender.FEMININE
        assert parsed["welcome"].variables == {"name": "x"}
        assert parsed["short"].context is None

    def test_bad_variables_json_is_ignored(self):
        parsed = interchange.parse_translations("key,value,context,gender,plural,variables\nk,v,,,,{bad\n", "csv")

        assert parsed["k"].variables == {}
