"""Tests for infrastructure.i18n.models module."""

import pytest

from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    LOCALE_NAMES,
    LoadNamespacesOptions,
    Locale,
    is_nested,
    locale_code,
)

pytestmark = pytest.mark.unit


class TestLocale:
    """Tests for Locale enum."""

    def test_supported_locales(self):
        """Locale has exactly the five supported codes."""
        assert [locale.value for locale in Locale] == ["en", "ru", "es", "tr", "hi"]

    def test_default_locale_is_english(self):
        assert DEFAULT_LOCALE is Locale.EN

    @pytest.mark.parametrize("raw", ["ru", "RU", " ru "])
    def test_from_string(self, raw):
        """from_string() is case insensitive and trims whitespace."""
        assert Locale.from_string(raw) is Locale.RU

    @pytest.mark.parametrize("raw", ["fr", "", "en-US"])
    def test_from_string_unsupported_raises(self, raw):
        with pytest.raises(ValueError, match="Unsupported locale"):
            Locale.from_string(raw)

    def test_display_name(self):
        assert Locale.ES.display_name == "Español"
        assert set(LOCALE_NAMES) == set(Locale)

    def test_locale_is_string(self):
        """Locale members compare equal to their codes."""
        assert Locale.TR == "tr"


class TestHelpers:
    def test_locale_code_from_enum(self):
        assert locale_code(Locale.HI) == "hi"

    def test_locale_code_passes_unsupported_strings_through(self):
        assert locale_code("fr") == "fr"

    @pytest.mark.parametrize(
        "value,expected",
        [({}, True), ({"a": "b"}, True), ("text", False), (["a"], False), (None, False), (1, False)],
    )
    def test_is_nested(self, value, expected):
        assert is_nested(value) is expected


class TestLoadNamespacesOptions:
    def test_defaults(self):
        options = LoadNamespacesOptions()
        assert options.fallback_locale is None
        assert options.log_missing is False

    def test_is_frozen(self):
        options = LoadNamespacesOptions(log_missing=True)
        with pytest.raises(AttributeError):
            options.log_missing = False  # type: ignore[misc]
