import pytest

from services.tagging.language import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, normalize_language


@pytest.mark.parametrize("raw,expected", [
    ("it-IT", "it"),
    ("fr_CA", "fr"),
    ("DE", "de"),
    ("es-MX", "es"),
    ("  en-gb ", "en"),
    ("spa", "es"),
    ("ger", "de"),
    ("fra", "fr"),
    ("pt-BR", "en"),
    ("zz", "en"),
])
def test_normalize_language(raw, expected):
    assert normalize_language(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", 42, ["it"]])
def test_invalid_input_defaults_to_english(raw):
    assert normalize_language(raw) == DEFAULT_LANGUAGE


@pytest.mark.parametrize("raw", ["it-IT", "fr_CA", "es", "de-AT", "ita", "pt-BR", "", None] + list(SUPPORTED_LANGUAGES))
def test_normalization_is_idempotent(raw):
    once = normalize_language(raw)
    assert once in SUPPORTED_LANGUAGES
    assert normalize_language(once) == once
