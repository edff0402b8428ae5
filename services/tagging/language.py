"""Maps arbitrary locale strings onto the small set of languages the tagger knows."""

import re
from typing import Optional

SUPPORTED_LANGUAGES = ("en", "it", "es", "fr", "de")
DEFAULT_LANGUAGE = "en"

_RE_SEPARATOR = re.compile(r"[-_]")

# Regional variants and ISO 639-2 codes -> supported code
_REGIONAL_VARIANTS = {
    # Spanish variants
    "es_mx": "es", "es_ar": "es", "es_co": "es", "spa": "es",
    # French variants
    "fr_ca": "fr", "fr_be": "fr", "fr_ch": "fr", "fra": "fr", "fre": "fr",
    # German variants
    "de_at": "de", "de_ch": "de", "deu": "de", "ger": "de",
    # Italian variants
    "it_ch": "it", "ita": "it",
    "eng": "en",
}


def normalize_language(raw: Optional[str]) -> str:
    """
    Normalize a locale string ('it-IT', 'fr_CA', 'DE') to a supported code.

    Never raises: unknown, empty or non-string input maps to DEFAULT_LANGUAGE.
    """
    if not raw or not isinstance(raw, str):
        return DEFAULT_LANGUAGE

    code = raw.strip().lower()
    base = _RE_SEPARATOR.split(code, 1)[0]
    if base in SUPPORTED_LANGUAGES:
        return base

    variant = code.replace("-", "_")
    if variant in _REGIONAL_VARIANTS:
        return _REGIONAL_VARIANTS[variant]
    if base in _REGIONAL_VARIANTS:
        return _REGIONAL_VARIANTS[base]

    return DEFAULT_LANGUAGE
