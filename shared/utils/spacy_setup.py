"""
Automatic spaCy model download and loading utility.
Checks for the per-language models and downloads them if missing.
"""
import os
import subprocess
import sys
import logging
from typing import Dict, Iterable, List

logger = logging.getLogger(__name__)

# Preferred models per language, in order of preference
PREFERRED_MODELS: Dict[str, List[str]] = {
    "en": ["en_core_web_md", "en_core_web_sm"],
    "it": ["it_core_news_md", "it_core_news_sm"],
    "es": ["es_core_news_md", "es_core_news_sm"],
    "fr": ["fr_core_news_md", "fr_core_news_sm"],
    "de": ["de_core_news_md", "de_core_news_sm"],
}

# Multilingual NER-only fallback
MULTILINGUAL_MODEL = "xx_ent_wiki_sm"

_pipelines: Dict[str, object] = {}


def check_model_installed(model_name: str) -> bool:
    """
    Check if a spaCy model is installed.

    Args:
        model_name: Name of the model to check

    Returns:
        True if model is installed, False otherwise
    """
    try:
        import spacy
        installed = spacy.util.is_package(model_name)
        logger.debug(f"Model {model_name} installed: {installed}")
        return installed
    except Exception as e:
        logger.warning(f"Error checking model {model_name}: {e}")
        return False


def download_model(model_name: str) -> bool:
    """
    Download a spaCy model using python -m spacy download.

    Args:
        model_name: Name of the model to download

    Returns:
        True if download succeeded, False otherwise
    """
    logger.info(f"Downloading spaCy model: {model_name}...")

    try:
        result = subprocess.run(
            [sys.executable, "-m", "spacy", "download", model_name],
            capture_output=True,
            text=True,
            timeout=600  # 10 minute timeout
        )

        if result.returncode == 0:
            logger.info(f"Successfully downloaded {model_name}")
            return True
        else:
            logger.error(f"Failed to download {model_name}: {result.stderr}")
            return False

    except subprocess.TimeoutExpired:
        logger.error(f"Download of {model_name} timed out after 10 minutes")
        return False
    except Exception as e:
        logger.error(f"Error downloading {model_name}: {e}")
        return False


def ensure_spacy_models(languages: Iterable[str] = None) -> bool:
    """
    Ensure at least one spaCy model is available for every requested language.
    Downloads the smallest preferred model of a language when none is installed.

    Returns:
        True if every language has a model, False otherwise
    """
    languages = list(languages or PREFERRED_MODELS.keys())
    logger.info("Checking for spaCy models: %s", ", ".join(languages))

    ok = True
    for lang in languages:
        models = PREFERRED_MODELS.get(lang, [])
        if any(check_model_installed(m) for m in models):
            continue

        # Smallest model last in the list; it downloads fastest
        if models and download_model(models[-1]):
            continue

        logger.error(f"No spaCy model available for '{lang}'. Install manually:")
        for m in models:
            logger.error(f"  python -m spacy download {m}")
        ok = False

    return ok


def load_pipeline(lang: str):
    """
    Load (and cache) the best available spaCy pipeline for a language.

    Order: SPACY_MODEL env override, the language's preferred models, the
    multilingual NER model, and finally a blank tokenizer-only pipeline so
    callers always get something usable.
    """
    if lang in _pipelines:
        return _pipelines[lang]

    import spacy

    candidates: List[str] = []
    override = os.getenv("SPACY_MODEL")
    if override:
        candidates.append(override)
    candidates.extend(PREFERRED_MODELS.get(lang, []))
    candidates.append(MULTILINGUAL_MODEL)

    nlp = None
    for name in candidates:
        try:
            nlp = spacy.load(name)
            logger.info("spaCy model loaded for %s: %s", lang, name)
            break
        except OSError:
            continue

    if nlp is None:
        logger.warning("No spaCy model found for '%s'; using blank pipeline (no NER/POS)", lang)
        try:
            nlp = spacy.blank(lang)
        except Exception:
            nlp = spacy.blank("xx")

    _pipelines[lang] = nlp
    return nlp


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    ensure_spacy_models()
