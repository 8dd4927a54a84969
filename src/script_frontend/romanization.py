"""
Romanization Module

Romanized previews of tokens for annotators who read the sentence's
language but not its script:
- uroman: Devanagari, Kannada (and any other non-Latin script)
- unidecode: ASCII folding for Latin tokens ("São" -> "Sao")

Token count is preserved: romanize_tokens() returns exactly one string
per input token, so previews line up with the annotation rows.
"""

from functools import lru_cache
from typing import List, Optional
import logging

from unidecode import unidecode

from .detection import DEFAULT_SCRIPT, resolve_script

logger = logging.getLogger(__name__)

# Optional dependencies
_UROMAN_AVAILABLE = False

try:
    import uroman
    _UROMAN_AVAILABLE = True
except ImportError:
    uroman = None

# ISO-639-3 hints passed to uroman, keyed by the language part of "hin_deva"
_UROMAN_LANG_HINTS = {
    "hin": "hin",
    "mar": "mar",
    "kok": "kok",
    "kan": "kan",
}


@lru_cache(maxsize=1)
def _get_uroman():
    if not _UROMAN_AVAILABLE:
        raise ImportError("uroman is required. Install with: pip install uroman")
    logger.info("Loading uroman romanizer")
    return uroman.Uroman()


def _uroman_lcode(lang: Optional[str]) -> Optional[str]:
    if not lang:
        return None
    return _UROMAN_LANG_HINTS.get(lang.split("_", 1)[0].lower())


def romanize_token(
    token: str,
    script: Optional[str] = None,
    lang: Optional[str] = None,
) -> str:
    """
    Romanize a single token.

    Requires: pip install uroman (for non-Latin scripts)

    Args:
        token: Token text
        script: Script code of the sentence ("latin" tokens use unidecode)
        lang: Language code, e.g. "hin_deva" or "hin"

    Returns:
        Romanized token (may be empty for tokens with no Latin rendering)
    """
    if resolve_script(script) == DEFAULT_SCRIPT:
        return unidecode(token)

    lcode = _uroman_lcode(lang)
    if lcode:
        return _get_uroman().romanize_string(token, lcode=lcode)
    return _get_uroman().romanize_string(token)


def romanize_tokens(
    tokens: List[str],
    script: Optional[str] = None,
    lang: Optional[str] = None,
    unk_token: str = "*",
) -> List[str]:
    """
    Romanize tokens, preserving token count.

    Args:
        tokens: Tokens from the tokenizer
        script: Script code of the sentence
        lang: Language code hint for uroman
        unk_token: Replacement for tokens that romanize to nothing

    Returns:
        List with the same length as tokens
    """
    romanized = []
    for token in tokens:
        rom = " ".join(romanize_token(token, script, lang).split())
        romanized.append(rom if rom else unk_token)

    if romanized.count(unk_token) > tokens.count(unk_token):
        logger.warning(
            f"{romanized.count(unk_token)} of {len(tokens)} tokens had no romanization "
            f"(script={script}, lang={lang})"
        )

    assert len(romanized) == len(tokens), f"Token count changed: {len(tokens)} -> {len(romanized)}"
    return romanized


def get_available_romanizers() -> dict:
    """Return availability of romanization backends."""
    return {
        "uroman": _UROMAN_AVAILABLE,
        "unidecode": True,
    }
