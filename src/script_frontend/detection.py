"""
Script Detection

Classifies text into a script category from Unicode code-point ranges:
- devanagari: U+0900-U+097F
- kannada:    U+0C80-U+0CFF
- latin:      fallback (Latin, empty, mixed, anything unclassified)

Detection is a presence check, not a majority vote: annotation sentences
are expected to be single-script. Blocks are checked in order and the
first block with any matching character wins.
"""

from typing import Any, List, Literal, Tuple
import logging

logger = logging.getLogger(__name__)


ScriptCode = Literal["latin", "devanagari", "kannada"]

DEFAULT_SCRIPT = "latin"

# Ordered (start, end, script). New scripts go here, before the fallback.
SCRIPT_BLOCKS: List[Tuple[int, int, str]] = [
    (0x0900, 0x097F, "devanagari"),
    (0x0C80, 0x0CFF, "kannada"),
]

KNOWN_SCRIPTS = (DEFAULT_SCRIPT,) + tuple(script for _, _, script in SCRIPT_BLOCKS)

# Earlier releases tagged Latin text as "roman"
SCRIPT_ALIASES = {
    "roman": "latin",
    "latn": "latin",
    "deva": "devanagari",
    "knda": "kannada",
}

# ISO 15924 suffixes used in language codes like "kok_knda"
_ISO15924_TO_SCRIPT = {
    "latn": "latin",
    "deva": "devanagari",
    "knda": "kannada",
}


def _contains_block(text: str, start: int, end: int) -> bool:
    return any(start <= ord(ch) <= end for ch in text)


def detect_script(text: str) -> ScriptCode:
    """
    Detect the script of a text span.

    Args:
        text: Any string (empty allowed)

    Returns:
        "devanagari", "kannada", or "latin"

    Example:
        >>> detect_script("दिल्ली भारत की राजधानी है।")
        'devanagari'
        >>> detect_script("Tum kosso assa?")
        'latin'
    """
    if not text:
        return DEFAULT_SCRIPT
    for start, end, script in SCRIPT_BLOCKS:
        if _contains_block(text, start, end):
            return script
    return DEFAULT_SCRIPT


def is_known_script(value: Any) -> bool:
    """Check if value is one of the supported script codes."""
    return isinstance(value, str) and value in KNOWN_SCRIPTS


def resolve_script(value: Any) -> ScriptCode:
    """
    Map any value to a supported script code.

    Aliases ("roman", ISO 15924 codes) are resolved; unknown or
    malformed values fall back to "latin".
    """
    if isinstance(value, str):
        key = value.strip().lower()
        key = SCRIPT_ALIASES.get(key, key)
        if key in KNOWN_SCRIPTS:
            return key
    logger.debug(f"Unknown script {value!r}, using {DEFAULT_SCRIPT}")
    return DEFAULT_SCRIPT


def script_from_lang_code(lang_code: str) -> ScriptCode:
    """
    Get the script from a language code with an ISO 15924 suffix.

    Args:
        lang_code: Code like "hin_deva" or "kok_latn"

    Returns:
        Script code; "latin" if the suffix is missing or unsupported
    """
    if not lang_code or "_" not in lang_code:
        return DEFAULT_SCRIPT
    suffix = lang_code.rsplit("_", 1)[1].lower()
    return _ISO15924_TO_SCRIPT.get(suffix, DEFAULT_SCRIPT)
