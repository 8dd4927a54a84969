"""
Text Normalization for Tokenization

Cleans raw sentence text before segmentation:
- Zero-width joiner / non-joiner removal (Indic shaping artifacts)
- Byte order mark removal (U+FEFF, often left at the start of pasted text)
- Leading/trailing whitespace trim

and splits boundary punctuation off whitespace-delimited words:
- "Hello!"  -> ["Hello", "!"]
- '"Hi!"'   -> ['"', "Hi", "!", '"']
- "..."     -> [".", ".", "."]

Punctuation and symbols are detected with Unicode general categories
(P* and S*), so danda (।), guillemets, currency signs etc. are handled
the same way as ASCII punctuation.
"""

from typing import Iterable, List, Optional
import unicodedata


DEFAULT_ZERO_WIDTH_CHARS = frozenset({
    "\u200c",  # ZERO WIDTH NON-JOINER
    "\u200d",  # ZERO WIDTH JOINER
    "\ufeff",  # BYTE ORDER MARK / ZERO WIDTH NO-BREAK SPACE
})

DEFAULT_BOUNDARY_CATEGORIES = ("P", "S")


def strip_zero_width(
    text: str,
    zero_width_chars: Optional[Iterable[str]] = None,
) -> str:
    """Remove zero-width joiner, non-joiner and byte order mark characters."""
    chars = DEFAULT_ZERO_WIDTH_CHARS if zero_width_chars is None else frozenset(zero_width_chars)
    return "".join(ch for ch in text if ch not in chars)


def normalize_for_tokenization(
    text: str,
    zero_width_chars: Optional[Iterable[str]] = None,
) -> str:
    """
    Normalize text before tokenization.

    Zero-width characters are removed first, then surrounding
    whitespace is trimmed. Internal whitespace is left alone; the
    tokenizer treats any whitespace run as one boundary.
    """
    return strip_zero_width(text, zero_width_chars).strip()


def is_punct_or_symbol(ch: str, categories=DEFAULT_BOUNDARY_CATEGORIES) -> bool:
    """
    Check if a character is Unicode punctuation (P*) or symbol (S*).

    Args:
        ch: Single character
        categories: General category prefixes treated as boundaries

    Returns:
        True if the character's category starts with one of the prefixes
    """
    if not ch:
        return False
    return unicodedata.category(ch).startswith(tuple(categories))


def split_boundary_punctuation(
    word: str,
    categories=DEFAULT_BOUNDARY_CATEGORIES,
) -> List[str]:
    """
    Split leading and trailing punctuation off a word.

    Each leading/trailing punctuation character becomes its own token,
    the core stays whole. Multi-character runs are never kept together.

    Args:
        word: Whitespace-free word
        categories: General category prefixes treated as boundaries

    Returns:
        Leading punctuation, then the core (if any), then trailing
        punctuation, all in original order
    """
    n = len(word)

    lead_end = 0
    while lead_end < n and is_punct_or_symbol(word[lead_end], categories):
        lead_end += 1

    # Trailing run is searched in what the leading run left over
    trail_start = n
    while trail_start > lead_end and is_punct_or_symbol(word[trail_start - 1], categories):
        trail_start -= 1

    parts = list(word[:lead_end])
    core = word[lead_end:trail_start]
    if core:
        parts.append(core)
    parts.extend(word[trail_start:])
    return [p for p in parts if p]
