"""
Tokenizer Module

Script-aware tokenizer producing annotation units for NER/POS tagging:
- Input:  "Sachin Tendulkar played."
- Output: ["Sachin", "Tendulkar", "played", "."]

Pipeline:
1. Normalize: strip zero-width joiner/non-joiner, trim
2. Coarse split on whitespace runs (Indic combining marks stay inside words)
3. Split leading/trailing punctuation, one token per mark
4. Script-specific rule (see rules.py)

┌─────────────────────────────────────────────────────────────────────────────┐
│ INVARIANT: "".join(tokens) == "".join(normalized_text.split())             │
│                                                                             │
│ No character is dropped or duplicated, and no token holds whitespace.      │
│ Annotation UIs render one row per token and map tags back by index.        │
└─────────────────────────────────────────────────────────────────────────────┘
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple
import logging

from .detection import ScriptCode, detect_script
from .normalization import (
    DEFAULT_BOUNDARY_CATEGORIES,
    DEFAULT_ZERO_WIDTH_CHARS,
    normalize_for_tokenization,
    split_boundary_punctuation,
)
from .rules import apply_script_rules

logger = logging.getLogger(__name__)


def tokenize_by_script(text: str, script: ScriptCode) -> List[str]:
    """
    Split a sentence into annotation tokens.

    Never raises: any string and any script value are accepted. Unknown
    scripts behave like "latin".

    Args:
        text: Raw sentence
        script: Script code, usually from detect_script(text)

    Returns:
        Ordered list of tokens (empty for blank input)

    Example:
        >>> tokenize_by_script('"Hi!"', "latin")
        ['"', 'Hi', '!', '"']
    """
    return _tokenize(text, script, DEFAULT_ZERO_WIDTH_CHARS, DEFAULT_BOUNDARY_CATEGORIES)


def _tokenize(text, script, zero_width_chars, categories) -> List[str]:
    normalized = normalize_for_tokenization(text, zero_width_chars)
    if not normalized:
        return []

    tokens = []
    for rough in normalized.split():
        tokens.extend(split_boundary_punctuation(rough, categories))
    tokens = [t for t in tokens if t]

    return apply_script_rules(tokens, script)


@dataclass
class TokenizerConfig:
    """Configuration for the script-aware tokenizer."""
    zero_width_chars: FrozenSet[str] = field(default_factory=lambda: DEFAULT_ZERO_WIDTH_CHARS)
    boundary_categories: Tuple[str, ...] = DEFAULT_BOUNDARY_CATEGORIES

    def __post_init__(self):
        self.zero_width_chars = frozenset(self.zero_width_chars)
        self.boundary_categories = tuple(self.boundary_categories)
        for ch in self.zero_width_chars:
            if len(ch) != 1:
                raise ValueError(f"zero_width_chars entries must be single characters, got {ch!r}")
            if ch.isspace():
                raise ValueError(f"zero_width_chars must not contain whitespace, got {ch!r}")
        for cat in self.boundary_categories:
            if not cat or not cat[0].isupper() or len(cat) > 2:
                raise ValueError(
                    f"Invalid Unicode category prefix: {cat!r}. Use e.g. 'P', 'S', 'Po'."
                )


class ScriptTokenizer:
    """
    Tokenizer with configurable normalization.

    Example:
        >>> tokenizer = ScriptTokenizer()
        >>> tokenizer.tokenize("ಬೆಂಗಳೂರು ಕರ್ನಾಟಕ.")
        ['ಬೆಂಗಳೂರು', 'ಕರ್ನಾಟಕ', '.']
    """

    def __init__(self, config: Optional[TokenizerConfig] = None):
        self.config = config or TokenizerConfig()

    def tokenize(self, text: str, script: Optional[ScriptCode] = None) -> List[str]:
        """
        Tokenize text.

        Args:
            text: Raw sentence
            script: Script code; detected from text if None

        Returns:
            Ordered list of tokens
        """
        if script is None:
            script = detect_script(text)
        tokens = _tokenize(
            text,
            script,
            self.config.zero_width_chars,
            self.config.boundary_categories,
        )
        logger.debug(f"Tokenized {len(text)} chars ({script}) into {len(tokens)} tokens")
        return tokens

    def tokenize_with_script(self, text: str) -> Tuple[ScriptCode, List[str]]:
        """Detect the script and tokenize in one call."""
        script = detect_script(text)
        return script, self.tokenize(text, script)

    def __call__(self, text: str, script: Optional[ScriptCode] = None) -> List[str]:
        return self.tokenize(text, script)


def create_tokenizer(**kwargs) -> ScriptTokenizer:
    """
    Factory function to create a tokenizer.

    Args:
        **kwargs: TokenizerConfig fields

    Example:
        >>> tok = create_tokenizer(zero_width_chars={"\\u200b", "\\u200c", "\\u200d"})
    """
    return ScriptTokenizer(TokenizerConfig(**kwargs))
