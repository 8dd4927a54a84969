"""
Script Frontend Module for Multilingual Annotation

This module turns raw sentences into tokens for NER and POS annotation.

Main functionality:
- Script detection from Unicode blocks (Latin, Devanagari, Kannada)
- Zero-width joiner/non-joiner cleanup
- Whitespace + boundary-punctuation tokenization
- Per-script post-processing hooks
- Romanized token previews (via uroman / unidecode)
- Sentence pool loading (JSON, JSONL, TSV, URL)

┌─────────────────────────────────────────────────────────────────────────────┐
│                    CRITICAL DESIGN INVARIANT                                │
│                                                                             │
│  Tokens cover the sentence exactly:                                         │
│                                                                             │
│    "".join(tokens) == "".join(strip_zero_width(text).split())              │
│                                                                             │
│  Each punctuation/symbol at a word edge is its own token:                   │
│                                                                             │
│    '"Hi!"'  ->  ['"', 'Hi', '!', '"']                                      │
│    "है।"    ->  ['है', '।']                                                 │
│                                                                             │
│  Functions that keep one output per token:                                  │
│    - romanize_tokens(tokens, script)                                        │
│    - PreparedSentence.rows()                                                │
└─────────────────────────────────────────────────────────────────────────────┘
"""

# Script detection
from .detection import (
    ScriptCode,
    detect_script,
    is_known_script,
    resolve_script,
    script_from_lang_code,
)

# Normalization
from .normalization import (
    strip_zero_width,
    normalize_for_tokenization,
    is_punct_or_symbol,
    split_boundary_punctuation,
)

# Per-script rules
from .rules import (
    ScriptRuleRegistry,
    register_rule,
    get_rule,
    apply_script_rules,
    list_rules,
    script_rule,
)

# Tokenizers
from .tokenizers import (
    tokenize_by_script,
    ScriptTokenizer,
    TokenizerConfig,
    create_tokenizer,
)

# Romanization
from .romanization import (
    romanize_token,
    romanize_tokens,
    get_available_romanizers,
)

# Sentence loading
from .loaders import (
    Sentence,
    load_sentences,
    load_sentences_from_file,
    load_sentences_from_url,
    filter_by_language,
    shuffle_sentences,
    get_available_loaders,
)

# Main frontend class
from .frontend import (
    ScriptFrontend,
    PreparedSentence,
    prepare_for_annotation,
)

__all__ = [
    # Detection
    "ScriptCode",
    "detect_script",
    "is_known_script",
    "resolve_script",
    "script_from_lang_code",
    # Normalization
    "strip_zero_width",
    "normalize_for_tokenization",
    "is_punct_or_symbol",
    "split_boundary_punctuation",
    # Rules
    "ScriptRuleRegistry",
    "register_rule",
    "get_rule",
    "apply_script_rules",
    "list_rules",
    "script_rule",
    # Tokenizers
    "tokenize_by_script",
    "ScriptTokenizer",
    "TokenizerConfig",
    "create_tokenizer",
    # Romanization
    "romanize_token",
    "romanize_tokens",
    "get_available_romanizers",
    # Loaders
    "Sentence",
    "load_sentences",
    "load_sentences_from_file",
    "load_sentences_from_url",
    "filter_by_language",
    "shuffle_sentences",
    "get_available_loaders",
    # Frontend
    "ScriptFrontend",
    "PreparedSentence",
    "prepare_for_annotation",
]
