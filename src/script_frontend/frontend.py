"""
Script Frontend Class

Main class for preparing sentences for token-level annotation.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Union
import logging

from .detection import ScriptCode, detect_script
from .loaders import Sentence
from .romanization import romanize_tokens
from .tokenizers import ScriptTokenizer, TokenizerConfig

logger = logging.getLogger(__name__)


class ScriptFrontend:
    """
    Frontend for detecting, tokenizing and romanizing sentences.

    Example:
        >>> frontend = ScriptFrontend()
        >>> script = frontend.detect("दिल्ली भारत की राजधानी है।")
        >>> tokens = frontend.tokenize("दिल्ली भारत की राजधानी है।", script)
        >>> tokens[-1]
        '।'
    """

    def __init__(self, config: Optional[TokenizerConfig] = None):
        self.tokenizer = ScriptTokenizer(config)

    def detect(self, text: str) -> ScriptCode:
        return detect_script(text)

    def tokenize(self, text: str, script: Optional[ScriptCode] = None) -> List[str]:
        return self.tokenizer.tokenize(text, script)

    def romanize(
        self,
        tokens: List[str],
        script: ScriptCode,
        lang_code: Optional[str] = None,
    ) -> List[str]:
        return romanize_tokens(tokens, script, lang=lang_code)

    def prepare(
        self,
        source: Union[str, Sentence],
        lang_code: Optional[str] = None,
        romanize: bool = False,
    ) -> "PreparedSentence":
        """
        Prepare a sentence for annotation.

        The script is always detected from the text, not from lang_code.

        Args:
            source: Raw text or a Sentence from a pool
            lang_code: Language code (taken from the Sentence if omitted)
            romanize: Also compute a romanized preview per token

        Returns:
            PreparedSentence
        """
        sentence_id = None
        if isinstance(source, Sentence):
            text = source.text
            sentence_id = source.id
            lang_code = lang_code or source.lang_code
        else:
            text = source

        script = self.detect(text)
        tokens = self.tokenize(text, script)
        romanized = self.romanize(tokens, script, lang_code) if romanize else None

        logger.debug(f"Prepared sentence id={sentence_id} script={script} tokens={len(tokens)}")
        return PreparedSentence(
            text=text,
            script=script,
            tokens=tokens,
            romanized=romanized,
            lang_code=lang_code,
            sentence_id=sentence_id,
        )


@dataclass
class PreparedSentence:
    """Result of prepare_for_annotation()."""
    text: str                             # Raw sentence as given
    script: ScriptCode                    # Detected script
    tokens: List[str]                     # Annotation tokens, one row each
    romanized: Optional[List[str]] = None # Same length as tokens, if requested
    lang_code: Optional[str] = None
    sentence_id: Optional[str] = None

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    def rows(self) -> List[Dict[str, Any]]:
        """One row per token: index, token and romanized preview."""
        previews = self.romanized or [None] * len(self.tokens)
        return [
            {"index": i, "token": tok, "romanized": rom}
            for i, (tok, rom) in enumerate(zip(self.tokens, previews))
        ]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def prepare_for_annotation(
    source: Union[str, Sentence],
    lang_code: Optional[str] = None,
    romanize: bool = False,
) -> PreparedSentence:
    """
    One-liner to prepare a sentence for NER/POS annotation.

    Example:
        >>> prepared = prepare_for_annotation("Sachin Tendulkar played.")
        >>> prepared.tokens
        ['Sachin', 'Tendulkar', 'played', '.']
    """
    return ScriptFrontend().prepare(source, lang_code=lang_code, romanize=romanize)
