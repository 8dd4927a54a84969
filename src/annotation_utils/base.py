"""
Base classes and data structures for token annotation.

Design Philosophy:
- Tokens come from the script frontend and are never edited here
- Tags are keyed by token index, so repeated tokens stay distinct
- A sheet is only submittable once every token has a tag
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import json
import logging

from script_frontend.detection import ScriptCode, detect_script
from script_frontend.tokenizers import tokenize_by_script

from .tagsets import get_tagset, validate_bio_sequence

logger = logging.getLogger(__name__)


class IncompleteAnnotationError(ValueError):
    """Raised when a sheet is submitted with untagged tokens."""

    def __init__(self, missing: List[int]):
        self.missing = missing
        super().__init__(f"Please tag all tokens before submitting. Missing: {missing}")


@dataclass
class TokenAnnotation:
    """
    A token with its (optional) tag.

    Attributes:
        index: Position of the token in the sentence
        token: Token text
        tag: Tag from the task's tag set, or None if not yet tagged
    """
    index: int
    token: str
    tag: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"token": self.token, "tag": self.tag}

    def __repr__(self):
        return f"TokenAnnotation({self.index}: {self.token!r} -> {self.tag})"


@dataclass
class AnnotationSheet:
    """
    Tagging state for one sentence.

    Example:
        >>> sheet = AnnotationSheet.from_text("Tum kosso assa?", task="pos")
        >>> sheet.tokens
        ['Tum', 'kosso', 'assa', '?']
        >>> sheet.set_tag(3, "PUNCT")
        >>> sheet.missing_indices()
        [0, 1, 2]
    """
    text: str
    tokens: List[str]
    task: str = "ner"
    sentence_id: Optional[str] = None
    lang_code: Optional[str] = None
    script: Optional[ScriptCode] = None
    tags: Dict[int, str] = field(default_factory=dict)

    def __post_init__(self):
        self.task = self.task.lower()
        self.tagset = get_tagset(self.task)
        if self.script is None:
            self.script = detect_script(self.text)
        # Initial tags get the same checks as set_tag
        initial, self.tags = self.tags, {}
        for index, tag in initial.items():
            self.set_tag(index, tag)

    @classmethod
    def from_text(
        cls,
        text: str,
        task: str = "ner",
        sentence_id: Optional[str] = None,
        lang_code: Optional[str] = None,
    ) -> "AnnotationSheet":
        """Build a sheet by tokenizing text."""
        script = detect_script(text)
        tokens = tokenize_by_script(text, script)
        return cls(
            text=text,
            tokens=tokens,
            task=task,
            sentence_id=sentence_id,
            lang_code=lang_code,
            script=script,
        )

    def __len__(self) -> int:
        return len(self.tokens)

    def set_tag(self, index: int, tag: Optional[str]) -> None:
        """
        Tag a token. An empty tag clears it.

        Raises:
            IndexError: If index is out of range
            ValueError: If tag is not a string in the task's tag set
        """
        if not 0 <= index < len(self.tokens):
            raise IndexError(f"Token index {index} out of range (0..{len(self.tokens) - 1})")
        if tag is not None and not isinstance(tag, str):
            raise ValueError(f"Tag must be a string, got {type(tag).__name__}")
        if tag is None or not tag.strip():
            self.tags.pop(index, None)
            return
        tag = tag.strip()
        if tag not in self.tagset:
            raise ValueError(f"Invalid {self.task} tag: {tag}. Valid tags: {list(self.tagset)}")
        self.tags[index] = tag

    def clear(self) -> None:
        self.tags.clear()

    def missing_indices(self) -> List[int]:
        return [i for i in range(len(self.tokens)) if i not in self.tags]

    def is_complete(self) -> bool:
        return not self.missing_indices()

    def annotations(self) -> List[TokenAnnotation]:
        return [TokenAnnotation(i, tok, self.tags.get(i)) for i, tok in enumerate(self.tokens)]

    def bio_errors(self) -> List[int]:
        """Indices of invalid I- tags (NER only)."""
        if self.task != "ner":
            return []
        return validate_bio_sequence([self.tags.get(i) for i in range(len(self.tokens))])

    def to_submission(self) -> Dict[str, Any]:
        """
        Build the submission payload.

        Raises:
            IncompleteAnnotationError: If any token is untagged
        """
        missing = self.missing_indices()
        if missing:
            raise IncompleteAnnotationError(missing)

        bio_errors = self.bio_errors()
        if bio_errors:
            logger.warning(f"Sentence {self.sentence_id}: I- tags without matching B- at {bio_errors}")

        return {
            "sentence_id": self.sentence_id,
            "lang": self.lang_code,
            "task": self.task,
            "text": self.text,
            "annotations": [a.to_dict() for a in self.annotations()],
        }

    def save_json(self, path: str) -> str:
        """Save the submission payload as JSON. Returns the path."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_submission(), f, ensure_ascii=False, indent=2)
        logger.info(f"Saved {len(self.tokens)} {self.task} annotations to {path}")
        return path
