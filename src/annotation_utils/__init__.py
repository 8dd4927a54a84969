"""
Annotation utilities for token-level tagging tasks.

- Languages: supported language codes and display labels
- Tag sets: BIO (NER) and UPOS (POS)
- AnnotationSheet: per-sentence tag map with submission payload

Usage:
    from annotation_utils import AnnotationSheet

    sheet = AnnotationSheet.from_text("Sachin Tendulkar played.", task="ner")
    sheet.set_tag(0, "B-PER")
    sheet.set_tag(1, "I-PER")
    sheet.set_tag(2, "O")
    sheet.set_tag(3, "O")
    payload = sheet.to_submission()
"""

from .base import (
    AnnotationSheet,
    TokenAnnotation,
    IncompleteAnnotationError,
)
from .languages import (
    Language,
    LANGUAGES,
    get_language,
    code_to_label,
)
from .tagsets import (
    NER_ENTITY_TYPES,
    NER_TAGS,
    UPOS_TAGS,
    get_tagset,
    validate_bio_sequence,
)

__all__ = [
    # Annotation records
    "AnnotationSheet",
    "TokenAnnotation",
    "IncompleteAnnotationError",
    # Languages
    "Language",
    "LANGUAGES",
    "get_language",
    "code_to_label",
    # Tag sets
    "NER_ENTITY_TYPES",
    "NER_TAGS",
    "UPOS_TAGS",
    "get_tagset",
    "validate_bio_sequence",
]
