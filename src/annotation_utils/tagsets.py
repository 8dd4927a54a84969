"""
Tag sets for token-level annotation tasks.

- ner: BIO tags over PER, LOC, ORG, DATE, TIME, MISC plus "O"
- pos: Universal Dependencies UPOS tags
"""

from typing import List, Sequence, Tuple

NER_ENTITY_TYPES: Tuple[str, ...] = ("PER", "LOC", "ORG", "DATE", "TIME", "MISC")

NER_TAGS: Tuple[str, ...] = tuple(
    f"{prefix}-{ent}" for ent in NER_ENTITY_TYPES for prefix in ("B", "I")
) + ("O",)

UPOS_TAGS: Tuple[str, ...] = (
    "ADJ", "ADP", "ADV", "AUX", "CCONJ", "DET", "INTJ", "NOUN", "NUM",
    "PART", "PRON", "PROPN", "PUNCT", "SCONJ", "SYM", "VERB", "X",
)

TASKS = {
    "ner": NER_TAGS,
    "pos": UPOS_TAGS,
}


def get_tagset(task: str) -> Tuple[str, ...]:
    """
    Get the tag set for an annotation task.

    Args:
        task: "ner" or "pos"

    Returns:
        Tuple of valid tags, in display order
    """
    key = task.lower()
    if key not in TASKS:
        raise ValueError(f"Unknown annotation task: {task}. Use 'ner' or 'pos'.")
    return TASKS[key]


def validate_bio_sequence(tags: Sequence[str]) -> List[int]:
    """
    Find BIO violations.

    An "I-X" tag is valid only right after "B-X" or "I-X".

    Returns:
        Indices of invalid "I-" tags (empty if the sequence is well formed)
    """
    invalid = []
    prev = "O"
    for i, tag in enumerate(tags):
        if tag and tag.startswith("I-"):
            ent = tag[2:]
            if prev not in (f"B-{ent}", f"I-{ent}"):
                invalid.append(i)
        prev = tag or "O"
    return invalid
