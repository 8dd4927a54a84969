"""
Sentence Loading Utilities

Loads sentence pools for the annotation tasks from:
- JSON files: [{"id": ..., "text": ..., "lang_code": ...}, ...]
- JSON Lines files: one such object per line
- TSV files: id<TAB>lang_code<TAB>text
- URLs serving a JSON list
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import json
import logging
import random

import requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sentence:
    """A sentence to annotate."""
    id: str
    text: str
    lang_code: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _sentence_from_record(record: Any, where: str) -> Sentence:
    if not isinstance(record, dict):
        raise ValueError(f"{where}: expected an object, got {type(record).__name__}")
    # Older pools use camelCase keys
    lang_code = record.get("lang_code", record.get("langCode"))
    fields = {"id": record.get("id"), "text": record.get("text"), "lang_code": lang_code}
    missing = [k for k, v in fields.items() if v is None]
    if missing:
        raise ValueError(f"{where}: missing field(s) {missing}")
    return Sentence(id=str(record["id"]), text=str(record["text"]), lang_code=str(lang_code))


def _parse_json(content: str, source: str) -> List[Sentence]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {source}: {e}") from e
    if not isinstance(data, list):
        raise ValueError(f"{source}: expected a JSON list of sentences")
    return [_sentence_from_record(r, f"{source}[{i}]") for i, r in enumerate(data)]


def _parse_jsonl(content: str, source: str) -> List[Sentence]:
    sentences = []
    for lineno, line in enumerate(content.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            record = json.loads(line)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON at {source}:{lineno}: {e}") from e
        sentences.append(_sentence_from_record(record, f"{source}:{lineno}"))
    return sentences


def _parse_tsv(content: str, source: str) -> List[Sentence]:
    sentences = []
    for lineno, line in enumerate(content.splitlines(), start=1):
        if not line.strip() or line.startswith("#"):
            continue
        fields = line.split("\t", 2)
        if len(fields) != 3:
            raise ValueError(
                f"{source}:{lineno}: expected 3 tab-separated fields (id, lang_code, text), "
                f"got {len(fields)}"
            )
        sentences.append(Sentence(id=fields[0], lang_code=fields[1], text=fields[2]))
    return sentences


def load_sentences_from_file(
    file_path: Union[str, Path],
    encoding: str = "utf-8-sig",
) -> List[Sentence]:
    """
    Load a sentence pool from a local file.

    Format is chosen by extension: .json, .jsonl, .tsv.

    Args:
        file_path: Path to the pool file
        encoding: File encoding (default utf-8-sig, which also reads plain UTF-8)

    Returns:
        List of sentences in file order
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Sentence file not found: {file_path}")

    parsers = {".json": _parse_json, ".jsonl": _parse_jsonl, ".tsv": _parse_tsv}
    suffix = file_path.suffix.lower()
    if suffix not in parsers:
        raise ValueError(f"Unsupported sentence file type: {suffix}. Use .json, .jsonl or .tsv.")

    logger.info(f"Loading sentences from file: {file_path}")
    with open(file_path, "r", encoding=encoding) as f:
        content = f.read()

    sentences = parsers[suffix](content, str(file_path))
    logger.info(f"Loaded {len(sentences)} sentences")
    return sentences


def load_sentences_from_url(url: str, timeout: int = 30) -> List[Sentence]:
    """
    Load a sentence pool from a URL serving a JSON list.

    Args:
        url: URL to fetch
        timeout: Request timeout in seconds

    Returns:
        List of sentences
    """
    logger.info(f"Fetching sentences from URL: {url}")
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()

    sentences = _parse_json(response.text, url)
    logger.info(f"Loaded {len(sentences)} sentences")
    return sentences


def load_sentences(source: Union[str, Path]) -> List[Sentence]:
    """
    Load sentences from any source (auto-detect type).

    Example:
        >>> pool = load_sentences("ner_sentences.jsonl")
        >>> pool = load_sentences("https://example.com/ner.json")
    """
    s = str(source)
    if s.startswith("http://") or s.startswith("https://"):
        return load_sentences_from_url(s)
    return load_sentences_from_file(source)


def filter_by_language(sentences: List[Sentence], lang_code: Optional[str]) -> List[Sentence]:
    """Keep sentences in one language. None keeps all."""
    if not lang_code:
        return list(sentences)
    return [s for s in sentences if s.lang_code == lang_code]


def shuffle_sentences(sentences: List[Sentence], seed: Optional[int] = None) -> List[Sentence]:
    """Return a shuffled copy of the pool."""
    shuffled = list(sentences)
    random.Random(seed).shuffle(shuffled)
    return shuffled


def get_available_loaders() -> dict:
    """Return availability of sentence loading backends."""
    return {
        "json": True,
        "jsonl": True,
        "tsv": True,
        "url": True,
    }
