"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides:
- Shared fixtures for tests
- Dependency availability checks
- Sample sentences in every supported script
"""

import json
import sys
from pathlib import Path

import pytest

# Add src to path (for direct package imports like script_frontend.detection)
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


# =============================================================================
# Dependency availability markers
# =============================================================================

def check_uroman_available():
    try:
        import uroman
        return True
    except ImportError:
        return False


UROMAN_AVAILABLE = check_uroman_available()

requires_uroman = pytest.mark.skipif(not UROMAN_AVAILABLE, reason="uroman not installed")


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "requires_uroman: mark test as requiring uroman"
    )


# =============================================================================
# Sentence fixtures
# =============================================================================

SAMPLE_SENTENCES = [
    {"id": "hin_deva-1", "text": "दिल्ली भारत की राजधानी है।", "lang_code": "hin_deva"},
    {"id": "mar_deva-1", "text": "मुंबई महाराष्ट्राची राजधानी नाही.", "lang_code": "mar_deva"},
    {"id": "eng_latn-1", "text": "Sachin Tendulkar played for Mumbai Indians.", "lang_code": "eng_latn"},
    {"id": "kan_knda-1", "text": "ಬೆಂಗಳೂರು ಕರ್ನಾಟಕದ ರಾಜಧಾನಿಯಾಗಿದೆ.", "lang_code": "kan_knda"},
    {"id": "kok_latn-1", "text": "Tum kosso assa?", "lang_code": "kok_latn"},
]


@pytest.fixture
def sample_records():
    """Sentence pool records as stored on disk."""
    return [dict(r) for r in SAMPLE_SENTENCES]


@pytest.fixture
def sample_texts():
    """Raw sentence texts, one per script/language."""
    return [r["text"] for r in SAMPLE_SENTENCES]


@pytest.fixture
def devanagari_sentence():
    return "दिल्ली भारत की राजधानी है।"


@pytest.fixture
def kannada_sentence():
    return "ಬೆಂಗಳೂರು ಕರ್ನಾಟಕ"


@pytest.fixture
def latin_sentence():
    return "Sachin Tendulkar played."


@pytest.fixture
def sentence_json_file(tmp_path, sample_records):
    """Sentence pool as a JSON list."""
    path = tmp_path / "sentences.json"
    path.write_text(json.dumps(sample_records, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def sentence_jsonl_file(tmp_path, sample_records):
    """Sentence pool as JSON Lines."""
    path = tmp_path / "sentences.jsonl"
    lines = [json.dumps(r, ensure_ascii=False) for r in sample_records]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sentence_tsv_file(tmp_path, sample_records):
    """Sentence pool as TSV (id, lang_code, text)."""
    path = tmp_path / "sentences.tsv"
    lines = ["# id\tlang_code\ttext"]
    lines += [f"{r['id']}\t{r['lang_code']}\t{r['text']}" for r in sample_records]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
