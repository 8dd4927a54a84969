"""
Tests for romanization module.

Tests cover:
- get_available_romanizers
- Latin tokens via unidecode
- Token count preservation in romanize_tokens
- Devanagari/Kannada via uroman (skipped if uroman missing)
"""

import pytest

from test_utils import requires_uroman


class TestGetAvailableRomanizers:
    """Tests for get_available_romanizers function."""

    def test_contains_expected_keys(self):
        from script_frontend.romanization import get_available_romanizers

        romanizers = get_available_romanizers()
        assert isinstance(romanizers, dict)
        for key in ["uroman", "unidecode"]:
            assert key in romanizers


class TestLatinRomanization:
    """Tests for unidecode-based Latin folding."""

    def test_accents_folded(self):
        from script_frontend.romanization import romanize_token

        assert romanize_token("café", "latin") == "cafe"
        assert romanize_token("São", "latin") == "Sao"

    def test_ascii_unchanged(self):
        from script_frontend.romanization import romanize_token

        assert romanize_token("Tendulkar", "latin") == "Tendulkar"

    def test_unknown_script_treated_as_latin(self):
        from script_frontend.romanization import romanize_token

        assert romanize_token("Zoë", "roman") == "Zoe"
        assert romanize_token("Zoë", None) == "Zoe"


class TestRomanizeTokens:
    """Tests for romanize_tokens."""

    def test_preserves_count(self):
        from script_frontend.romanization import romanize_tokens

        tokens = ["Tum", "kosso", "assa", "?"]
        assert romanize_tokens(tokens, "latin") == ["Tum", "kosso", "assa", "?"]

    def test_empty_romanization_becomes_unk(self, monkeypatch):
        from script_frontend import romanization

        monkeypatch.setattr(
            romanization, "romanize_token",
            lambda token, script=None, lang=None: "" if token == "?" else token,
        )
        assert romanization.romanize_tokens(["a", "?", "b"], "latin") == ["a", "*", "b"]

    def test_custom_unk_token(self, monkeypatch):
        from script_frontend import romanization

        monkeypatch.setattr(romanization, "romanize_token", lambda token, script=None, lang=None: "")
        assert romanization.romanize_tokens(["x"], "latin", unk_token="<unk>") == ["<unk>"]

    def test_internal_spaces_collapsed(self, monkeypatch):
        """Test multi-word romanizations stay one entry per token."""
        from script_frontend import romanization

        monkeypatch.setattr(romanization, "romanize_token", lambda token, script=None, lang=None: " a  b ")
        assert romanization.romanize_tokens(["x", "y"], "devanagari") == ["a b", "a b"]

    def test_empty_tokens(self):
        from script_frontend.romanization import romanize_tokens

        assert romanize_tokens([], "devanagari") == []

    def test_missing_uroman_raises(self, monkeypatch):
        from script_frontend import romanization

        romanization._get_uroman.cache_clear()
        monkeypatch.setattr(romanization, "_UROMAN_AVAILABLE", False)
        try:
            with pytest.raises(ImportError, match="uroman"):
                romanization.romanize_token("भारत", "devanagari")
        finally:
            romanization._get_uroman.cache_clear()

    def test_lang_hint(self, monkeypatch):
        """Test the ISO 639-3 part of the language code is passed to uroman."""
        from script_frontend import romanization

        calls = []

        class FakeUroman:
            def romanize_string(self, s, lcode=None):
                calls.append(lcode)
                return "x"

        monkeypatch.setattr(romanization, "_get_uroman", lambda: FakeUroman())
        romanization.romanize_tokens(["भारत"], "devanagari", lang="hin_deva")
        romanization.romanize_tokens(["ಕರ್ನಾಟಕ"], "kannada", lang="xyz_knda")
        assert calls == ["hin", None]


@requires_uroman
class TestUromanRomanization:
    """Tests against the real uroman backend."""

    def test_devanagari(self, devanagari_sentence):
        from script_frontend.romanization import romanize_tokens
        from script_frontend.tokenizers import tokenize_by_script

        tokens = tokenize_by_script(devanagari_sentence, "devanagari")
        romanized = romanize_tokens(tokens, "devanagari", lang="hin_deva")

        assert len(romanized) == len(tokens)
        assert romanized[1] != tokens[1]

    def test_kannada(self, kannada_sentence):
        from script_frontend.romanization import romanize_tokens
        from script_frontend.tokenizers import tokenize_by_script

        tokens = tokenize_by_script(kannada_sentence, "kannada")
        romanized = romanize_tokens(tokens, "kannada")

        assert len(romanized) == len(tokens) == 2
        assert all(r and r != t for r, t in zip(romanized, tokens))
