"""
Shared test utilities.

This module provides shared constants and markers that can be imported
by test files. Unlike conftest.py, this can be imported directly.
"""

import pytest


def check_uroman_available():
    """Check if uroman is available."""
    try:
        import uroman
        return True
    except ImportError:
        return False


# Availability flags
UROMAN_AVAILABLE = check_uroman_available()

# Pytest markers
requires_uroman = pytest.mark.skipif(not UROMAN_AVAILABLE, reason="uroman not installed")


def reconstruct(text: str) -> str:
    """Expected concatenation of all tokens for a text."""
    cleaned = text.replace("\u200c", "").replace("\u200d", "").replace("\ufeff", "")
    return "".join(cleaned.split())
