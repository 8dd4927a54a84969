"""
Supported annotation languages.

Codes are "<ISO 639-3>_<ISO 15924>" (e.g. "kok_knda" = Konkani in Kannada
script), so the same language can appear once per writing system.
"""

from dataclasses import dataclass
from typing import List, Optional

from script_frontend.detection import ScriptCode, script_from_lang_code


@dataclass(frozen=True)
class Language:
    code: str
    name: str

    @property
    def script(self) -> ScriptCode:
        return script_from_lang_code(self.code)


LANGUAGES: List[Language] = [
    Language("kok_latn", "Konkani - Romi"),
    Language("kok_deva", "Konkani - Devnagri"),
    Language("kok_knda", "Konkani - Kannada"),
    Language("kok_mlym", "Konkani - Malayalam"),
    Language("kok_gujr", "Konkani - Gujarati"),
    Language("kok_arab", "Konkani - Perso Arabic"),
    Language("mar_latn", "Marathi - Roman"),
    Language("mar_deva", "Marathi - Devnagri"),
    Language("hin_latn", "Hindi - Roman"),
    Language("hin_deva", "Hindi - Devnagri"),
    Language("eng_latn", "English"),
]

_BY_CODE = {lang.code: lang for lang in LANGUAGES}


def get_language(code: str) -> Optional[Language]:
    return _BY_CODE.get(code)


def code_to_label(code: Optional[str]) -> str:
    """Display label for a language code; None means no filter."""
    if not code:
        return "All languages"
    lang = _BY_CODE.get(code)
    return lang.name if lang else code
