"""Glossary-based English to Urdu translation."""

from __future__ import annotations

import re

URDU_GLOSSARY: dict[str, str] = {
    "the": "",
    "a": "ایک",
    "an": "ایک",
    "and": "اور",
    "or": "یا",
    "is": "ہے",
    "are": "ہیں",
    "was": "تھا",
    "were": "تھے",
    "this": "یہ",
    "that": "وہ",
    "with": "کے ساتھ",
    "for": "کے لیے",
    "of": "کا",
    "in": "میں",
    "on": "پر",
    "to": "کو",
    "from": "سے",
    "not": "نہیں",
    "we": "ہم",
    "you": "آپ",
    "they": "وہ",
    "it": "یہ",
    "important": "اہم",
    "key": "کلیدی",
    "main": "مرکزی",
    "conclusion": "نتیجہ",
    "summary": "خلاصہ",
    "result": "نتیجہ",
    "results": "نتائج",
    "finding": "دریافت",
    "findings": "دریافتیں",
    "analysis": "تجزیہ",
    "research": "تحقیق",
    "technology": "ٹیکنالوجی",
    "world": "دنیا",
    "new": "نیا",
    "data": "ڈیٹا",
    "people": "لوگ",
    "time": "وقت",
    "work": "کام",
    "future": "مستقبل",
    "system": "نظام",
    "information": "معلومات",
    "blog": "بلاگ",
    "article": "مضمون",
    "learning": "سیکھنا",
    "development": "ترقی",
    "change": "تبدیلی",
    "energy": "توانائی",
    "problem": "مسئلہ",
    "good": "اچھا",
}

_WORD_RE = re.compile(r"[A-Za-z']+")
_SPACES_RE = re.compile(r"[ \t]{2,}")


def translate(text: str, glossary: dict[str, str] = URDU_GLOSSARY) -> str:
    """Replace every known English word; unknown words pass through."""
    if not text:
        return ""

    def _swap(match: re.Match[str]) -> str:
        word = match.group(0)
        return glossary.get(word.lower(), word)

    translated = _WORD_RE.sub(_swap, text)
    return _SPACES_RE.sub(" ", translated).strip()


def translate_to_urdu(text: str) -> str:
    return translate(text, URDU_GLOSSARY)


GLOSSARIES: dict[str, dict[str, str]] = {"ur": URDU_GLOSSARY}


def glossary_for(target: str) -> dict[str, str]:
    """Glossary for language code *target*; ValueError if none is shipped."""
    try:
        return GLOSSARIES[target.lower()]
    except KeyError:
        raise ValueError(f"no glossary for translation target {target!r}") from None
