"""
Numeral word tables, one lexicon per language.

Pure data. The grammar that stitches these words together lives in
``numerals.py``; a lexicon only answers "what is the word for X".
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NumeralLexicon:
    """Digit, position and irregular words for one language."""

    digits: tuple[str, ...]  # 0..9, index 0 is the zero word
    million: str
    separator: str  # Joins words: "" for Thai, " " for English
    positions: dict[int, str] = field(default_factory=dict)  # divisor → word
    teens: tuple[str, ...] = ()  # 10..19
    tens: tuple[str, ...] = ()  # index 2..9 → 20..90
    tens_two: str = ""  # Irregular stem replacing "two" before the tens word
    trailing_one: str = ""  # Irregular final "one" for values above ten
    tens_joiner: str = ""  # Between a tens word and a unit digit

    @property
    def zero(self) -> str:
        return self.digits[0]


# ─── Thai ────────────────────────────────────────────────────────────

THAI_LEXICON = NumeralLexicon(
    digits=(
        "ศูนย์", "หนึ่ง", "สอง", "สาม", "สี่",
        "ห้า", "หก", "เจ็ด", "แปด", "เก้า",
    ),
    million="ล้าน",
    separator="",
    positions={
        100_000: "แสน",
        10_000: "หมื่น",
        1_000: "พัน",
        100: "ร้อย",
        10: "สิบ",
    },
    tens_two="ยี่",
    trailing_one="เอ็ด",
)


# ─── English ─────────────────────────────────────────────────────────

ENGLISH_LEXICON = NumeralLexicon(
    digits=(
        "Zero", "One", "Two", "Three", "Four",
        "Five", "Six", "Seven", "Eight", "Nine",
    ),
    million="Million",
    separator=" ",
    positions={
        1_000: "Thousand",
        100: "Hundred",
    },
    teens=(
        "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
        "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
    ),
    tens=(
        "", "", "Twenty", "Thirty", "Forty",
        "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
    ),
    tens_joiner="-",
)
