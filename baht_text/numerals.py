"""
Convert non-negative integers to number words.

Two entry points per language:
    words_for_magnitude(1_234_567)  → whole-unit words, no upper bound
    words_for_fraction(23)          → minor-unit words, 0..99 only

Large magnitudes are split into base-1,000,000 groups from the top. Every
group boundary emits the language's "million" word once, so the same word
repeats per level instead of switching to billion/trillion:

    1_000_000            → One Million
    1_000_001_000_000    → One Million One Million
    1_000_000_000_000    → One Million Million

Below a million each language has its own positional grammar, implemented
by a NumeralConverter subclass over a NumeralLexicon.
"""

from __future__ import annotations

from .exceptions import AmountValidationError, FractionRangeError
from .lexicon import ENGLISH_LEXICON, THAI_LEXICON, NumeralLexicon

MILLION = 1_000_000


class NumeralConverter:
    """Language-parameterized integer → words converter.

    Subclasses implement ``_below_million`` for values 1..999,999. The
    million grouping, zero handling and domain checks are shared.
    """

    def __init__(self, lexicon: NumeralLexicon):
        self.lexicon = lexicon

    @property
    def zero_word(self) -> str:
        return self.lexicon.zero

    def words_for_magnitude(self, n: int) -> str:
        """Spell out a whole-unit magnitude.

        Raises:
            AmountValidationError: If ``n`` is negative.
        """
        if n < 0:
            raise AmountValidationError(
                f"Magnitude must be non-negative, got {n}", {"value": n}
            )
        if n == 0:
            return self.zero_word

        groups: list[int] = []
        while n:
            n, group = divmod(n, MILLION)
            groups.append(group)
        groups.reverse()

        # Every group above the lowest is followed by one "million" word,
        # even when the group itself is zero.
        words: list[str] = []
        for group in groups[:-1]:
            if group:
                words.append(self._below_million(group))
            words.append(self.lexicon.million)
        if groups[-1]:
            words.append(self._below_million(groups[-1]))

        return self.lexicon.separator.join(words)

    def words_for_fraction(self, n: int) -> str:
        """Spell out a minor-unit value.

        Raises:
            FractionRangeError: If ``n`` is outside 0..99.
        """
        if not 0 <= n <= 99:
            raise FractionRangeError(
                f"Fraction must be between 0 and 99, got {n}", {"value": n}
            )
        if n == 0:
            return self.zero_word
        return self._below_million(n)

    def _below_million(self, n: int) -> str:
        raise NotImplementedError


# ─── Thai ────────────────────────────────────────────────────────────


class ThaiNumeralConverter(NumeralConverter):
    """Thai positional grammar.

    Every nonzero digit is written with its position word (แสน, หมื่น, พัน,
    ร้อย, สิบ). Irregular forms:
      - tens digit 1  → สิบ      (not หนึ่งสิบ)
      - tens digit 2  → ยี่สิบ    (not สองสิบ)
      - units digit 1 → เอ็ด      when the whole value exceeds ten
    """

    _DIVISORS = (100_000, 10_000, 1_000, 100, 10, 1)

    def __init__(self, lexicon: NumeralLexicon = THAI_LEXICON):
        super().__init__(lexicon)

    def _below_million(self, n: int) -> str:
        lex = self.lexicon
        words: list[str] = []
        remaining = n

        for divisor in self._DIVISORS:
            digit, remaining = divmod(remaining, divisor)
            if digit == 0:
                continue

            if divisor == 10:
                if digit == 1:
                    words.append(lex.positions[10])
                elif digit == 2:
                    words.append(lex.tens_two + lex.positions[10])
                else:
                    words.append(lex.digits[digit] + lex.positions[10])
            elif divisor == 1:
                if digit == 1 and n > 10:
                    words.append(lex.trailing_one)
                else:
                    words.append(lex.digits[digit])
            else:
                words.append(lex.digits[digit] + lex.positions[divisor])

        return lex.separator.join(words)


# ─── English ─────────────────────────────────────────────────────────


class EnglishNumeralConverter(NumeralConverter):
    """English grammar: Thousand / Hundred positions, irregular teens,
    hyphenated tens ("Twenty-Five")."""

    def __init__(self, lexicon: NumeralLexicon = ENGLISH_LEXICON):
        super().__init__(lexicon)

    def _below_million(self, n: int) -> str:
        thousands, remainder = divmod(n, 1_000)
        words: list[str] = []
        if thousands:
            words.append(self._below_thousand(thousands))
            words.append(self.lexicon.positions[1_000])
        if remainder:
            words.append(self._below_thousand(remainder))
        return self.lexicon.separator.join(words)

    def _below_thousand(self, n: int) -> str:
        lex = self.lexicon
        hundreds, remainder = divmod(n, 100)
        words: list[str] = []

        if hundreds:
            words.append(lex.digits[hundreds])
            words.append(lex.positions[100])

        if remainder >= 20:
            tens, unit = divmod(remainder, 10)
            word = lex.tens[tens]
            if unit:
                word += lex.tens_joiner + lex.digits[unit]
            words.append(word)
        elif remainder >= 10:
            words.append(lex.teens[remainder - 10])
        elif remainder:
            words.append(lex.digits[remainder])

        return lex.separator.join(words)
