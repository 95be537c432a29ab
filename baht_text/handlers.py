"""
Language handlers — one capability set per output language.

A handler bundles:
  - identity            code ("th") and display name ("Thai")
  - four lexical words  unit, exact, fraction unit, default negative prefix
  - a NumeralConverter  the grammar for spelling out numbers
  - convert()           amount + config → final text

Adding a language means subclassing LanguageHandler and nothing else; no
table, enum or switch anywhere has to change. The ``Language`` enum at the
bottom is a convenience for the two built-ins, not the extension point.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .exceptions import UnknownLanguageError
from .models import AmountLike, SplitAmount
from .numerals import EnglishNumeralConverter, NumeralConverter, ThaiNumeralConverter
from .renderer import render_template

if TYPE_CHECKING:
    from .config import OutputConfig


class LanguageHandler:
    """Base capability set. Subclasses set the class attributes and ``numerals``.

    Handlers are stateless and safe to share between threads.
    """

    code: str = ""
    name: str = ""
    unit_word: str = ""
    exact_word: str = ""
    fraction_unit_word: str = ""
    default_negative_prefix: str = ""
    numerals: NumeralConverter

    @property
    def zero_word(self) -> str:
        return self.numerals.zero_word

    @property
    def separator(self) -> str:
        return self.numerals.lexicon.separator

    def convert(self, amount: AmountLike, config: OutputConfig) -> str:
        """Convert ``amount`` to words using this handler's grammar.

        Uses the config's template for the amount's sign when one is set;
        otherwise the default layout, with the negative prefix prepended.
        """
        parts = SplitAmount.from_value(amount)
        integer_words = self.numerals.words_for_magnitude(parts.major)
        fraction_words = self.numerals.words_for_fraction(parts.minor)
        prefix = config.resolved_negative_prefix

        template = config.template_for(parts.negative)
        if template is not None:
            return render_template(
                template, integer_words, fraction_words, self, prefix
            )

        text = self.default_layout(integer_words, fraction_words, parts.minor, config.use_unit)
        if parts.negative and prefix:
            return prefix + self.separator + text
        return text

    def default_layout(
        self, integer_words: str, fraction_words: str, minor: int, use_unit: bool
    ) -> str:
        """[integer][unit][exact] or [integer][unit][fraction][fraction unit]."""
        words = [integer_words]
        if use_unit:
            words.append(self.unit_word)

        if minor == 0:
            if use_unit:
                words.append(self.exact_word)
        else:
            words.append(fraction_words)
            if use_unit:
                words.append(self.fraction_unit_word)

        return self.separator.join(words)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r})"


# ─── Built-in Handlers ───────────────────────────────────────────────


class ThaiLanguageHandler(LanguageHandler):
    code = "th"
    name = "Thai"
    unit_word = "บาท"
    exact_word = "ถ้วน"
    fraction_unit_word = "สตางค์"
    default_negative_prefix = "ลบ"
    numerals = ThaiNumeralConverter()


class EnglishLanguageHandler(LanguageHandler):
    code = "en"
    name = "English"
    unit_word = "Baht"
    exact_word = "Only"
    fraction_unit_word = "Satang"
    default_negative_prefix = "Minus"
    numerals = EnglishNumeralConverter()


THAI = ThaiLanguageHandler()
ENGLISH = EnglishLanguageHandler()


# ─── Legacy Enum Adapter ─────────────────────────────────────────────


class Language(str, Enum):
    """The two built-in languages by code. Maps to a handler; never dispatched on."""

    THAI = "th"
    ENGLISH = "en"

    @property
    def handler(self) -> LanguageHandler:
        return THAI if self is Language.THAI else ENGLISH

    @classmethod
    def from_code(cls, code: str) -> Language:
        """Look up a built-in language by code, case-insensitively.

        Raises:
            UnknownLanguageError: If no built-in language has that code.
        """
        normalized = code.strip().lower()
        for language in cls:
            if language.value == normalized:
                return language
        raise UnknownLanguageError(
            f"Unknown language code {code!r}. Expected one of: "
            f"{', '.join(lang.value for lang in cls)}",
            {"code": code},
        )


def resolve_handler(language: LanguageHandler | Language) -> LanguageHandler:
    """Accept either a handler or the legacy enum and return a handler."""
    if isinstance(language, Language):
        return language.handler
    return language
