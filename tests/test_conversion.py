"""
End-to-end conversion tests — amount in, words out, default layout.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from baht_text.config import OutputConfig
from baht_text.exceptions import AmountValidationError, BahtTextError, UnknownLanguageError
from baht_text.formatter import BahtText, convert
from baht_text.handlers import (
    ENGLISH,
    THAI,
    EnglishLanguageHandler,
    Language,
    LanguageHandler,
)
from baht_text.lexicon import NumeralLexicon
from baht_text.models import SplitAmount
from baht_text.numerals import NumeralConverter

ENGLISH_CONFIG = OutputConfig.builder(ENGLISH).build()


# ═══════════════════════════════════════════════════════════════════════
# AMOUNT SPLITTING
# ═══════════════════════════════════════════════════════════════════════


class TestSplitAmount:
    def test_positive(self):
        parts = SplitAmount.from_value(Decimal("1234.56"))
        assert (parts.negative, parts.major, parts.minor) == (False, 1234, 56)

    @pytest.mark.parametrize("raw", ["1.239", "-1.239"])
    def test_truncates_not_rounds(self, raw):
        parts = SplitAmount.from_value(Decimal(raw))
        assert parts.major == 1
        assert parts.minor == 23

    def test_truncates_toward_zero_near_next_unit(self):
        parts = SplitAmount.from_value(Decimal("-9.999"))
        assert (parts.negative, parts.major, parts.minor) == (True, 9, 99)

    def test_negative_that_truncates_to_zero_is_not_negative(self):
        assert SplitAmount.from_value(Decimal("-0.001")).negative is False

    def test_negative_zero(self):
        assert SplitAmount.from_value(Decimal("-0")).negative is False

    def test_accepts_int_str_float(self):
        assert SplitAmount.from_value(21).major == 21
        assert SplitAmount.from_value(" 101.00 ").major == 101
        assert SplitAmount.from_value(0.1).minor == 10

    def test_precision_beyond_decimal_context(self):
        parts = SplitAmount.from_value(Decimal("123456789012345678901234567890.999999999999999999999999999999"))
        assert parts.major == 123456789012345678901234567890
        assert parts.minor == 99

    def test_exponent_notation(self):
        parts = SplitAmount.from_value(Decimal("1E+3"))
        assert (parts.major, parts.minor) == (1000, 0)

    @pytest.mark.parametrize("bad", [None, True, "abc", "1,000", "NaN", Decimal("Infinity"), float("inf")])
    def test_invalid_amounts_raise(self, bad):
        with pytest.raises(AmountValidationError) as excinfo:
            SplitAmount.from_value(bad)
        assert excinfo.value.code == "INVALID_AMOUNT"

    def test_is_immutable(self):
        parts = SplitAmount.from_value(1)
        with pytest.raises(Exception):
            parts.major = 2  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════
# THAI DEFAULT LAYOUT
# ═══════════════════════════════════════════════════════════════════════


class TestThaiDefault:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            ("0", "ศูนย์บาทถ้วน"),
            ("0.05", "ศูนย์บาทห้าสตางค์"),
            ("1.00", "หนึ่งบาทถ้วน"),
            ("11.0", "สิบเอ็ดบาทถ้วน"),
            ("21.0", "ยี่สิบเอ็ดบาทถ้วน"),
            ("101.00", "หนึ่งร้อยเอ็ดบาทถ้วน"),
            ("1.01", "หนึ่งบาทหนึ่งสตางค์"),
            ("1.20", "หนึ่งบาทยี่สิบสตางค์"),
            ("1.11", "หนึ่งบาทสิบเอ็ดสตางค์"),
            ("1000000", "หนึ่งล้านบาทถ้วน"),
            ("1234567", "หนึ่งล้านสองแสนสามหมื่นสี่พันห้าร้อยหกสิบเจ็ดบาทถ้วน"),
            ("10000001", "สิบล้านหนึ่งบาทถ้วน"),
        ],
    )
    def test_amounts(self, amount, expected):
        assert convert(Decimal(amount)) == expected

    def test_large_value(self):
        assert convert(Decimal("1121111121.11")) == (
            "หนึ่งพันหนึ่งร้อยยี่สิบเอ็ดล้านหนึ่งแสนหนึ่งหมื่นหนึ่งพันหนึ่งร้อยยี่สิบเอ็ด"
            "บาทสิบเอ็ดสตางค์"
        )

    def test_negative(self):
        assert convert(Decimal("-100.00")) == "ลบหนึ่งร้อยบาทถ้วน"

    def test_negative_with_fraction(self):
        assert convert(Decimal("-1234.56")) == "ลบหนึ่งพันสองร้อยสามสิบสี่บาทห้าสิบหกสตางค์"

    def test_truncation(self):
        assert convert(Decimal("1.239")) == "หนึ่งบาทยี่สิบสามสตางค์"

    def test_tiny_negative_has_no_prefix(self):
        assert convert(Decimal("-0.001")) == "ศูนย์บาทถ้วน"

    def test_without_units(self):
        config = OutputConfig.builder().use_unit(False).build()
        assert convert(Decimal("100.00"), config) == "หนึ่งร้อย"
        assert convert(Decimal("100.50"), config) == "หนึ่งร้อยห้าสิบ"
        assert convert(Decimal("-100.00"), config) == "ลบหนึ่งร้อย"

    def test_config_none_means_default(self):
        assert convert(Decimal("100"), None) == convert(Decimal("100"), OutputConfig.default())


# ═══════════════════════════════════════════════════════════════════════
# ENGLISH DEFAULT LAYOUT
# ═══════════════════════════════════════════════════════════════════════


class TestEnglishDefault:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            ("0", "Zero Baht Only"),
            ("0.05", "Zero Baht Five Satang"),
            ("1.00", "One Baht Only"),
            ("11", "Eleven Baht Only"),
            ("21", "Twenty-One Baht Only"),
            ("101", "One Hundred One Baht Only"),
            ("1.01", "One Baht One Satang"),
            ("1.20", "One Baht Twenty Satang"),
            ("1.11", "One Baht Eleven Satang"),
            ("1000000", "One Million Baht Only"),
            (
                "1234567",
                "One Million Two Hundred Thirty-Four Thousand Five Hundred Sixty-Seven Baht Only",
            ),
            ("10000001", "Ten Million One Baht Only"),
            ("500.25", "Five Hundred Baht Twenty-Five Satang"),
        ],
    )
    def test_amounts(self, amount, expected):
        assert convert(Decimal(amount), ENGLISH_CONFIG) == expected

    def test_negative(self):
        assert convert(Decimal("-100.00"), ENGLISH_CONFIG) == "Minus One Hundred Baht Only"

    def test_negative_with_fraction(self):
        assert convert(Decimal("-1234.56"), ENGLISH_CONFIG) == (
            "Minus One Thousand Two Hundred Thirty-Four Baht Fifty-Six Satang"
        )

    def test_negative_truncation(self):
        assert convert(Decimal("-1.239"), ENGLISH_CONFIG) == "Minus One Baht Twenty-Three Satang"

    def test_without_units(self):
        config = OutputConfig.builder(ENGLISH).use_unit(False).build()
        assert convert(Decimal("100.25"), config) == "One Hundred Twenty-Five"
        assert convert(Decimal("100"), config) == "One Hundred"

    def test_trillion_scale(self):
        assert convert(Decimal("1000001000000"), ENGLISH_CONFIG) == (
            "One Million One Million Baht Only"
        )


# ═══════════════════════════════════════════════════════════════════════
# ERRORS
# ═══════════════════════════════════════════════════════════════════════


class TestConversionErrors:
    def test_none_amount_raises(self):
        with pytest.raises(AmountValidationError, match="must not be None"):
            convert(None)  # type: ignore[arg-type]

    def test_garbage_amount_raises(self):
        with pytest.raises(ValueError):
            convert("twelve baht")

    def test_errors_share_base_class(self):
        with pytest.raises(BahtTextError):
            convert("NaN")


# ═══════════════════════════════════════════════════════════════════════
# HANDLERS & EXTENSIBILITY
# ═══════════════════════════════════════════════════════════════════════


class TestHandlers:
    def test_identity(self, thai, english):
        assert (thai.code, thai.name) == ("th", "Thai")
        assert (english.code, english.name) == ("en", "English")

    def test_lexical_words(self, thai, english):
        assert (thai.unit_word, thai.exact_word, thai.fraction_unit_word) == ("บาท", "ถ้วน", "สตางค์")
        assert (english.unit_word, english.exact_word, english.fraction_unit_word) == (
            "Baht", "Only", "Satang",
        )
        assert thai.default_negative_prefix == "ลบ"
        assert english.default_negative_prefix == "Minus"

    def test_handler_convert_directly(self, english):
        assert english.convert("-2.50", ENGLISH_CONFIG) == "Minus Two Baht Fifty Satang"

    def test_legacy_enum_maps_to_builtins(self):
        assert Language.THAI.handler is THAI
        assert Language.ENGLISH.handler is ENGLISH

    @pytest.mark.parametrize(("code", "expected"), [("th", Language.THAI), (" EN ", Language.ENGLISH)])
    def test_enum_from_code(self, code, expected):
        assert Language.from_code(code) is expected

    def test_enum_unknown_code(self):
        with pytest.raises(UnknownLanguageError) as excinfo:
            Language.from_code("fr")
        assert excinfo.value.code == "UNKNOWN_LANGUAGE"

    def test_subclassed_words(self):
        class DollarHandler(EnglishLanguageHandler):
            code = "en-us"
            name = "US English"
            unit_word = "Dollars"
            exact_word = "Exactly"
            fraction_unit_word = "Cents"
            default_negative_prefix = "Negative"

        config = OutputConfig.builder(DollarHandler()).build()
        assert convert(Decimal("-12.05"), config) == "Negative Twelve Dollars Five Cents"
        assert convert(Decimal("12"), config) == "Twelve Dollars Exactly"

    def test_new_language_needs_only_a_handler(self):
        class Digits(NumeralConverter):
            def _below_million(self, n: int) -> str:
                return self.lexicon.separator.join(self.lexicon.digits[int(c)] for c in str(n))

        class RobotHandler(LanguageHandler):
            code = "robot"
            name = "Robot"
            unit_word = "credits"
            exact_word = "flat"
            fraction_unit_word = "bits"
            default_negative_prefix = "debit"
            numerals = Digits(
                NumeralLexicon(
                    digits=("zero", "one", "two", "three", "four",
                            "five", "six", "seven", "eight", "nine"),
                    million="mega",
                    separator=" ",
                )
            )

        config = OutputConfig.builder(RobotHandler()).build()
        assert convert(Decimal("-42.07"), config) == "debit four two credits seven bits"
        assert convert(Decimal("2000000"), config) == "two mega credits flat"


# ═══════════════════════════════════════════════════════════════════════
# BAHT TEXT OBJECT
# ═══════════════════════════════════════════════════════════════════════


class TestBahtText:
    def test_str_converts(self):
        assert str(BahtText(Decimal("100.00"))) == "หนึ่งร้อยบาทถ้วน"

    def test_reconfigure_language(self):
        text = BahtText(Decimal("500.25")).reconfigure(lambda b: b.language(ENGLISH))
        assert str(text) == "Five Hundred Baht Twenty-Five Satang"

    def test_reconfigure_returns_new_instance(self):
        original = BahtText(Decimal("1"))
        changed = original.reconfigure(lambda b: b.use_unit(False))
        assert original.config.use_unit is True
        assert str(changed) == "หนึ่ง"

    def test_with_amount_keeps_config(self):
        text = BahtText(Decimal("1"), ENGLISH_CONFIG).with_amount("2")
        assert str(text) == "Two Baht Only"

    def test_with_config(self):
        text = BahtText("3").with_config(ENGLISH_CONFIG)
        assert str(text) == "Three Baht Only"

    def test_invalid_amount_rejected_on_creation(self):
        with pytest.raises(AmountValidationError):
            BahtText(None)  # type: ignore[arg-type]
