"""
Custom exception hierarchy for amount-to-words conversion.

Each exception type maps to a specific category of input failure. All of
them fail fast at the boundary: nothing is ever partially converted.
"""

from __future__ import annotations


class BahtTextError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class AmountValidationError(BahtTextError, ValueError):
    """The amount is missing, non-numeric, or not finite."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_AMOUNT", message, details)


class FractionRangeError(BahtTextError, ValueError):
    """A fractional (minor-unit) value lies outside 0..99."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("FRACTION_OUT_OF_RANGE", message, details)


class TemplateValidationError(BahtTextError, ValueError):
    """A format template is missing one of its required placeholders."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("TEMPLATE_INVALID", message, details)


class UnknownLanguageError(BahtTextError, LookupError):
    """No built-in language is registered under the requested code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_LANGUAGE", message, details)
