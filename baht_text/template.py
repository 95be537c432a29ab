"""
Format templates — user-defined layouts for the converted words.

A template is validated once, when it is created, and is immutable after
that. It must contain both ``{INTEGER}`` and ``{FLOAT}``; every other
placeholder is optional.

Placeholders:
    {INTEGER}     whole-unit words
    {FLOAT}       minor-unit words
    {UNIT}        currency unit word           (บาท / Baht)
    {EXACT}       exact word, only when the minor part is zero (ถ้วน / Only)
    {SATANG}      minor-unit word              (สตางค์ / Satang)
    {NEGPREFIX}   resolved negative prefix     (ลบ / Minus)
    {FLOAT?...}   keep "..." only when the minor part is not zero
    {SATANG?...}  same condition as {FLOAT?...}

Examples:
    "{INTEGER}{UNIT}{EXACT}{FLOAT?{FLOAT}{SATANG}}"
    "{INTEGER} and {FLOAT}/100"
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import TemplateValidationError

REQUIRED_PLACEHOLDERS: tuple[str, ...] = ("{INTEGER}", "{FLOAT}")


@dataclass(frozen=True)
class FormatTemplate:
    """A validated placeholder string."""

    raw: str

    def __post_init__(self) -> None:
        if not isinstance(self.raw, str) or not self.raw:
            raise TemplateValidationError(
                "Format string must be a non-empty string",
                {"template": self.raw},
            )
        missing = [p for p in REQUIRED_PLACEHOLDERS if p not in self.raw]
        if missing:
            raise TemplateValidationError(
                f"Format string must contain {{INTEGER}} for whole units and "
                f"{{FLOAT}} for minor units; missing {', '.join(missing)}. "
                f'Example: "{{INTEGER}}{{UNIT}}{{FLOAT?{{FLOAT}}{{SATANG}}}}"',
                {"template": self.raw, "missing": missing},
            )

    @classmethod
    def create(cls, raw: str) -> FormatTemplate:
        """Validate ``raw`` and wrap it.

        Raises:
            TemplateValidationError: If a required placeholder is missing.
        """
        return cls(raw)

    def __str__(self) -> str:
        return self.raw
