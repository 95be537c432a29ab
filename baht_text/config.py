"""
Output configuration — an immutable value built through a builder.

Negative prefix has two states:

    Tracking      negative_prefix is None. The prefix is read from the
                  handler's default every time, so switching language
                  switches the prefix (ลบ ↔ Minus).
    Pinned(v)     negative_prefix is a string, possibly empty. It stays
                  put no matter which handler is selected.

Transitions:
    OutputConfig.builder(...)      → Tracking
    builder.set_prefix(v)          → Pinned(v)
    builder.clear_prefix()         → Tracking
    config.to_builder()            → Pinned(config.resolved_negative_prefix)

The last one is deliberate: copy-and-modify freezes the prefix that the
config would have printed, even if it was tracking. Changing the language
on the copy does NOT pick up the new language's prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .handlers import THAI, Language, LanguageHandler, resolve_handler
from .template import FormatTemplate

TemplateLike = Union[FormatTemplate, str, None]


@dataclass(frozen=True)
class OutputConfig:
    """How an amount is spelled out. Never mutated; copy via ``to_builder()``."""

    handler: LanguageHandler
    use_unit: bool = True
    negative_prefix: Optional[str] = None  # None → track handler default
    format_template: Optional[FormatTemplate] = None
    negative_format_template: Optional[FormatTemplate] = None

    @property
    def prefix_pinned(self) -> bool:
        return self.negative_prefix is not None

    @property
    def resolved_negative_prefix(self) -> str:
        if self.negative_prefix is None:
            return self.handler.default_negative_prefix
        return self.negative_prefix

    def template_for(self, negative: bool) -> FormatTemplate | None:
        """The template for an amount of the given sign (None → default layout)."""
        return self.negative_format_template if negative else self.format_template

    @classmethod
    def default(cls) -> OutputConfig:
        """Thai, unit words on, tracking prefix, no templates."""
        return cls(handler=THAI)

    @classmethod
    def builder(cls, language: LanguageHandler | Language | None = None) -> OutputConfigBuilder:
        return OutputConfigBuilder(THAI if language is None else language)

    def to_builder(self) -> OutputConfigBuilder:
        """Start a modified copy. The prefix is pinned to its current resolved value."""
        builder = OutputConfigBuilder(self.handler)
        builder.use_unit(self.use_unit)
        builder.set_prefix(self.resolved_negative_prefix)
        builder.set_format_template(self.format_template)
        builder.set_negative_format_template(self.negative_format_template)
        return builder


class OutputConfigBuilder:
    """Fluent builder for OutputConfig.

    Usage:
        config = (
            OutputConfig.builder(ENGLISH)
            .use_unit(False)
            .set_format_template("{INTEGER} and {FLOAT}/100")
            .build()
        )
    """

    def __init__(self, language: LanguageHandler | Language = THAI):
        self._handler = resolve_handler(language)
        self._use_unit = True
        self._negative_prefix: str | None = None
        self._format_template: FormatTemplate | None = None
        self._negative_format_template: FormatTemplate | None = None

    def language(self, language: LanguageHandler | Language) -> OutputConfigBuilder:
        """Select the handler. A tracking prefix follows it; a pinned one does not."""
        self._handler = resolve_handler(language)
        return self

    def use_unit(self, enabled: bool) -> OutputConfigBuilder:
        self._use_unit = enabled
        return self

    def set_prefix(self, prefix: str) -> OutputConfigBuilder:
        """Pin the negative prefix. An empty string pins "no prefix"."""
        if prefix is None:
            raise TypeError("Prefix must be a string; use clear_prefix() to track the default")
        self._negative_prefix = prefix
        return self

    def clear_prefix(self) -> OutputConfigBuilder:
        """Go back to tracking the handler's default prefix."""
        self._negative_prefix = None
        return self

    def set_format_template(self, template: TemplateLike) -> OutputConfigBuilder:
        """Layout for positive amounts. Strings are validated immediately."""
        self._format_template = _as_template(template)
        return self

    def set_negative_format_template(self, template: TemplateLike) -> OutputConfigBuilder:
        """Layout for negative amounts. Strings are validated immediately."""
        self._negative_format_template = _as_template(template)
        return self

    def set_format(self, template: TemplateLike, negative: bool = False) -> OutputConfigBuilder:
        if negative:
            return self.set_negative_format_template(template)
        return self.set_format_template(template)

    def build(self) -> OutputConfig:
        return OutputConfig(
            handler=self._handler,
            use_unit=self._use_unit,
            negative_prefix=self._negative_prefix,
            format_template=self._format_template,
            negative_format_template=self._negative_format_template,
        )


def _as_template(template: TemplateLike) -> FormatTemplate | None:
    if template is None or isinstance(template, FormatTemplate):
        return template
    return FormatTemplate.create(template)
