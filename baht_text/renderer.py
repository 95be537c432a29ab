"""
Template rendering — turns a FormatTemplate plus converted words into text.

Two passes, in this order:

  1. Conditional blocks.  ``{FLOAT?...}`` then ``{SATANG?...}`` are resolved
     first. Their content is kept verbatim (placeholders still raw) when the
     minor-unit words differ from the language's zero word, and dropped
     entirely otherwise. Content may nest braces to any depth.

  2. Placeholders.  One left-to-right scan replaces every ``{INTEGER}``,
     ``{FLOAT}``, ``{UNIT}``, ``{EXACT}``, ``{SATANG}`` and ``{NEGPREFIX}``.
     Substituted values are never scanned again, so a word that happens to
     look like a placeholder is emitted as-is.

A conditional block with no matching close brace is NOT an error: the
remainder of the template from the marker onward is passed through as
literal text. Template *creation* is strict; *rendering* is lenient.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .template import FormatTemplate

if TYPE_CHECKING:
    from .handlers import LanguageHandler

logger = logging.getLogger(__name__)

CONDITIONAL_MARKERS: tuple[str, ...] = ("{FLOAT?", "{SATANG?")

_PLACEHOLDER_RE = re.compile(r"\{(INTEGER|FLOAT|UNIT|EXACT|SATANG|NEGPREFIX)\}")


# ─── Brace Matching ──────────────────────────────────────────────────


def find_matching_brace(text: str, start: int) -> int:
    """Index of the ``}`` closing a block whose ``{`` precedes ``start``.

    Depth starts at 1 (the opening brace belongs to the marker). Returns -1
    when the block is never closed.
    """
    depth = 1
    for i in range(start, len(text)):
        char = text[i]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return i
    return -1


def resolve_conditional(text: str, marker: str, keep: bool) -> str:
    """Expand or drop every ``marker...}`` block in ``text``.

    Args:
        text: Template text.
        marker: Opening token including the ``?``, e.g. ``"{FLOAT?"``.
        keep: True → emit block content unchanged, False → emit nothing.
    """
    start = text.find(marker)
    if start == -1:
        return text

    parts: list[str] = []
    last = 0
    while start != -1:
        parts.append(text[last:start])
        content_start = start + len(marker)
        end = find_matching_brace(text, content_start)
        if end == -1:
            logger.warning(
                "Unclosed %s block at index %d; passing remainder through literally",
                marker,
                start,
            )
            parts.append(text[start:])
            last = len(text)
            break
        if keep:
            parts.append(text[content_start:end])
        last = end + 1
        start = text.find(marker, last)

    parts.append(text[last:])
    return "".join(parts)


# ─── Renderer ────────────────────────────────────────────────────────


def render_template(
    template: FormatTemplate,
    integer_words: str,
    fraction_words: str,
    handler: LanguageHandler,
    negative_prefix: str,
) -> str:
    """Render ``template`` for one converted amount.

    Args:
        template: Validated layout.
        integer_words: Whole-unit words, e.g. "หนึ่งร้อย".
        fraction_words: Minor-unit words; the language's zero word when 0.
        handler: Supplies unit / exact / fraction-unit words and the zero word.
        negative_prefix: Value for ``{NEGPREFIX}``.

    Returns:
        The rendered text.
    """
    has_fraction = fraction_words != handler.zero_word

    text = template.raw
    for marker in CONDITIONAL_MARKERS:
        text = resolve_conditional(text, marker, keep=has_fraction)

    values = {
        "INTEGER": integer_words,
        "FLOAT": fraction_words,
        "UNIT": handler.unit_word,
        "EXACT": "" if has_fraction else handler.exact_word,
        "SATANG": handler.fraction_unit_word,
        "NEGPREFIX": negative_prefix,
    }
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], text)
