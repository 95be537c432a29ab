"""
Amount formatter — the public entry point.

Flow:
    amount ──► SplitAmount (sign / major / minor, truncated)
           ──► handler.numerals (words for major and minor)
           ──► template for the sign? ── yes ──► render_template
                                      └─ no ───► default layout + prefix

Usage:
    convert("1234.56")                           # Thai, default config
    convert(Decimal("-100"), english_config)     # "Minus One Hundred Baht Only"
"""

from __future__ import annotations

import logging
from typing import Callable

from .config import OutputConfig, OutputConfigBuilder
from .models import AmountLike, to_decimal

logger = logging.getLogger(__name__)


def convert(amount: AmountLike, config: OutputConfig | None = None) -> str:
    """Spell out ``amount`` according to ``config``.

    Args:
        amount: Decimal, int, str or float. Truncated (not rounded) to 2 places.
        config: Output configuration; None means ``OutputConfig.default()``.

    Raises:
        AmountValidationError: If the amount is missing or not a finite number.
    """
    if config is None:
        config = OutputConfig.default()
    logger.debug("Converting %r with handler %r", amount, config.handler)
    return config.handler.convert(amount, config)


class BahtText:
    """An amount paired with its output configuration.

    Usage:
        text = BahtText(Decimal("500.25")).reconfigure(lambda b: b.language(ENGLISH))
        str(text)   # "Five Hundred Baht Twenty-Five Satang"

    Instances are immutable; every ``with_*`` / ``reconfigure`` returns a new one.
    """

    __slots__ = ("_amount", "_config")

    def __init__(self, amount: AmountLike, config: OutputConfig | None = None):
        self._amount = to_decimal(amount)
        self._config = config if config is not None else OutputConfig.default()

    @property
    def amount(self):
        return self._amount

    @property
    def config(self) -> OutputConfig:
        return self._config

    def with_amount(self, amount: AmountLike) -> BahtText:
        return BahtText(amount, self._config)

    def with_config(self, config: OutputConfig) -> BahtText:
        return BahtText(self._amount, config)

    def reconfigure(self, updater: Callable[[OutputConfigBuilder], object]) -> BahtText:
        """Apply ``updater`` to a builder copied from the current config.

        The copy goes through ``to_builder()``, so the negative prefix is
        pinned to what the current config resolves to.
        """
        builder = self._config.to_builder()
        updater(builder)
        return BahtText(self._amount, builder.build())

    def __str__(self) -> str:
        return convert(self._amount, self._config)

    def __repr__(self) -> str:
        return f"BahtText({str(self._amount)!r}, handler={self._config.handler!r})"
