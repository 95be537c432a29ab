"""
Baht Text — FastAPI Server
==========================

RESTful API for spelling out monetary amounts as words.

Endpoints:
    POST /convert           Convert an amount to words
    GET  /languages         List built-in languages and their words
    GET  /health            Health check / readiness probe

Environment:
    BAHT_TEXT_DEFAULT_LANGUAGE   Language code used when a request omits one (default "th")
    LOG_LEVEL                    Root log level (default "INFO")

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from baht_text import __version__
from baht_text.config import OutputConfig
from baht_text.exceptions import BahtTextError
from baht_text.formatter import convert
from baht_text.handlers import Language, LanguageHandler
from baht_text.models import SplitAmount

load_dotenv()

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


# ─── Application Lifespan (resolve default language) ────────────────

_default_language: LanguageHandler | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Resolve the default language from the environment on startup."""
    global _default_language  # noqa: PLW0603
    code = os.environ.get("BAHT_TEXT_DEFAULT_LANGUAGE", "th")
    _default_language = Language.from_code(code).handler
    logger.info("Default language: %s", _default_language.name)
    yield
    _default_language = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Baht Text API",
    description=(
        "Spell out monetary amounts as Thai or English words, "
        "with optional placeholder templates for custom layouts."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    amount: Decimal = Field(
        ...,
        description="Amount to convert. Truncated (not rounded) to 2 decimal places.",
        json_schema_extra={"example": "1234.56"},
    )
    language: Optional[str] = Field(
        None, description="Language code ('th' or 'en'). Defaults to the server default."
    )
    use_unit: bool = Field(True, description="Include unit words (Baht / Satang / Only).")
    negative_prefix: Optional[str] = Field(
        None, description="Pinned negative prefix. Omit to use the language default."
    )
    format_template: Optional[str] = Field(
        None,
        description="Layout for positive amounts; must contain {INTEGER} and {FLOAT}.",
        json_schema_extra={"example": "{INTEGER}{UNIT}{EXACT}{FLOAT?{FLOAT}{SATANG}}"},
    )
    negative_format_template: Optional[str] = Field(
        None, description="Layout for negative amounts; must contain {INTEGER} and {FLOAT}."
    )


class ConvertResponse(BaseModel):
    text: str
    language: str
    negative: bool
    major: int
    minor: int

    model_config = {"json_schema_extra": {"example": {
        "text": "หนึ่งพันสองร้อยสามสิบสี่บาทห้าสิบหกสตางค์",
        "language": "th",
        "negative": False,
        "major": 1234,
        "minor": 56,
    }}}


class LanguageOut(BaseModel):
    code: str
    name: str
    unit_word: str
    exact_word: str
    fraction_unit_word: str
    default_negative_prefix: str


class HealthResponse(BaseModel):
    status: str
    version: str
    default_language: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_default_language() -> LanguageHandler:
    if _default_language is None:
        raise HTTPException(status_code=503, detail="Service not initialised")
    return _default_language


def _error_detail(exc: BahtTextError) -> dict:
    return {"code": exc.code, "message": exc.message, "details": exc.details}


def _build_config(request: ConvertRequest) -> OutputConfig:
    """Translate the request into an OutputConfig (templates validated here)."""
    handler = (
        Language.from_code(request.language).handler
        if request.language
        else _get_default_language()
    )
    builder = (
        OutputConfig.builder(handler)
        .use_unit(request.use_unit)
        .set_format_template(request.format_template)
        .set_negative_format_template(request.negative_format_template)
    )
    if request.negative_prefix is not None:
        builder.set_prefix(request.negative_prefix)
    return builder.build()


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert an amount to words",
    tags=["Conversion"],
    responses={
        422: {"description": "Invalid amount, template or language code"},
        503: {"description": "Service not yet initialised"},
    },
)
def convert_amount(request: ConvertRequest) -> ConvertResponse:
    """Spell out an amount.

    - **text**: the converted words
    - **negative / major / minor**: how the amount was split (after truncation)
    """
    try:
        config = _build_config(request)
        parts = SplitAmount.from_value(request.amount)
        text = convert(request.amount, config)
    except BahtTextError as exc:
        raise HTTPException(status_code=422, detail=_error_detail(exc)) from exc

    return ConvertResponse(
        text=text,
        language=config.handler.code,
        negative=parts.negative,
        major=parts.major,
        minor=parts.minor,
    )


@app.get("/languages", summary="List built-in languages", tags=["System"])
def list_languages() -> list[LanguageOut]:
    """Returns the identity and fixed words of every built-in language."""
    return [
        LanguageOut(
            code=lang.handler.code,
            name=lang.handler.name,
            unit_word=lang.handler.unit_word,
            exact_word=lang.handler.exact_word,
            fraction_unit_word=lang.handler.fraction_unit_word,
            default_negative_prefix=lang.handler.default_negative_prefix,
        )
        for lang in Language
    ]


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Service not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    handler = _get_default_language()
    return HealthResponse(
        status="healthy",
        version=__version__,
        default_language=handler.code,
    )
