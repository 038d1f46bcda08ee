"""FastAPI shell over the two tools.

Endpoints:
- GET /health
- POST /generate   { "length": 16, "include_uppercase": true, ... }
- POST /translate  { "text": "...", "language": "Spanish" }
"""
from __future__ import annotations
import logging
from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from toolshed.common.config import load_settings
from toolshed.common.logging_setup import setup_logging
from toolshed.common.schema import MAX_LENGTH, MIN_LENGTH, GenerationConfig, ResultKind
from toolshed.common.templates import missing_tags
from toolshed.generator.strings import generate
from toolshed.translate.client import TranslationClient

LOGGER = logging.getLogger("toolshed.serve.app")
setup_logging()

SETTINGS = load_settings()

ERROR_STATUS = {
    ResultKind.VALIDATION_ERROR: 422,
    ResultKind.MISSING_CREDENTIAL: 503,
    ResultKind.REMOTE_ERROR: 502,
    ResultKind.INVALID_RESPONSE: 502,
    ResultKind.TRANSPORT_ERROR: 502,
}

class GenerateIn(BaseModel):
    length: int = Field(16, ge=MIN_LENGTH, le=MAX_LENGTH)
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = False

class GenerateOut(BaseModel):
    value: str
    length: int

class TranslateIn(BaseModel):
    text: str
    language: str = "Spanish"

class TranslateOut(BaseModel):
    text: str

app = FastAPI(title="Toolshed")

def get_client() -> TranslationClient:
    return TranslationClient(SETTINGS)

@app.on_event("startup")
def _check_settings_on_startup() -> None:
    """Warn about configuration that would make every translation fail."""
    if not SETTINGS.api_key:
        LOGGER.warning("GEMINI_API_KEY is not set; /translate will report a missing credential")
    missing = missing_tags(SETTINGS.prompt_template)
    if missing:
        LOGGER.warning("Prompt template is missing placeholders: %s", ", ".join(missing))

@app.get("/")
def root() -> dict[str, Any]:
    return {"message": "Welcome!", "tools": ["/generate", "/translate"]}

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "model": SETTINGS.model}

@app.post("/generate", response_model=GenerateOut)
def generate_string(body: GenerateIn) -> GenerateOut:
    config = GenerationConfig(
        length=body.length,
        include_uppercase=body.include_uppercase,
        include_numbers=body.include_numbers,
        include_symbols=body.include_symbols,
    )
    value = generate(config)
    return GenerateOut(value=value, length=len(value))

@app.post("/translate", response_model=TranslateOut)
def translate(body: TranslateIn, client: TranslationClient = Depends(get_client)) -> TranslateOut:
    result = client.translate(body.text, body.language)
    if not result.ok:
        LOGGER.info("Translation failed: %s", result.kind.value)
        raise HTTPException(
            status_code=ERROR_STATUS[result.kind],
            detail={"error": result.kind.value, "message": result.message},
        )
    return TranslateOut(text=result.text)
