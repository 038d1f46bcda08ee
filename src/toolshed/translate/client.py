"""Translation through a generative-language HTTP API.

One POST per call to ``{base_url}/v1beta/models/{model}:generateContent``.
Every failure is returned as a ``TranslationResult``; nothing is retried.
"""
from __future__ import annotations
import logging
import time
from typing import Any

import httpx

from toolshed.common.config import ClientSettings
from toolshed.common.schema import ResultKind, TranslationRequest, TranslationResult
from toolshed.common.templates import render_prompt

LOGGER = logging.getLogger("toolshed.translate.client")

def build_payload(prompt: str) -> dict[str, Any]:
    return {"contents": [{"parts": [{"text": prompt}]}]}

def extract_text(data: Any) -> str | None:
    """Return candidates[0].content.parts[0].text, or None if any level is missing or empty."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str) or not text:
        return None
    return text


class TranslationClient:
    """
    Client for the translation provider.

    Args:
        settings: Provider endpoint, model, key, timeout and prompt template.
        http_client: Optional ``httpx.Client`` to send requests through. The caller
            owns it. Without one, a short-lived client is opened per call.
    """

    def __init__(self, settings: ClientSettings, http_client: httpx.Client | None = None) -> None:
        self.settings = settings
        self._http = http_client

    def translate(self, source_text: str, target_language: str, api_key: str | None = None) -> TranslationResult:
        """
        Translate text into the target language.

        Args:
            source_text: Text to translate. Must not be blank.
            target_language: Language name handed to the model unchanged.
            api_key: Overrides the configured key for this call.
        """
        if not source_text or not source_text.strip():
            return TranslationResult.failure(ResultKind.VALIDATION_ERROR, "Source text is empty.")

        key = self.settings.api_key if api_key is None else api_key
        if not key or not key.strip():
            LOGGER.warning("Translation requested without an API key")
            return TranslationResult.failure(ResultKind.MISSING_CREDENTIAL, "API key is missing.")

        prompt = render_prompt(self.settings.prompt_template, source_text, target_language)
        payload = build_payload(prompt)

        start = time.time()
        try:
            r = self._post(payload, key)
            if not r.is_success:
                LOGGER.error("Provider returned HTTP %s", r.status_code)
                return TranslationResult.failure(
                    ResultKind.REMOTE_ERROR,
                    f"HTTP error! status: {r.status_code}",
                    status_code=r.status_code,
                )
            data = r.json()
        except Exception as e:
            LOGGER.error("Translation request failed: %s", e)
            return TranslationResult.failure(
                ResultKind.TRANSPORT_ERROR, f"Unable to get translation. {e}"
            )

        latency = int((time.time() - start) * 1000)
        text = extract_text(data)
        if text is None:
            LOGGER.error("Malformed provider response after %sms", latency)
            return TranslationResult.failure(ResultKind.INVALID_RESPONSE, "Invalid response.")

        LOGGER.info("Translated %d chars to %s in %sms", len(source_text), target_language, latency)
        return TranslationResult.success(text)

    def translate_request(self, request: TranslationRequest, api_key: str | None = None) -> TranslationResult:
        return self.translate(request.source_text, request.target_language, api_key)

    def _post(self, payload: dict[str, Any], key: str) -> httpx.Response:
        url = self.settings.endpoint
        headers = {"Content-Type": "application/json", "x-goog-api-key": key}
        if self._http is not None:
            return self._http.post(url, headers=headers, json=payload, timeout=self.settings.timeout)
        with httpx.Client(timeout=self.settings.timeout) as client:
            return client.post(url, headers=headers, json=payload)
