"""
Translation adapter.

Providers:
- google -> Google Cloud Translation v2 REST
            POST {GOOGLE_TRANSLATE_URL}?key=... {"q", "source", "target", "format"}
            -> {"data": {"translations": [{"translatedText": "..."}]}}
- llm    -> OpenAI-compatible chat completion (see `ai_client.py`)

One provider call per invocation. No caching, batching or retry.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import httpx
from openai import OpenAIError

from . import ai_client
from .config import settings
from .errors import UpstreamError

logger = logging.getLogger(__name__)

Translator = Callable[[str, str, str], str]

LLM_SYSTEM = (
    "You are a translation engine. Translate the user's text from {src} to {dst}. "
    "Reply with the translation only, no quotes, notes or explanations."
)


class TranslationError(UpstreamError):
    default_message = "Translation failed"

    def __init__(self, details: str):
        super().__init__("Translation failed", details=details)


def _base_lang(tag: str) -> str:
    # Google v2 wants ISO-639 codes; "hi-IN" -> "hi", but keep "zh-CN"/"zh-TW".
    tag = (tag or "").strip()
    if tag.lower().startswith("zh"):
        return tag
    return tag.split("-", 1)[0].lower()


def translate_google(
    text: str,
    from_lang: str,
    to_lang: str,
    *,
    api_key: str | None = None,
    client: httpx.Client | None = None,
) -> str:
    api_key = (api_key if api_key is not None else settings.GOOGLE_TRANSLATE_API_KEY).strip()
    if not api_key:
        raise TranslationError("GOOGLE_TRANSLATE_API_KEY is not set.")

    payload = {
        "q": text,
        "source": _base_lang(from_lang),
        "target": _base_lang(to_lang),
        "format": "text",
    }
    own_client = client is None
    http = client or httpx.Client(timeout=settings.HTTP_TIMEOUT_S)
    try:
        resp = http.post(settings.GOOGLE_TRANSLATE_URL, params={"key": api_key}, json=payload)
    except httpx.HTTPError as exc:
        raise TranslationError(f"Translation provider unreachable: {exc}") from exc
    finally:
        if own_client:
            http.close()

    if resp.status_code != 200:
        body = resp.text[:500]
        raise TranslationError(f"Translation request failed: {resp.status_code} {body}")

    try:
        data: dict[str, Any] = resp.json()
        translated = data["data"]["translations"][0]["translatedText"]
    except (ValueError, KeyError, IndexError, TypeError) as exc:
        raise TranslationError("Translation provider returned a malformed response.") from exc

    if not isinstance(translated, str):
        raise TranslationError("Translation provider returned a malformed response.")
    return translated


def translate_llm(text: str, from_lang: str, to_lang: str) -> str:
    try:
        translated = ai_client.chat_single(
            text,
            system=LLM_SYSTEM.format(src=from_lang, dst=to_lang),
        )
    except OpenAIError as exc:
        raise TranslationError(f"LLM translation request failed: {exc}") from exc

    translated = translated.strip()
    if not translated:
        raise TranslationError("LLM returned an empty translation.")
    return translated


def translate_text(text: str, from_lang: str, to_lang: str) -> str:
    """Translate `text` with the configured provider."""
    provider = (settings.TRANSLATION_PROVIDER or "google").strip().lower()
    logger.info("Translating %d chars %s -> %s via %s", len(text), from_lang, to_lang, provider)

    if provider == "google":
        return translate_google(text, from_lang, to_lang)
    if provider == "llm":
        return translate_llm(text, from_lang, to_lang)
    raise TranslationError(f"Unknown translation provider '{provider}'.")


def get_translator() -> Translator:
    """FastAPI dependency; tests override it with a fake."""
    return translate_text
