"""
AI Client: OpenAI-compatible chat endpoint
==========================================
Backs the "llm" translation provider. Any server speaking the OpenAI chat
completions API works (MLX `mlx_lm.server`, vLLM, Ollama's /v1, OpenAI):

  mlx_lm.server --model mlx-community/Qwen3-8B-4bit --port 8080
"""

import logging

from openai import OpenAI

from .config import settings

logger = logging.getLogger(__name__)

_client: OpenAI | None = None


def _get_client() -> OpenAI:
    global _client
    if _client is None:
        _client = OpenAI(
            api_key=settings.LLM_API_KEY or "local",
            base_url=settings.LLM_BASE_URL,
            timeout=settings.HTTP_TIMEOUT_S,
        )
    return _client


def chat(
    messages: list[dict],
    model: str = "",
    system: str = "",
    max_tokens: int = 1024,
    temperature: float = 0.0,
) -> str:
    full_messages = []
    if system:
        full_messages.append({"role": "system", "content": system})
    full_messages.extend(messages)

    model = model or settings.LLM_MODEL
    logger.debug("chat completion via %s (%s)", settings.LLM_BASE_URL, model)

    response = _get_client().chat.completions.create(
        model=model,
        messages=full_messages,
        max_tokens=max_tokens,
        temperature=temperature,
    )
    return response.choices[0].message.content or ""


def chat_single(
    prompt: str,
    system: str = "",
    model: str = "",
    max_tokens: int = 1024,
    temperature: float = 0.0,
) -> str:
    """Convenience wrapper for a single user turn."""
    return chat(
        messages=[{"role": "user", "content": prompt}],
        model=model,
        system=system,
        max_tokens=max_tokens,
        temperature=temperature,
    )
