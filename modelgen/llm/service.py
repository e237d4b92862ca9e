"""Prompt optimizer built on the chat-completion client.

Model call flow:
    user prompt + style modifier -> payload construction ->
    `client.send_chat_request(...)` -> first choice text, trimmed.

Token behavior:
    Output length is bounded by `config.CHAT_MAX_TOKENS`; sampling uses the
    fixed `config.CHAT_TEMPERATURE`.

Failure scenarios:
    Missing key -> `MissingCredentialsError`. HTTP and body errors are logged
    once and re-raised unchanged. No retry.
"""

import logging

import modelgen.config as config
from modelgen.errors import ApiResponseError, MissingCredentialsError
from modelgen.llm.client import STAGE, send_chat_request

logger = logging.getLogger(__name__)


def build_payload(prompt: str, modifier: str) -> dict:
    """Build the chat-completion request body for one optimization call."""
    return {
        "model": config.CHAT_MODEL,
        "messages": [
            {"role": "system", "content": modifier},
            {"role": "user", "content": prompt},
        ],
        "max_tokens": config.CHAT_MAX_TOKENS,
        "temperature": config.CHAT_TEMPERATURE,
    }


def extract_content(data) -> str:
    """Return `choices[0].message.content` stripped, or raise on bad shape."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        raise ApiResponseError(STAGE, 200, f"Malformed completion response: {data!r}")

    if not isinstance(content, str):
        raise ApiResponseError(STAGE, 200, f"Malformed completion response: {data!r}")
    return content.strip()


def optimize_prompt(prompt: str, modifier: str, api_key=None) -> str:
    """Rewrite a user prompt into an image-generation prompt.

    Args:
        prompt: Free-text user prompt.
        modifier: Style/system instruction sent as the system message.
        api_key: Optional key override; defaults to the `OpenAI` credential.

    Returns:
        The optimized prompt text.
    """
    api_key = api_key or config.load_key("OpenAI")
    if not api_key:
        raise MissingCredentialsError("OpenAI API key is not configured")

    try:
        data = send_chat_request(build_payload(prompt, modifier), api_key)
        optimized = extract_content(data)
    except Exception:
        logger.exception("Error optimizing prompt")
        raise

    logger.info("Optimized prompt: %s", optimized)
    return optimized
