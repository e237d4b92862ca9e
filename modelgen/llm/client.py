"""Chat-completion transport client.

Architectural role:
    Executes the HTTP request against the configured OpenAI-compatible
    chat-completion endpoint and returns the decoded JSON body.

Invocation flow:
    `service.optimize_prompt` -> `send_chat_request(payload, api_key)` ->
    decoded response dict.

Retry behavior:
    No retry loop is implemented. Each call is attempted once with
    `config.REQUEST_TIMEOUT`.

Failure handling model:
    - Non-200 status -> `ApiResponseError` carrying the provider error message
      (`error.message`) when the body has one, else the raw body text.
    - Undecodable 200 body -> `ApiResponseError`.
    - Transport errors propagate unchanged.
"""

import requests

import modelgen.config as config
from modelgen.errors import ApiResponseError

STAGE = "Prompt optimization"


def _error_message(response) -> str:
    """Extract `error.message` from an error body, falling back to raw text."""
    try:
        data = response.json()
    except ValueError:
        return response.text

    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return response.text or "Unknown error occurred"


def send_chat_request(payload: dict, api_key: str) -> dict:
    """POST a chat-completion payload and return the decoded JSON body.

    Args:
        payload: OpenAI-style request body (`model`, `messages`, sampling).
        api_key: Bearer token for the endpoint.

    Returns:
        Parsed JSON response.
    """
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    response = requests.post(
        config.CHAT_COMPLETIONS_URL,
        headers=headers,
        json=payload,
        timeout=config.REQUEST_TIMEOUT,
    )

    if response.status_code != 200:
        raise ApiResponseError(STAGE, response.status_code, _error_message(response))

    try:
        return response.json()
    except ValueError:
        raise ApiResponseError(STAGE, response.status_code, response.text)
