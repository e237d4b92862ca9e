"""Image-generation HTTP client.

Processing flow:
    1. Encode the form fields as multipart/form-data parts.
    2. POST to `config.IMAGE_GENERATION_URL` with bearer auth and
       `Accept: image/*`.
    3. Return the raw image bytes or raise on non-200 status.

Error handling strategy:
    - Non-200 HTTP response -> `ApiResponseError` with status and body text.
    - Transport errors propagate unchanged.

Security considerations:
    - Exceptions may include upstream provider response bodies.
"""

import requests

import modelgen.config as config
from modelgen.errors import ApiResponseError

STAGE = "Image generation"


def send_image_request(fields: dict, api_key: str) -> bytes:
    """Submit an image-generation form and return the binary response body.

    Args:
        fields: Form fields (`prompt`, `output_format`, optional
            `width`/`height`). Values are sent as text parts.
        api_key: Bearer token for the endpoint.

    Returns:
        Raw image bytes.
    """
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Accept": "image/*",
    }
    # (None, value) parts force a multipart body without a file part.
    files = {name: (None, str(value)) for name, value in fields.items()}

    response = requests.post(
        config.IMAGE_GENERATION_URL,
        headers=headers,
        files=files,
        timeout=config.REQUEST_TIMEOUT,
    )

    if response.status_code != 200:
        raise ApiResponseError(STAGE, response.status_code, response.text)

    return response.content
