"""3D-generation HTTP client.

Uploads a local image as the multipart `image` part together with the fixed
reconstruction fields and returns the binary model asset. Non-200 responses
raise `ApiResponseError`; transport errors propagate unchanged.
"""

import mimetypes
from pathlib import Path

import requests

import modelgen.config as config
from modelgen.errors import ApiResponseError

STAGE = "3D model generation"


def send_model_request(image_path, fields: dict, api_key: str) -> bytes:
    """Stream `image_path` plus `fields` to the 3D endpoint.

    Returns:
        Raw model bytes (GLB).
    """
    image_path = Path(image_path)
    mime = mimetypes.guess_type(image_path.name)[0] or "application/octet-stream"
    headers = {"Authorization": f"Bearer {api_key}"}
    data = {name: str(value) for name, value in fields.items()}

    with open(image_path, "rb") as f:
        response = requests.post(
            config.MODEL_GENERATION_URL,
            headers=headers,
            files={"image": (image_path.name, f, mime)},
            data=data,
            timeout=config.REQUEST_TIMEOUT,
        )

    if response.status_code != 200:
        raise ApiResponseError(STAGE, response.status_code, response.text)

    return response.content
