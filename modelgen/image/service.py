"""Image stage of the pipeline.

Role in pipeline:
    - Receives the prompt chosen by stage A.
    - Builds the form fields and calls `client.send_image_request`.
    - Writes the returned bytes to `gen_<sanitized user prompt>.png`.

File handling:
    - The file is only opened after a successful response, so a failed request
      never leaves a file behind.
    - An existing file with the same derived name is overwritten.

Error handling strategy:
    - Exceptions are logged once and propagated unchanged.
"""

import logging
import time
from pathlib import Path

import modelgen.config as config
from modelgen.errors import MissingCredentialsError
from modelgen.image.client import send_image_request
from modelgen.prompting.prompt_builder import output_path

logger = logging.getLogger(__name__)


def build_fields(image_prompt: str) -> dict:
    """Return the multipart form fields for one generation request."""
    fields = {
        "prompt": image_prompt,
        "output_format": config.IMAGE_OUTPUT_FORMAT,
    }
    if config.IMAGE_WIDTH is not None:
        fields["width"] = config.IMAGE_WIDTH
    if config.IMAGE_HEIGHT is not None:
        fields["height"] = config.IMAGE_HEIGHT
    return fields


def generate_image(prompt: str, image_prompt=None, output_dir=None, api_key=None) -> Path:
    """Generate an image and write it to disk.

    Args:
        prompt: User prompt; determines the output filename.
        image_prompt: Text actually sent to the endpoint. Defaults to `prompt`.
        output_dir: Target directory. Defaults to `config.OUTPUT_DIR`.
        api_key: Optional key override; defaults to the `StabilityAI` credential.

    Returns:
        Absolute path of the written image.
    """
    api_key = api_key or config.load_key("StabilityAI")
    if not api_key:
        raise MissingCredentialsError("StabilityAI API key is not configured")

    if image_prompt is None:
        image_prompt = prompt
    start = time.perf_counter()

    try:
        image_bytes = send_image_request(build_fields(image_prompt), api_key)

        path = output_path(prompt, config.IMAGE_OUTPUT_FORMAT, output_dir or config.OUTPUT_DIR)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(image_bytes)
    except Exception:
        logger.exception("Error generating image")
        raise

    elapsed = time.perf_counter() - start
    logger.info("Image generated successfully at: %s (Elapsed Time: %.2fs)", path, elapsed)
    return path
