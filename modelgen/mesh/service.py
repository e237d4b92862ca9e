"""3D stage of the pipeline: image file in, `.glb` file out."""

import logging
import time
from pathlib import Path

import modelgen.config as config
from modelgen.errors import MissingCredentialsError
from modelgen.mesh.client import send_model_request
from modelgen.prompting.prompt_builder import output_path

logger = logging.getLogger(__name__)

MODEL_EXTENSION = "glb"


def build_fields() -> dict:
    return {
        "texture_resolution": config.TEXTURE_RESOLUTION,
        "foreground_ratio": config.FOREGROUND_RATIO,
    }


def generate_mesh(image_path, prompt: str, output_dir=None, api_key=None) -> Path:
    """Reconstruct a 3D model from a generated image and write it to disk.

    Args:
        image_path: Image written by the image stage.
        prompt: User prompt; determines the output filename.
        output_dir: Target directory. Defaults to `config.OUTPUT_DIR`.
        api_key: Optional key override; defaults to the `StabilityAI` credential.

    Returns:
        Absolute path of the written model.

    Failure handling:
        The source image is never removed, including when this stage fails.
    """
    api_key = api_key or config.load_key("StabilityAI")
    if not api_key:
        raise MissingCredentialsError("StabilityAI API key is not configured")

    logger.info("Using generated image: %s", image_path)
    start = time.perf_counter()

    try:
        model_bytes = send_model_request(image_path, build_fields(), api_key)

        path = output_path(prompt, MODEL_EXTENSION, output_dir or config.OUTPUT_DIR)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(model_bytes)
    except Exception:
        logger.exception("Error generating 3D model")
        raise

    elapsed = time.perf_counter() - start
    logger.info("3D model generated successfully at: %s (Elapsed Time: %.2fs)", path, elapsed)
    return path
