"""Sequential prompt -> image -> 3D model orchestration.

Architectural role:
    Sits between the CLI and the stage services. Each stage gates the next;
    the first exception ends the run.

Control flow:
    1. Prepare the image prompt according to the prompt mode:
       - `optimize`: chat-completion rewrite with the image modifier text,
       - `prefix`: static modifier text prepended to the user prompt,
       - `raw`: user prompt unchanged.
    2. `image.service.generate_image` writes `gen_<name>.png`.
    3. `mesh.service.generate_mesh` uploads that PNG and writes `gen_<name>.glb`.

Error handling strategy:
    Stage services log and re-raise. This module logs one pipeline-level line
    (covering prompt preparation and mode validation too) and re-raises, so
    upstream exceptions arrive at the caller unmodified. A failure in the 3D
    stage leaves the PNG from step 2 on disk.

Side effects:
    Reads modifier text files (mode dependent) and writes two output files.
"""

import logging
import time

import modelgen.config as config
from modelgen.core.result_types import ModelResult, StageTimings
from modelgen.image.service import generate_image
from modelgen.llm.service import optimize_prompt
from modelgen.mesh.service import generate_mesh
from modelgen.prompting.prompt_builder import apply_prefix

logger = logging.getLogger(__name__)


def prepare_image_prompt(prompt: str, mode: str) -> str:
    """Return the text to send to the image endpoint for `mode`."""
    if mode == "optimize":
        modifier = config.load_text(config.IMAGE_MODIFIER_PATH)
        return optimize_prompt(prompt, modifier)
    if mode == "prefix":
        modifier = config.load_text(config.PREFIX_MODIFIER_PATH)
        return apply_prefix(prompt, modifier)
    if mode == "raw":
        return prompt
    raise ValueError(f"Unknown prompt mode: {mode!r} (expected one of {config.PROMPT_MODES})")


def generate_3d_model(prompt: str, mode=None, output_dir=None) -> ModelResult:
    """Run the full pipeline for one prompt.

    Args:
        prompt: User prompt.
        mode: Prompt mode override; defaults to `config.PROMPT_MODE`.
        output_dir: Directory for both artifacts; defaults to `config.OUTPUT_DIR`.

    Returns:
        `ModelResult` with both artifact paths and stage timings.
    """
    mode = mode or config.PROMPT_MODE
    timings = StageTimings()
    start = time.perf_counter()

    try:
        if mode not in config.PROMPT_MODES:
            raise ValueError(f"Unknown prompt mode: {mode!r} (expected one of {config.PROMPT_MODES})")

        image_prompt = prepare_image_prompt(prompt, mode)
        timings.optimize = time.perf_counter() - start

        stage_start = time.perf_counter()
        image_path = generate_image(prompt, image_prompt=image_prompt, output_dir=output_dir)
        timings.image = time.perf_counter() - stage_start

        stage_start = time.perf_counter()
        model_path = generate_mesh(image_path, prompt, output_dir=output_dir)
        timings.model = time.perf_counter() - stage_start
    except Exception:
        logger.exception("Pipeline failed for prompt %r (mode=%s)", prompt, mode)
        raise

    timings.total = time.perf_counter() - start

    logger.info(
        "Elapsed Time - Prompt: %.2fs, Image Generation: %.2fs, "
        "Model Generation: %.2fs, Total: %.2fs",
        timings.optimize,
        timings.image,
        timings.model,
        timings.total,
    )

    return ModelResult(
        prompt=prompt,
        image_prompt=image_prompt,
        image_path=image_path,
        model_path=model_path,
        timings=timings,
    )
