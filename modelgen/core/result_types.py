"""Result data contracts for `modelgen.core.pipeline`.

Architectural role:
    Defines the structure returned by `pipeline.generate_3d_model` to CLI
    callers. The data classes are purely structural and state-free.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class StageTimings:
    """Elapsed wall-clock seconds per stage.

    Attributes:
        optimize: Prompt preparation (chat completion in `optimize` mode).
        image: Image generation including the file write.
        model: 3D generation including the file write.
        total: Whole pipeline run.
    """

    optimize: float = 0.0
    image: float = 0.0
    model: float = 0.0
    total: float = 0.0


@dataclass
class ModelResult:
    """Artifacts of one successful pipeline run.

    Attributes:
        prompt: User prompt; source of both output filenames.
        image_prompt: Text sent to the image endpoint.
        image_path: Absolute path of the generated PNG.
        model_path: Absolute path of the generated GLB.
        timings: Per-stage elapsed time.
    """

    prompt: str
    image_prompt: str
    image_path: Path
    model_path: Path
    timings: StageTimings = field(default_factory=StageTimings)
