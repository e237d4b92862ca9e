"""
Command-line entrypoint for the prompt-to-3D pipeline.

Architectural role:
- Exposes a single terminal command over `modelgen.core.pipeline`.
- Configures console logging for stage progress and elapsed times.

Interface:
- One optional positional argument: the prompt. No other flags.
- Without an argument, `config.DEFAULT_PROMPT` is used.

Error handling strategy:
- Pipeline failures are logged with their stack trace.
- The process exits normally after a failure; no distinct exit code is set.

Side effects:
- Writes `gen_<name>.png` and `gen_<name>.glb` to the output directory.
- Writes progress and errors to the console.
"""

from dotenv import load_dotenv

load_dotenv()

import argparse
import logging
import sys

import modelgen.config as config
from modelgen.core.pipeline import generate_3d_model

logger = logging.getLogger(__name__)


# =========================================================
# UTF-8 SAFE OUTPUT
# Best-effort stdout encoding normalization for prompts with non-ASCII text.
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
    except Exception:
        pass


def build_parser():
    parser = argparse.ArgumentParser(
        prog="modelgen",
        description="Generate a PNG and a GLB 3D model from a text prompt",
    )
    parser.add_argument(
        "prompt",
        nargs="?",
        default=None,
        help="Text prompt (a built-in example prompt is used when omitted)",
    )
    return parser


# =========================================================
# MAIN
# =========================================================

def main(argv=None):
    """
    Run one pipeline invocation.

    Returns:
    - `ModelResult` on success.
    - `None` when the pipeline raised (the error is logged).
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    prompt = args.prompt or config.DEFAULT_PROMPT

    try:
        result = generate_3d_model(prompt)
    except Exception:
        logger.exception("Failed to generate 3D model")
        return None

    print(f"3D Model saved at: {result.model_path}")
    return result


if __name__ == "__main__":
    main()
