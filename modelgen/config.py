"""Runtime configuration for the prompt-to-3D pipeline.

Architectural role:
    Centralizes endpoint selection, fixed generation parameters, and credential
    lookup for `modelgen.llm`, `modelgen.image`, `modelgen.mesh`, and the
    orchestration layer in `modelgen.core.pipeline`.

Stage integration:
    - `llm.service.optimize_prompt` consumes `CHAT_*` values.
    - `image.service.generate_image` consumes `IMAGE_*` values.
    - `mesh.service.generate_mesh` consumes `TEXTURE_RESOLUTION` and
      `FOREGROUND_RATIO`.
    - Every HTTP client consumes `REQUEST_TIMEOUT` and `load_key`.

Determinism:
    Deterministic for a fixed process environment and credentials file. Values
    are resolved at import time; `load_key` and `load_text` read the filesystem
    on every call.

Failure behavior:
    Missing key material is represented as `None`; callers raise
    `MissingCredentialsError`. Missing modifier files raise `FileNotFoundError`.
"""

import json
import os

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name):
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return int(value)


# Endpoints
CHAT_COMPLETIONS_URL = os.getenv(
    "CHAT_COMPLETIONS_URL", "https://api.openai.com/v1/chat/completions"
)
IMAGE_GENERATION_URL = os.getenv(
    "IMAGE_GENERATION_URL",
    "https://api.stability.ai/v2beta/stable-image/generate/core",
)
MODEL_GENERATION_URL = os.getenv(
    "MODEL_GENERATION_URL", "https://api.stability.ai/v2beta/3d/stable-fast-3d"
)

# Prompt optimization (chat completion) sampling.
CHAT_MODEL = os.getenv("CHAT_MODEL", "gpt-4")
CHAT_MAX_TOKENS = 100
CHAT_TEMPERATURE = 0.7

# Image generation form fields. Width/height are sent only when configured.
IMAGE_OUTPUT_FORMAT = "png"
IMAGE_WIDTH = _optional_int("IMAGE_WIDTH")
IMAGE_HEIGHT = _optional_int("IMAGE_HEIGHT")

# 3D generation form fields.
TEXTURE_RESOLUTION = "512"
FOREGROUND_RATIO = "0.7"

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "120"))

# Stage A variant: "optimize" (chat completion), "prefix" (static modifier
# prepended to the prompt) or "raw" (prompt forwarded unchanged).
PROMPT_MODES = ("optimize", "prefix", "raw")
PROMPT_MODE = os.getenv("PROMPT_MODE", "optimize")

API_KEYS_PATH = os.getenv("API_KEYS_PATH", "config/apiKeys.json")
IMAGE_MODIFIER_PATH = os.getenv(
    "IMAGE_MODIFIER_PATH", "config/promptModifier_ImageGenerator.txt"
)
PREFIX_MODIFIER_PATH = os.getenv(
    "PREFIX_MODIFIER_PATH", "config/promptModifier_Prefix.txt"
)

OUTPUT_DIR = os.getenv("OUTPUT_DIR") or os.getcwd()

DEFAULT_PROMPT = (
    "a friendly squirrel with a yellow hat and red sunglasses. "
    "it smiles nicely and is very (!!!) cute."
)

# Credentials file entry -> environment override.
KEY_ENV_VARS = {
    "OpenAI": "OPENAI_API_KEY",
    "StabilityAI": "STABILITY_API_KEY",
}


def load_key(name, path=None):
    """Load an API key from environment override or the JSON credentials file.

    Resolution order:
        1. Environment variable mapped in `KEY_ENV_VARS` (for example
           `OpenAI` -> `OPENAI_API_KEY`).
        2. Entry `name` of the JSON object stored at `path`
           (default `API_KEYS_PATH`).

    Args:
        name: Credentials entry name (`OpenAI` or `StabilityAI`).
        path: Optional credentials file override.

    Returns:
        Key string or `None` when not available.

    Edge cases:
        - Missing file returns `None`.
        - Empty or whitespace-only values return `None`.
        - A file whose top-level JSON value is not an object returns `None`.
        - Malformed JSON raises `json.JSONDecodeError` unchanged.
    """
    env_name = KEY_ENV_VARS.get(name)
    if env_name:
        env_value = os.getenv(env_name)
        if env_value and env_value.strip():
            return env_value.strip()

    path = path or API_KEYS_PATH
    if not os.path.exists(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        keys = json.load(f)

    if not isinstance(keys, dict):
        return None

    value = keys.get(name)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def load_text(path):
    """Read a prompt-modifier text file as UTF-8."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
