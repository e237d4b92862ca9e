"""Prompt and output-name helpers used by the generation stages.

This module is intentionally narrow: it only derives strings and paths from
already-chosen inputs. Endpoint calls and file writes happen elsewhere.

Design constraints:
    - Deterministic construction for identical inputs.
    - No hidden side effects (no I/O, no global state mutation).

Naming model:
    Output files are named after the user prompt, not the optimized prompt.
    Identical prompts map to identical names, so a later run overwrites the
    files of an earlier one. No uniqueness suffix is added.
"""

import re
from pathlib import Path


FILENAME_MAX_LENGTH = 20
OUTPUT_PREFIX = "gen_"

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9]")


def sanitize_filename(text: str) -> str:
    """Derive a filesystem-safe stem from free text.

    Surrounding whitespace is stripped, every character outside
    `[a-zA-Z0-9]` becomes `_`, and the result is cut to 20 characters.

    Edge cases:
        - Empty or whitespace-only input yields an empty string.
        - Non-ASCII letters are replaced like any other symbol.
    """
    return _UNSAFE_CHARS.sub("_", text.strip())[:FILENAME_MAX_LENGTH]


def output_path(prompt: str, extension: str, output_dir) -> Path:
    """Build the absolute output path `gen_<sanitized prompt>.<extension>`."""
    filename = f"{OUTPUT_PREFIX}{sanitize_filename(prompt)}.{extension.lstrip('.')}"
    return (Path(output_dir) / filename).resolve()


def apply_prefix(prompt: str, modifier: str) -> str:
    """Prepend a static style modifier to the prompt.

    The modifier is used verbatim apart from trailing whitespace; a single
    space separates it from the prompt. An empty modifier returns the prompt
    unchanged.
    """
    modifier = (modifier or "").rstrip()
    if not modifier:
        return prompt
    return f"{modifier} {prompt}"
