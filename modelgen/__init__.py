"""Prompt-to-3D model generator.

Chains a chat-completion prompt optimizer, an image-generation endpoint and a
3D-generation endpoint into one sequential pipeline (`modelgen.core.pipeline`).
"""

__version__ = "0.1.0"
