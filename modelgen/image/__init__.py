"""Image generation package.

Scope:
    Text-to-image HTTP client and the stage service that persists the result
    as a PNG for the 3D stage.
"""
