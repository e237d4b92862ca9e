"""Core orchestration package.

Composition:
    - `pipeline`: sequential prompt -> image -> 3D model control flow.
    - `result_types`: data classes returned to CLI callers.

Package import is side-effect free.
"""
