"""Prompt helpers.

Scope:
    Filename sanitization, output-path derivation, and static prompt prefixes
    shared by the generation stages.
"""
