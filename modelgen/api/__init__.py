"""Command-line adapter package.

Scope:
- Argument parsing, console logging setup, and result printing.
- No generation logic is implemented in this package.
"""
