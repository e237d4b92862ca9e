"""Prompt optimization package.

Module split:
    - `client`: chat-completion HTTP transport and status handling.
    - `service`: payload construction and response unwrapping.
"""
