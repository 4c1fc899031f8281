"""Deterministic rule engines used when the completion provider is unavailable or unusable.

Modules here hold rule tables and pure functions only; markdown formatting
belongs to the tools.
"""
