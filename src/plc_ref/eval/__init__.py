"""Evaluator helper modules for the PLC runtime."""

__all__ = [
    "bind",
    "blocks",
    "chains",
    "common",
    "control",
    "expr",
    "fn",
    "helpers",
    "literals",
    "loops",
]
