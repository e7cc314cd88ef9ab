"""Per-construct emission helpers for the bash dialect."""

__all__ = [
    "assign",
    "collections",
    "common",
    "control",
    "expand",
    "fn",
    "literals",
    "objects",
    "operators",
    "strings",
]
