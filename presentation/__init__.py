"""Presentation layer - User interfaces."""
from .cli import ProgressCommand

__all__ = [
    "ProgressCommand",
]
