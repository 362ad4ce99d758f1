"""Presentation CLI exports."""
from .progress_command import ProgressCommand

__all__ = [
    "ProgressCommand",
]
