"""Application use cases."""
from .track_progress import TrackProgressUseCase

__all__ = ['TrackProgressUseCase']
