"""Configuration: process settings and the tracker run configuration."""
from .settings import Settings, TrackerConfig, settings

__all__ = ['Settings', 'TrackerConfig', 'settings']
