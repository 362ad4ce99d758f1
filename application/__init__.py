"""Application layer - Services and use cases."""
from .services import MatchAggregator, ProgressEvaluator, WebhookReporter
from .use_cases import TrackProgressUseCase

__all__ = [
    'MatchAggregator',
    'ProgressEvaluator',
    'WebhookReporter',
    'TrackProgressUseCase',
]
