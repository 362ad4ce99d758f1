"""Application services root exports."""
from .match_aggregator import MatchAggregator, MatchTally, assign_bucket, classify_match
from .progress_evaluator import ProgressEvaluator
from .summary_reporter import WebhookReporter

__all__ = [
    "MatchAggregator",
    "MatchTally",
    "assign_bucket",
    "classify_match",
    "ProgressEvaluator",
    "WebhookReporter",
]
