"""Progress evaluation against per-bucket and total goals."""
from __future__ import annotations

from typing import Mapping, Sequence

from domain.entities import COMPLETE_STATUS, BucketProgress, ProgressBucket, ProgressReport


class ProgressEvaluator:
    """Compares tallied counts with the configured requirements.

    A player is complete only when every bucket and the overall total meet
    their requirement.
    """

    def __init__(self, buckets: Sequence[ProgressBucket], total_requirement: int):
        self.buckets = tuple(sorted(buckets, key=lambda b: b.cutoff_ts))
        self.total_requirement = total_requirement

    def evaluate(self, counts: Mapping[str, int]) -> ProgressReport:
        progress = [BucketProgress(bucket=b, count=counts.get(b.name, 0)) for b in self.buckets]
        report = ProgressReport(
            buckets=progress,
            total=sum(p.count for p in progress),
            total_requirement=self.total_requirement,
        )
        report.status = self.describe(report)
        return report

    def describe(self, report: ProgressReport) -> str:
        if report.complete:
            return COMPLETE_STATUS

        # a lone bucket with an equal total goal would just repeat itself
        if len(report.buckets) == 1 and report.buckets[0].bucket.requirement == report.total_requirement:
            return f"❌ missing {report.total_shortfall}"

        missing = [f"{p.bucket.name} missing {p.shortfall}" for p in report.buckets if not p.met]
        if not report.total_met:
            missing.append(f"total missing {report.total_shortfall}")
        return "❌ " + ", ".join(missing)
