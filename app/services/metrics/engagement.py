"""Engagement metrics - how thoroughly a party covers each issue.

Single aggregation pass over all positions: per party, and per issue within
the party. Positions whose thesis is unknown cannot be attributed to an issue
and are left out.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from app.models.metrics import PartyMetrics, PartyMetricsIssue
from app.models.reference import PartyPosition, Thesis
from helpers import formulas
from helpers.dates import age_in_days, to_iso


@dataclass
class _Bucket:
    """Running totals for a party or for one issue of a party."""

    count: int = 0
    total_value: float = 0.0
    total_confidence: float = 0.0
    total_depth: float = 0.0
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    latest: datetime | None = None
    issues: dict[str, "_Bucket"] = field(default_factory=dict)

    def add(self, position: PartyPosition, depth: float, moment: datetime | None) -> None:
        self.count += 1
        self.total_value += position.value
        self.total_confidence += position.confidence
        self.total_depth += depth

        if position.value > 0:
            self.positive += 1
        elif position.value < 0:
            self.negative += 1
        else:
            self.neutral += 1

        if moment is not None and (self.latest is None or moment > self.latest):
            self.latest = moment


def compute_position_depth_score(position: PartyPosition) -> float:
    """Evidentiary richness of a position in [0, 1]."""
    words = formulas.word_count(position.justification)
    evidence = position.details.evidence_units if position.details else 0
    return formulas.depth_score(words, evidence)


def calculate_recency_score(timestamp: datetime | None = None, now: datetime | None = None) -> float:
    """Freshness of a timestamp; unknown recency scores 0.4."""
    if timestamp is None:
        return formulas.recency_score(None)
    return formulas.recency_score(age_in_days(timestamp, now))


def _issue_metrics(
    issue_id: str,
    bucket: _Bucket,
    issue_size: int,
    now: datetime | None,
) -> PartyMetricsIssue:
    avg_confidence = formulas.mean(bucket.total_confidence, bucket.count)
    avg_depth = formulas.mean(bucket.total_depth, bucket.count)
    coverage = formulas.capped_ratio(bucket.count, issue_size)
    recency = calculate_recency_score(bucket.latest, now)

    return PartyMetricsIssue(
        issue_id=issue_id,
        count=bucket.count,
        avg_value=formulas.mean(bucket.total_value, bucket.count),
        avg_confidence=avg_confidence,
        coverage=coverage,
        depth_score=avg_depth,
        recency_score=recency,
        engagement_score=formulas.engagement_index(coverage, avg_depth, avg_confidence, recency),
    )


def calculate_party_metrics(
    positions: Iterable[PartyPosition],
    theses: list[Thesis],
    now: datetime | None = None,
) -> dict[str, PartyMetrics]:
    """Per-party engagement metrics keyed by party id."""
    thesis_by_id = {t.id: t for t in theses}
    total_theses = max(len(theses), 1)
    issue_sizes = Counter(t.issue_id for t in theses)

    buckets: dict[str, _Bucket] = {}
    for position in positions:
        thesis = thesis_by_id.get(position.thesis_id)
        if thesis is None:
            continue

        depth = compute_position_depth_score(position)
        moment = position.resolved_timestamp()

        party = buckets.setdefault(position.party_id, _Bucket())
        party.add(position, depth, moment)
        party.issues.setdefault(thesis.issue_id, _Bucket()).add(position, depth, moment)

    metrics: dict[str, PartyMetrics] = {}
    for party_id, party in buckets.items():
        top_issues = [
            _issue_metrics(issue_id, bucket, issue_sizes.get(issue_id, total_theses), now)
            for issue_id, bucket in party.issues.items()
        ]
        top_issues.sort(key=lambda i: (-i.engagement_score, -i.count, -abs(i.avg_value)))

        metrics[party_id] = PartyMetrics(
            position_count=party.count,
            avg_confidence=formulas.mean(party.total_confidence, party.count),
            coverage_ratio=party.count / total_theses,
            avg_value=formulas.mean(party.total_value, party.count),
            positive_share=formulas.share(party.positive, party.count),
            negative_share=formulas.share(party.negative, party.count),
            neutral_share=formulas.share(party.neutral, party.count),
            top_issues=top_issues,
            latest_update=to_iso(party.latest) if party.latest else None,
        )

    return metrics
