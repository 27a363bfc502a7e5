"""Poll trend statistics - pure functions over poll snapshots."""

from calendar import monthrange
from collections.abc import Iterable
from datetime import datetime, timezone

from app.models.polls import Poll, PollAverage, TrendHighlight

ALL_AGENCIES = "ALL"
TIMEFRAME_MONTHS = 2
MIN_TIMELINE_POINTS = 6
HIGHLIGHTS_LIMIT = 6

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def newest_first(polls: Iterable[Poll]) -> list[Poll]:
    """Sort polls by date, newest first; undated polls go last."""
    return sorted(polls, key=lambda p: p.moment or _EPOCH, reverse=True)


def agencies(polls: Iterable[Poll]) -> list[str]:
    """Distinct agencies in first-seen order."""
    return list(dict.fromkeys(p.agency for p in polls))


def filter_by_agency(polls: Iterable[Poll], agency: str = ALL_AGENCIES) -> list[Poll]:
    if agency == ALL_AGENCIES:
        return list(polls)
    return [p for p in polls if p.agency == agency]


def months_before(moment: datetime, months: int) -> datetime:
    """Same day `months` calendar months earlier, clamped to the month length."""
    year, month = divmod(moment.year * 12 + moment.month - 1 - months, 12)
    day = min(moment.day, monthrange(year, month + 1)[1])
    return moment.replace(year=year, month=month + 1, day=day)


def timeframe(
    polls: Iterable[Poll],
    months: int = TIMEFRAME_MONTHS,
    min_points: int = MIN_TIMELINE_POINTS,
) -> list[Poll]:
    """Polls from the last `months` before the newest one, oldest first.

    Falls back to the newest `min_points` polls when the window is empty.
    """
    ordered = newest_first(polls)
    if not ordered:
        return []

    latest = ordered[0].moment
    if latest is None:
        return list(reversed(ordered))

    start = months_before(latest, months)
    windowed = [p for p in ordered if p.moment is not None and p.moment >= start]
    chosen = windowed or ordered[:min_points]
    return list(reversed(chosen))


def timeframe_averages(polls: list[Poll], party_ids: Iterable[str] | None = None) -> list[PollAverage]:
    """Average, first-to-last change and sample count per party, highest average first.

    Expects polls oldest first; unmeasured results are ignored.
    """
    selected = set(party_ids) if party_ids is not None else None
    stats: dict[str, dict] = {}

    for poll in polls:
        for result in poll.results:
            if result.percentage is None:
                continue
            entry = stats.setdefault(result.party_id, {"sum": 0.0, "first": None, "last": None, "count": 0})
            entry["sum"] += result.percentage
            if entry["first"] is None:
                entry["first"] = result.percentage
            entry["last"] = result.percentage
            entry["count"] += 1

    averages = [
        PollAverage(
            party_id=party_id,
            average=entry["sum"] / entry["count"],
            change=entry["last"] - entry["first"],
            samples=entry["count"],
        )
        for party_id, entry in stats.items()
        if selected is None or party_id in selected
    ]
    return sorted(averages, key=lambda a: a.average, reverse=True)


def trend_highlights(
    polls: list[Poll],
    party_ids: Iterable[str] | None = None,
    limit: int = HIGHLIGHTS_LIMIT,
) -> list[TrendHighlight]:
    """Largest movements between the earliest and latest poll of a timeframe."""
    if len(polls) < 2:
        return []

    selected = set(party_ids) if party_ids is not None else None
    earliest, latest = polls[0], polls[-1]

    highlights = []
    for result in latest.results:
        before = earliest.percentage(result.party_id)
        if result.percentage is None or before is None:
            continue
        if selected is not None and result.party_id not in selected:
            continue
        highlights.append(
            TrendHighlight(
                party_id=result.party_id,
                diff=result.percentage - before,
                latest=result.percentage,
                earliest=before,
            )
        )

    return sorted(highlights, key=lambda h: abs(h.diff), reverse=True)[:limit]


def series(polls: list[Poll], party_id: str) -> list[float | None]:
    """Percentages of one party across polls; None where it was not measured."""
    return [p.percentage(party_id) for p in polls]


def party_ids(polls: Iterable[Poll]) -> list[str]:
    """Every party that appears in any poll, first-seen order."""
    return list(dict.fromkeys(r.party_id for p in polls for r in p.results))
