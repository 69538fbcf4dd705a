"""History aggregation: time-range filtering, chart series, stat cards and insights."""
import calendar
import logging
import math
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Optional

from medpredict.config import settings
from medpredict.models import (
    ChartSeries,
    HealthCheck,
    RiskSummary,
    TimeRange,
    TrendReport,
    TrendStats,
)

logger = logging.getLogger(__name__)

RISK_LEVELS = ("low", "medium", "high")


def _aware(ts: datetime) -> datetime:
    """Naive timestamps are taken as UTC."""
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=timezone.utc)


def _shift_months(ts: datetime, months: int) -> datetime:
    """Move `ts` back by `months` calendar months, clamping the day to the target month."""
    total = ts.year * 12 + (ts.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    day = min(ts.day, calendar.monthrange(year, month)[1])
    return ts.replace(year=year, month=month, day=day)


def range_start(time_range: TimeRange, now: datetime) -> datetime:
    if time_range == "week":
        return now - timedelta(days=7)
    if time_range == "month":
        return _shift_months(now, 1)
    if time_range == "year":
        return _shift_months(now, 12)
    raise ValueError(f"Unknown time range '{time_range}'. Use week, month or year.")


def filter_by_range(
    checks: list[HealthCheck],
    time_range: TimeRange,
    now: Optional[datetime] = None,
) -> list[HealthCheck]:
    """Checks on or after the start of the range, order preserved."""
    now = _aware(now or datetime.now(timezone.utc))
    start = range_start(time_range, now)
    return [c for c in checks if _aware(c.timestamp) >= start]


def _label(ts: datetime, time_range: TimeRange) -> str:
    if time_range == "week":
        return ts.strftime("%a")
    if time_range == "month":
        return f"{ts:%b} {ts.day}"
    return ts.strftime("%b %Y")


def checks_over_time(checks: list[HealthCheck], time_range: TimeRange) -> ChartSeries:
    counts = Counter(_label(_aware(c.timestamp), time_range) for c in checks)
    labels = sorted(counts)
    return ChartSeries(labels=labels, values=[counts[l] for l in labels])


def common_symptoms(checks: list[HealthCheck], top_k: Optional[int] = None) -> ChartSeries:
    """Most frequent entered symptoms; ties keep first-seen order."""
    counts = Counter(s for c in checks for s in c.symptoms)
    top = counts.most_common(top_k or settings.top_symptoms)
    return ChartSeries(labels=[s for s, _ in top], values=[n for _, n in top])


def risk_distribution(checks: list[HealthCheck]) -> ChartSeries:
    """Severity counts over every prediction (not every check)."""
    counts = Counter(p.severity for c in checks for p in c.predictions)
    return ChartSeries(
        labels=["Low Risk", "Medium Risk", "High Risk"],
        values=[counts[level] for level in RISK_LEVELS],
    )


def _has_severity(check: HealthCheck, level: str) -> bool:
    return any(p.severity == level for p in check.predictions)


def risk_summary(checks: list[HealthCheck]) -> RiskSummary:
    """Number of checks with at least one prediction at each severity."""
    return RiskSummary(
        total=len(checks),
        **{level: sum(1 for c in checks if _has_severity(c, level)) for level in RISK_LEVELS},
    )


def _round(x: float) -> int:
    return int(math.floor(x + 0.5))


def trend_stats(checks: list[HealthCheck], now: Optional[datetime] = None) -> TrendStats:
    now = _aware(now or datetime.now(timezone.utc))
    total = len(checks)
    avg = _round(sum(len(c.symptoms) for c in checks) / total) if total else 0
    days = _round((now - _aware(checks[0].timestamp)).total_seconds() / 86400) if total else 0
    return TrendStats(
        total_checks=total,
        avg_symptoms=avg,
        high_risk_checks=sum(1 for c in checks if _has_severity(c, "high")),
        days_since_last_check=days,
    )


def insights(checks: list[HealthCheck]) -> list[str]:
    total = len(checks)

    frequency = f"You've performed {total} health checks in the selected period."
    if total:
        frequency += " Great health monitoring!" if total > 5 else " Consider regular check-ins."

    high = sum(1 for c in checks if _has_severity(c, "high"))
    pct = _round(high / total * 100) if total else 0
    if pct < 20:
        risk = f"{pct}% high-risk predictions. Excellent health awareness!"
    elif pct < 50:
        risk = f"{pct}% high-risk predictions. Monitor symptoms closely."
    else:
        risk = f"{pct}% high-risk predictions. Consider consulting healthcare providers."

    entered = [s for c in checks for s in c.symptoms]
    if len(entered) > len(set(entered)):
        pattern = "Some symptoms are recurring. Track patterns for better insights."
    else:
        pattern = "Diverse symptom reporting. Good comprehensive health monitoring."

    return [frequency, risk, pattern]


def build_trend_report(
    checks: list[HealthCheck],
    time_range: TimeRange = "week",
    now: Optional[datetime] = None,
) -> TrendReport:
    """Everything the trends view needs for one time range."""
    now = _aware(now or datetime.now(timezone.utc))
    in_range = filter_by_range(checks, time_range, now)
    logger.debug(f"Trend report ({time_range}): {len(in_range)}/{len(checks)} checks in range")
    return TrendReport(
        range=time_range,
        stats=trend_stats(in_range, now),
        checks_over_time=checks_over_time(in_range, time_range),
        risk_distribution=risk_distribution(in_range),
        common_symptoms=common_symptoms(in_range),
        insights=insights(in_range),
    )
