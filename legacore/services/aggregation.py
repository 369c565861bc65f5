"""
Result aggregation: summary statistics derived from query results.
"""

from collections.abc import Iterable

from legacore.models.analytics import AnalyticsRecord
from legacore.schemas.analytics_schemas import MetricAggregate, MetricPoint


def group_metrics(records: Iterable[AnalyticsRecord]) -> list[MetricAggregate]:
    """
    Group metric observations by metric name.

    Groups appear in order of first occurrence and keep their values in
    input order. A group only exists once it has a value, so avg never
    divides by zero.
    """
    groups: dict[str, list[MetricPoint]] = {}
    for record in records:
        point = MetricPoint(period=record.period, value=float(record.metric_value))
        groups.setdefault(record.metric_name, []).append(point)

    aggregates = []
    for name, values in groups.items():
        total = sum(point.value for point in values)
        aggregates.append(
            MetricAggregate(
                name=name, values=values, total=total, avg=total / len(values), count=len(values)
            )
        )
    return aggregates
