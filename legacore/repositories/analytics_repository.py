from legacore.core.filters import FilterSpec, ExactField
from legacore.models.analytics import AnalyticsRecord
from legacore.repositories.base import QueryRepository

ANALYTICS_FILTERS = FilterSpec(
    model=AnalyticsRecord,
    exact_fields={
        "period": ExactField("period"),
        "metric": ExactField("metric_name"),
    },
    ordering=(("recorded_at", "desc"),),
)


class AnalyticsRepository(QueryRepository[AnalyticsRecord]):
    model_class = AnalyticsRecord
    filter_spec = ANALYTICS_FILTERS
