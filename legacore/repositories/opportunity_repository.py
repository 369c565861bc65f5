from collections.abc import Mapping
from datetime import datetime, timedelta

from sqlalchemy import case, func, select

from legacore.core.filters import FilterSpec, ExactField, build_filter
from legacore.models.opportunity import ContractOpportunity
from legacore.repositories.base import QueryRepository

HIGH_VALUE_THRESHOLD = 5_000_000
URGENT_WITHIN_DAYS = 30

OPPORTUNITY_FILTERS = FilterSpec(
    model=ContractOpportunity,
    tenant_column=None,
    search_fields=("title", "description", "agency"),
    exact_fields={
        "agency": ExactField("agency"),
        "naicsCode": ExactField("naics_code"),
    },
    min_fields={"minScore": "ai_score"},
    # Most relevant first, then the most urgent deadline
    ordering=(("ai_score", "desc"), ("response_deadline", "asc")),
)


def _count_where(condition):
    return func.coalesce(func.sum(case((condition, 1), else_=0)), 0)


class OpportunityRepository(QueryRepository[ContractOpportunity]):
    """Repository for ContractOpportunity (global, not tenant-scoped)"""

    model_class = ContractOpportunity
    filter_spec = OPPORTUNITY_FILTERS

    def get_by_solicitation(self, solicitation: str) -> ContractOpportunity | None:
        return self.db.scalar(
            select(ContractOpportunity).where(ContractOpportunity.solicitation == solicitation)
        )

    def stats(self, params: Mapping[str, str], now: datetime) -> tuple[int, int, int, float]:
        """
        Headline numbers for the opportunities matching the filters.

        Returns (total, high_value, urgent, avg_score) from a single
        aggregate query. Urgent means the response deadline is still
        ahead but within 30 days.
        """
        predicate = build_filter(self.filter_spec, params, None)
        cutoff = now + timedelta(days=URGENT_WITHIN_DAYS)
        deadline = ContractOpportunity.response_deadline

        total, high_value, urgent, avg_score = self.db.execute(
            select(
                func.count(),
                _count_where(ContractOpportunity.set_value > HIGH_VALUE_THRESHOLD),
                _count_where((deadline >= now) & (deadline < cutoff)),
                func.avg(ContractOpportunity.ai_score),
            )
            .select_from(ContractOpportunity)
            .where(predicate)
        ).one()
        return int(total), int(high_value), int(urgent), float(avg_score or 0.0)
