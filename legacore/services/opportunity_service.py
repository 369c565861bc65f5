import logging
from collections.abc import Mapping
from datetime import datetime, UTC

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from legacore.ai.utils import score_relevance, summarize
from legacore.config import settings
from legacore.core.exceptions import ConflictException
from legacore.core.pagination import PageRequest
from legacore.models.opportunity import ContractOpportunity
from legacore.repositories.opportunity_repository import OpportunityRepository
from legacore.schemas.opportunity_schemas import OpportunityCreate, OpportunityStats

logger = logging.getLogger(__name__)

SUMMARY_LENGTH = 200


class OpportunityService:
    """Service for government contracting opportunities"""

    def __init__(self, db: Session, keywords: list[str] | None = None):
        self.db = db
        self.repo = OpportunityRepository(db)
        self.keywords = keywords if keywords is not None else settings.opportunity_keywords_list

    def list_opportunities(
        self, params: Mapping[str, str]
    ) -> tuple[list[ContractOpportunity], int, PageRequest]:
        """Most relevant first, ties broken by the nearest deadline"""
        return self.repo.find_page(params)

    def get_stats(
        self, params: Mapping[str, str], now: datetime | None = None
    ) -> OpportunityStats:
        total, high_value, urgent, avg_score = self.repo.stats(params, now or datetime.now(UTC))
        return OpportunityStats(
            total=total, high_value=high_value, urgent_deadlines=urgent, avg_score=avg_score
        )

    def create_opportunity(self, data: OpportunityCreate) -> ContractOpportunity:
        """
        Store an opportunity, scoring its description against the keywords.

        Raises:
            ConflictException: If the solicitation number already exists
        """
        if self.repo.get_by_solicitation(data.solicitation):
            raise ConflictException("Opportunity with this solicitation already exists")

        description = data.description or ""
        opportunity = ContractOpportunity(
            **data.model_dump(exclude={"metadata"}),
            extra=data.metadata,
            ai_score=score_relevance(description, self.keywords),
            ai_summary=summarize(description, SUMMARY_LENGTH),
        )
        try:
            opportunity = self.repo.create(opportunity)
        except IntegrityError:
            self.db.rollback()
            raise ConflictException("Opportunity with this solicitation already exists")

        logger.info(
            "Created opportunity %s with score %.1f", opportunity.solicitation, opportunity.ai_score
        )
        return opportunity
