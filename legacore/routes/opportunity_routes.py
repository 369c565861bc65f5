from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from legacore.core.pagination import Paginated
from legacore.database import get_db
from legacore.dependencies import list_params
from legacore.services.opportunity_service import OpportunityService
from legacore.schemas.opportunity_schemas import (
    OpportunityCreate,
    OpportunityResponse,
    OpportunityStats,
)

router = APIRouter()


@router.get("/", response_model=Paginated[OpportunityResponse])
def list_opportunities(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    """
    List contracting opportunities.

    - Filters: search (title, description, agency), agency, naicsCode, minScore
    - Sorted by relevance score, then nearest response deadline
    """
    opportunities, total, page_request = OpportunityService(db).list_opportunities(params)
    items = [OpportunityResponse.model_validate(o) for o in opportunities]
    return Paginated[OpportunityResponse].create(items, total, page_request)


@router.get("/stats", response_model=OpportunityStats)
def opportunity_stats(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    """Totals over every opportunity matching the list filters"""
    return OpportunityService(db).get_stats(params)


@router.post("/", response_model=OpportunityResponse, status_code=status.HTTP_201_CREATED)
def create_opportunity(opportunity_data: OpportunityCreate, db: Session = Depends(get_db)):
    """
    Store an opportunity.

    - Relevance score and summary are derived from the description
    - Returns 409 if the solicitation number already exists
    """
    return OpportunityService(db).create_opportunity(opportunity_data)
