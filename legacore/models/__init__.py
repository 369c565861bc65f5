from legacore.models.base import Base
from legacore.models.tenant import Tenant
from legacore.models.user import User
from legacore.models.case import Case
from legacore.models.document import Document
from legacore.models.project import Project
from legacore.models.analytics import AnalyticsRecord
from legacore.models.opportunity import ContractOpportunity
from legacore.models.credit import Credit, CreditTransaction

__all__ = [
    "Base",
    "Tenant",
    "User",
    "Case",
    "Document",
    "Project",
    "AnalyticsRecord",
    "ContractOpportunity",
    "Credit",
    "CreditTransaction",
]
