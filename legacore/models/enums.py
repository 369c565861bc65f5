"""Closed value sets shared by models, schemas and filters."""

from enum import Enum as PyEnum


class UserRole(str, PyEnum):
    """
    Platform user roles.

    - ADMIN - manages the company and its users
    - MANAGER - manages cases, documents and projects
    - USER - day-to-day access
    """

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    USER = "USER"


class CaseStatus(str, PyEnum):
    """
    Case lifecycle. Usually OPEN -> IN_PROGRESS/PENDING -> CLOSED/ARCHIVED,
    but any transition is permitted.
    """

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    PENDING = "PENDING"
    CLOSED = "CLOSED"
    ARCHIVED = "ARCHIVED"


class DocumentType(str, PyEnum):
    CONTRACT = "CONTRACT"
    INVOICE = "INVOICE"
    REPORT = "REPORT"
    LEGAL = "LEGAL"
    FINANCIAL = "FINANCIAL"
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    OTHER = "OTHER"


class CreditTransactionType(str, PyEnum):
    PURCHASE = "PURCHASE"
    USAGE = "USAGE"
