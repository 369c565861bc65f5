import logging
from collections.abc import Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from legacore.core.exceptions import NotFoundException, ConflictException
from legacore.core.pagination import PageRequest
from legacore.core.security import hash_password
from legacore.models.user import User
from legacore.repositories.tenant_repository import TenantRepository
from legacore.repositories.user_repository import UserRepository
from legacore.schemas.user_schemas import UserCreate

logger = logging.getLogger(__name__)


class UserService:
    """Service for platform user administration"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository(db)
        self.tenant_repo = TenantRepository(db)

    def list_users(self, params: Mapping[str, str]) -> tuple[list[User], int, PageRequest]:
        """List users across companies (filterable by companyId, role, search)"""
        return self.repo.find_page(params)

    def create_user(self, data: UserCreate) -> User:
        """
        Create a user in an existing company.

        Raises:
            ConflictException: If the email is already registered
            NotFoundException: If the company doesn't exist
        """
        if self.repo.get_by_email(data.email):
            raise ConflictException("User with this email already exists")

        if not self.tenant_repo.get_by_id(data.company_id):
            raise NotFoundException("Company not found")

        password_hash, salt = hash_password(data.password)
        user = User(
            email=data.email,
            password_hash=password_hash,
            salt=salt,
            name=data.name,
            role=data.role,
            active=data.active,
            tenant_id=data.company_id,
        )
        try:
            user = self.repo.create(user)
        except IntegrityError:
            self.db.rollback()
            raise ConflictException("User with this email already exists")

        logger.info("Created user id=%s in company id=%s", user.id, user.tenant_id)
        return user
