from sqlalchemy import select
from sqlalchemy.orm import selectinload

from legacore.core.filters import FilterSpec, ExactField
from legacore.models.enums import UserRole
from legacore.models.user import User
from legacore.repositories.base import QueryRepository

USER_FILTERS = FilterSpec(
    model=User,
    tenant_column=None,
    search_fields=("email", "name"),
    exact_fields={
        "role": ExactField("role", enum=UserRole),
        "companyId": ExactField("tenant_id", as_int=True),
    },
)


class UserRepository(QueryRepository[User]):
    """Repository for User model operations"""

    model_class = User
    filter_spec = USER_FILTERS

    def find_page(self, params, tenant_id=None, options=()):
        return super().find_page(params, tenant_id, options or (selectinload(User.tenant),))

    def get_by_email(self, email: str) -> User | None:
        return self.db.scalar(select(User).where(User.email == email))
