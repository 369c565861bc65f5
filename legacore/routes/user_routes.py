from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from legacore.core.pagination import Paginated
from legacore.database import get_db
from legacore.dependencies import list_params
from legacore.services.user_service import UserService
from legacore.schemas.user_schemas import UserCreate, UserResponse

router = APIRouter()


@router.get("/", response_model=Paginated[UserResponse])
def list_users(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    """
    List users across companies.

    - Filters: search (email, name), role, companyId
    - Password hash and salt are never returned
    """
    users, total, page_request = UserService(db).list_users(params)
    items = [UserResponse.model_validate(user) for user in users]
    return Paginated[UserResponse].create(items, total, page_request)


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """
    Create a user in a company.

    - Returns 409 if the email is taken, 404 if the company doesn't exist
    """
    return UserService(db).create_user(user_data)
