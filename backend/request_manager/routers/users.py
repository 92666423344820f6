"""User API routes."""
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, Request, Response, status
from sqlalchemy.orm import Session

from request_manager.database import get_db
from request_manager.exceptions import ServiceValidationError
from request_manager.models.user import UserRole
from request_manager.schemas.common import MAX_ID, Envelope
from request_manager.schemas.user import UserCreate, UserOut
from request_manager.services import user_service

router = APIRouter()


@router.get("", response_model=Envelope[list[UserOut]])
def list_users(
    role: Optional[str] = Query(None, description="Employee, Support or Manager"),
    db: Session = Depends(get_db),
):
    """List all users, optionally only those with the given role."""
    if not role:
        users = user_service.get_all_users(db)
    else:
        try:
            role_enum = UserRole(role)
        except ValueError:
            raise ServiceValidationError("Invalid role value")
        users = user_service.get_users_by_role(db, role_enum)
    return Envelope(data=[UserOut.model_validate(u) for u in users])


@router.get("/{user_id}", response_model=Envelope[UserOut])
def get_user_by_id(user_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)):
    """Fetch a single user by ID."""
    user = user_service.get_user_by_id(db, user_id)
    return Envelope(data=UserOut.model_validate(user))


@router.post("", response_model=Envelope[UserOut], status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    """Create a user; Location points at the new user's GET route."""
    user = user_service.create_user(db, payload.name, payload.email, UserRole(payload.role))
    response.headers["Location"] = str(request.url_for("get_user_by_id", user_id=user.id))
    return Envelope(data=UserOut.model_validate(user))
