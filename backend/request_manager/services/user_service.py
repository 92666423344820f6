"""User lookups and creation with input validation."""
import logging

from sqlalchemy.orm import Session

from request_manager.exceptions import ResourceNotFoundError, ServiceValidationError
from request_manager.models.user import User, UserRole

logger = logging.getLogger(__name__)


def get_all_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()


def get_user_by_id(db: Session, user_id: int) -> User:
    """Fetch a user; rejects non-positive ids before touching the database."""
    if user_id <= 0:
        raise ServiceValidationError("User ID must be greater than 0")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise ResourceNotFoundError(f"User with ID {user_id} not found")
    return user


def get_users_by_role(db: Session, role: UserRole) -> list[User]:
    return db.query(User).filter(User.role == role).order_by(User.id).all()


def create_user(db: Session, name: str, email: str, role: UserRole) -> User:
    if not name or not name.strip():
        raise ServiceValidationError("Name cannot be empty")
    if not email or not email.strip():
        raise ServiceValidationError("Email cannot be empty")

    user = User(name=name, email=email, role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created user %s (%s, %s)", user.id, user.name, user.role.value)
    return user
