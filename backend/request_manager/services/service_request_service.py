"""Service-request service: the request/assignment lifecycle.

Responsibilities:
- Id validation (> 0) and not-found checks for requests and referenced users
- Creation with status Open and a UTC timestamp
- Unconditional status overwrite (no transition rules)
- Assignment to an existing user, with no write when the user is missing
- Explicit eager loading of creator/assignee for every read
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session, joinedload

from request_manager.exceptions import ResourceNotFoundError, ServiceValidationError
from request_manager.models.service_request import (
    ServiceRequest,
    ServiceRequestPriority,
    ServiceRequestStatus,
)
from request_manager.models.user import User

logger = logging.getLogger(__name__)


def _query_with_users(db: Session) -> Query:
    """Base query with creator and assignee joined in the same SELECT."""
    return db.query(ServiceRequest).options(
        joinedload(ServiceRequest.created_by_user),
        joinedload(ServiceRequest.assigned_to_user),
    )


def _check_request_id(request_id: int) -> None:
    if request_id <= 0:
        raise ServiceValidationError("Service Request ID must be greater than 0")


def _check_user_id(user_id: int) -> None:
    if user_id <= 0:
        raise ServiceValidationError("User ID must be greater than 0")


def _involving_user(query: Query, user_id: int) -> Query:
    return query.filter(
        or_(
            ServiceRequest.created_by_user_id == user_id,
            ServiceRequest.assigned_to_user_id == user_id,
        )
    )


def _load_for_update(db: Session, request_id: int) -> ServiceRequest:
    request = db.get(ServiceRequest, request_id)
    if not request:
        raise ResourceNotFoundError(f"Service request with ID {request_id} not found")
    return request


def get_all_service_requests(db: Session) -> list[ServiceRequest]:
    return _query_with_users(db).order_by(ServiceRequest.id).all()


def get_service_request_by_id(db: Session, request_id: int) -> ServiceRequest:
    _check_request_id(request_id)

    request = _query_with_users(db).filter(ServiceRequest.id == request_id).first()
    if not request:
        raise ResourceNotFoundError(f"Service request with ID {request_id} not found")
    return request


def get_service_requests_by_user(db: Session, user_id: int) -> list[ServiceRequest]:
    """Requests the user created or is assigned to."""
    _check_user_id(user_id)
    return _involving_user(_query_with_users(db), user_id).order_by(ServiceRequest.id).all()


def get_service_requests_by_status(db: Session, status: ServiceRequestStatus) -> list[ServiceRequest]:
    return (
        _query_with_users(db)
        .filter(ServiceRequest.status == status)
        .order_by(ServiceRequest.id)
        .all()
    )


def get_service_requests(
    db: Session,
    user_id: Optional[int] = None,
    status: Optional[ServiceRequestStatus] = None,
) -> list[ServiceRequest]:
    """List requests, optionally narrowed by user (creator or assignee) AND status."""
    query = _query_with_users(db)
    if user_id is not None:
        _check_user_id(user_id)
        query = _involving_user(query, user_id)
    if status is not None:
        query = query.filter(ServiceRequest.status == status)
    return query.order_by(ServiceRequest.id).all()


def create_service_request(
    db: Session,
    title: str,
    description: str,
    priority: ServiceRequestPriority,
    created_by_user_id: int,
) -> ServiceRequest:
    """Open a new request on behalf of an existing user."""
    if not title or not title.strip():
        raise ServiceValidationError("Title cannot be empty")
    if not description or not description.strip():
        raise ServiceValidationError("Description cannot be empty")
    if created_by_user_id <= 0:
        raise ServiceValidationError("CreatedByUserId must be greater than 0")

    creator = db.get(User, created_by_user_id)
    if not creator:
        raise ResourceNotFoundError(f"User with ID {created_by_user_id} not found")

    request = ServiceRequest(
        title=title,
        description=description,
        priority=priority,
        status=ServiceRequestStatus.open,
        created_by_user_id=created_by_user_id,
        created_at=datetime.now(timezone.utc),
    )
    db.add(request)
    db.commit()
    logger.info("Created service request %s '%s' by user %s", request.id, title, created_by_user_id)
    return get_service_request_by_id(db, request.id)


def update_service_request_status(
    db: Session,
    request_id: int,
    status: ServiceRequestStatus,
) -> ServiceRequest:
    """Overwrite the status; any status may follow any other."""
    _check_request_id(request_id)

    request = _load_for_update(db, request_id)
    previous = request.status
    request.status = status
    db.commit()
    logger.info("Service request %s status %s -> %s", request_id, previous.value, status.value)
    return get_service_request_by_id(db, request_id)


def assign_service_request(
    db: Session,
    request_id: int,
    assigned_to_user_id: int,
) -> ServiceRequest:
    """Assign a request to a user; nothing is written unless both exist."""
    _check_request_id(request_id)
    if assigned_to_user_id <= 0:
        raise ServiceValidationError("AssignedToUserId must be greater than 0")

    request = _load_for_update(db, request_id)
    assignee = db.get(User, assigned_to_user_id)
    if not assignee:
        raise ResourceNotFoundError(f"User with ID {assigned_to_user_id} not found")

    request.assigned_to_user_id = assigned_to_user_id
    db.commit()
    logger.info("Service request %s assigned to user %s", request_id, assigned_to_user_id)
    return get_service_request_by_id(db, request_id)
