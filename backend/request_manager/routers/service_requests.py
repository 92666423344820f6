"""ServiceRequest API routes, a thin mapping onto service_request_service."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, Request, Response, status
from sqlalchemy.orm import Session

from request_manager.database import get_db
from request_manager.exceptions import (
    ResourceNotFoundError,
    ServiceOperationError,
    ServiceValidationError,
)
from request_manager.models.service_request import ServiceRequestPriority, ServiceRequestStatus
from request_manager.schemas.common import MAX_ID, Envelope
from request_manager.schemas.service_request import (
    ServiceRequestCreate,
    ServiceRequestOut,
    ServiceRequestUpdate,
)
from request_manager.services import service_request_service

logger = logging.getLogger(__name__)
router = APIRouter()


def _parse_status(value: str) -> ServiceRequestStatus:
    try:
        return ServiceRequestStatus(value)
    except ValueError:
        raise ServiceValidationError("Invalid status value")


@router.get("", response_model=Envelope[list[ServiceRequestOut]])
def list_service_requests(
    user_id: Optional[int] = Query(None, alias="userId", le=MAX_ID),
    status_filter: Optional[str] = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    """List requests created by or assigned to ``userId`` and/or with ``status``."""
    status_enum = _parse_status(status_filter) if status_filter else None
    requests = service_request_service.get_service_requests(db, user_id=user_id, status=status_enum)
    return Envelope(data=[ServiceRequestOut.from_model(sr) for sr in requests])


@router.get("/{request_id}", response_model=Envelope[ServiceRequestOut])
def get_service_request_by_id(request_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)):
    """Fetch a single request with creator/assignee names."""
    sr = service_request_service.get_service_request_by_id(db, request_id)
    return Envelope(data=ServiceRequestOut.from_model(sr))


@router.post("", response_model=Envelope[ServiceRequestOut], status_code=status.HTTP_201_CREATED)
def create_service_request(
    payload: ServiceRequestCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    """Open a new request. A missing creator is a bad request here, not a 404."""
    try:
        sr = service_request_service.create_service_request(
            db,
            title=payload.title,
            description=payload.description,
            priority=ServiceRequestPriority(payload.priority),
            created_by_user_id=payload.created_by_user_id,
        )
    except ResourceNotFoundError as exc:
        logger.info("ServiceRequest rejected: creator %s does not exist", payload.created_by_user_id)
        raise ServiceOperationError(exc.message) from exc

    response.headers["Location"] = str(request.url_for("get_service_request_by_id", request_id=sr.id))
    return Envelope(data=ServiceRequestOut.from_model(sr))


@router.put("/{request_id}", response_model=Envelope[ServiceRequestOut])
def update_service_request(
    payload: ServiceRequestUpdate,
    request_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db),
):
    """Update status and/or assignee. Status runs first; the assignment result is returned."""
    logger.info(
        "ServiceRequest %s update requested (status=%s, assignee=%s)",
        request_id, payload.status, payload.assigned_to_user_id,
    )
    sr = None
    if payload.status is not None:
        sr = service_request_service.update_service_request_status(
            db, request_id, ServiceRequestStatus(payload.status)
        )
    if payload.assigned_to_user_id is not None:
        sr = service_request_service.assign_service_request(db, request_id, payload.assigned_to_user_id)

    return Envelope(
        message="Service request updated successfully",
        data=ServiceRequestOut.from_model(sr),
    )
