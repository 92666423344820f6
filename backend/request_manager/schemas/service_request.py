"""Pydantic schemas for ServiceRequests."""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from request_manager.models.service_request import (
    ServiceRequest,
    ServiceRequestPriority,
    ServiceRequestStatus,
)
from request_manager.schemas.common import CAMEL_CASE_CONFIG, MAX_ID


class ServiceRequestCreate(BaseModel):
    title: str = Field(..., min_length=5, max_length=200)
    description: str = Field(..., min_length=10, max_length=2000)
    priority: str  # Low, Medium, High
    created_by_user_id: int = Field(..., ge=1, le=MAX_ID)

    model_config = CAMEL_CASE_CONFIG

    @field_validator("priority")
    @classmethod
    def priority_must_be_known(cls, value: str) -> str:
        if value not in {p.value for p in ServiceRequestPriority}:
            raise ValueError("Priority must be 'Low', 'Medium', or 'High'")
        return value


class ServiceRequestUpdate(BaseModel):
    """Partial update: status, assignee, or both (status is applied first)."""

    status: Optional[str] = None
    assigned_to_user_id: Optional[int] = Field(None, ge=1, le=MAX_ID)

    model_config = CAMEL_CASE_CONFIG

    @field_validator("status")
    @classmethod
    def status_must_be_known(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        if value not in {s.value for s in ServiceRequestStatus}:
            raise ValueError("Status must be 'Open', 'InProgress', 'Resolved', or 'Closed'")
        return value

    @model_validator(mode="after")
    def at_least_one_field(self) -> "ServiceRequestUpdate":
        if self.status is None and self.assigned_to_user_id is None:
            raise ValueError("At least one of Status or AssignedToUserId must be provided")
        return self


class ServiceRequestOut(BaseModel):
    id: int
    title: str
    description: str
    priority: ServiceRequestPriority
    status: ServiceRequestStatus
    created_by_user_id: int
    created_by_user_name: str
    assigned_to_user_id: Optional[int] = None
    assigned_to_user_name: str
    created_at: datetime

    model_config = CAMEL_CASE_CONFIG

    @classmethod
    def from_model(cls, sr: ServiceRequest) -> "ServiceRequestOut":
        """Flatten creator/assignee names; both relationships must already be loaded."""
        return cls(
            id=sr.id,
            title=sr.title,
            description=sr.description,
            priority=sr.priority,
            status=sr.status,
            created_by_user_id=sr.created_by_user_id,
            created_by_user_name=sr.created_by_user.name if sr.created_by_user else "Unknown",
            assigned_to_user_id=sr.assigned_to_user_id,
            assigned_to_user_name=sr.assigned_to_user.name if sr.assigned_to_user else "Unassigned",
            created_at=_as_utc(sr.created_at),
        )


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
