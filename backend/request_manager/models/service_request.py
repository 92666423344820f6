"""ServiceRequest ORM model."""
import enum
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from request_manager.database import Base, enum_values


class ServiceRequestPriority(str, enum.Enum):
    low = "Low"
    medium = "Medium"
    high = "High"


class ServiceRequestStatus(str, enum.Enum):
    open = "Open"
    in_progress = "InProgress"
    resolved = "Resolved"
    closed = "Closed"


class ServiceRequest(Base):
    __tablename__ = "service_requests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    priority = Column(
        SAEnum(ServiceRequestPriority, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
    )
    status = Column(
        SAEnum(ServiceRequestStatus, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        default=ServiceRequestStatus.open,
    )
    created_by_user_id = Column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    assigned_to_user_id = Column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    created_by_user = relationship("User", foreign_keys=[created_by_user_id])
    assigned_to_user = relationship("User", foreign_keys=[assigned_to_user_id])
