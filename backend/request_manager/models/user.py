"""User ORM model."""
import enum
from sqlalchemy import Column, Integer, String, Enum as SAEnum
from request_manager.database import Base, enum_values


class UserRole(str, enum.Enum):
    employee = "Employee"
    support = "Support"
    manager = "Manager"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    role = Column(
        SAEnum(UserRole, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
    )
