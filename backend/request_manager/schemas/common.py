"""Response envelopes shared by every endpoint."""
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, model_serializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Ids are stored as 32-bit signed integers
MAX_ID = 2**31 - 1

# JSON on the wire is camelCase (createdByUserId); Python side stays snake_case.
CAMEL_CASE_CONFIG = {
    "from_attributes": True,
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class Envelope(BaseModel, Generic[T]):
    """``{"success": true, "data": ...}`` wrapper for successful responses.

    ``message`` only appears on the wire when one was set.
    """

    success: bool = True
    message: Optional[str] = None
    data: T

    @model_serializer(mode="wrap")
    def _drop_empty_message(self, handler):
        serialized = handler(self)
        if self.message is None:
            serialized.pop("message", None)
        return serialized


class ErrorEnvelope(BaseModel):
    success: bool = False
    message: str
    status_code: int
    errors: Optional[list[str]] = None

    model_config = CAMEL_CASE_CONFIG

    def to_content(self) -> dict:
        """JSON-ready dict; ``errors`` is only present for payload validation failures."""
        return self.model_dump(by_alias=True, exclude_none=True)
