# imageupload/schemas/common/common.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Generic, List, Optional, TypeVar
from datetime import datetime

T = TypeVar("T")

__all__ = ["CamelModel", "ApiResponse", "HealthStatus"]


class CamelModel(BaseModel):
    """Base for API payloads: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str = ""
    data: Optional[T] = None
    errors: List[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, data: Optional[T] = None, message: str = "Success") -> "ApiResponse[T]":
        return cls(success=True, message=message, data=data, errors=[])


class HealthStatus(CamelModel):
    status: str
    service: str
    version: str
    timestamp: datetime
    image_storage: str
    max_images_per_customer: int
    database_error: Optional[str] = None
