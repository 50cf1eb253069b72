# imageupload_web/models.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Generic, List, Optional, TypeVar
from datetime import datetime

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ApiResponse(BaseModel, Generic[T]):
    success: bool = False
    message: str = ""
    data: Optional[T] = None
    errors: List[str] = Field(default_factory=list)

    @classmethod
    def success_result(cls, data: Optional[T] = None, message: str = "Success") -> "ApiResponse[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def error_result(cls, message: str, errors: Optional[List[str]] = None) -> "ApiResponse[T]":
        return cls(success=False, message=message, errors=list(errors or []))


class CustomerImage(CamelModel):
    id: int
    customer_id: int
    file_name: str
    content_type: str
    file_size_bytes: int
    uploaded_at: datetime
    description: Optional[str] = None
    storage_encoding: Optional[str] = None
    file_url: Optional[str] = None
    base64_data: Optional[str] = None

    @property
    def display_src(self) -> Optional[str]:
        """Value usable as an <img src>: a data URL for inline images, else the serve URL."""
        if self.base64_data:
            return f"data:{self.content_type};base64,{self.base64_data}"
        return self.file_url


class Customer(CamelModel):
    id: int = 0
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    images: List[CustomerImage] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_create_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, include={"first_name", "last_name", "email", "phone"})

    def to_update_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, include={"id", "first_name", "last_name", "email", "phone"})


class Base64ImageUploadRequest(CamelModel):
    customer_id: int
    base64_data: str
    file_name: str
    content_type: str
    description: Optional[str] = None


class ImageCount(CamelModel):
    customer_id: int
    current_count: int
    max_allowed: int
    can_add_more: bool
    remaining_slots: int


class ImageBase64(CamelModel):
    image_id: int
    file_name: str
    content_type: str
    base64_data: str
    data_url: str
