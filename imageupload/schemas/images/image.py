# imageupload/schemas/images/image.py
from pydantic import Field
from typing import Optional
from datetime import datetime

from ..common.common import CamelModel

__all__ = [
    "CustomerSummary",
    "ImageRead",
    "ImageDetail",
    "Base64ImageUploadRequest",
    "ImageCountResponse",
    "ImageBase64Response",
    "serve_url",
    "image_to_read",
    "image_to_detail",
]


class CustomerSummary(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None


class ImageRead(CamelModel):
    id: int
    customer_id: int
    file_name: str
    content_type: str
    file_size_bytes: int
    uploaded_at: datetime
    description: Optional[str] = None
    storage_encoding: str
    # Set for filesystem images only
    file_url: Optional[str] = None
    # Set for inline images only
    base64_data: Optional[str] = None


class ImageDetail(ImageRead):
    customer: Optional[CustomerSummary] = None


class Base64ImageUploadRequest(CamelModel):
    customer_id: int
    base64_data: str = ""
    file_name: str = Field(min_length=1, max_length=255)
    content_type: str = ""
    description: Optional[str] = Field(default=None, max_length=500)


class ImageCountResponse(CamelModel):
    customer_id: int
    current_count: int
    max_allowed: int
    can_add_more: bool
    remaining_slots: int


class ImageBase64Response(CamelModel):
    image_id: int
    file_name: str
    content_type: str
    base64_data: str
    data_url: str


def serve_url(base_url: str, image_id: int) -> str:
    return f"{base_url.rstrip('/')}/images/serve/{image_id}"


def image_to_read(image, base_url: str) -> ImageRead:
    return ImageRead(
        id=image.id,
        customer_id=image.customer_id,
        file_name=image.file_name,
        content_type=image.content_type,
        file_size_bytes=image.file_size_bytes,
        uploaded_at=image.uploaded_at,
        description=image.description,
        storage_encoding=image.storage_encoding,
        file_url=serve_url(base_url, image.id) if image.file_path else None,
        base64_data=None if image.file_path else image.base64_data,
    )


def image_to_detail(image, base_url: str) -> ImageDetail:
    customer = CustomerSummary.model_validate(image.customer) if image.customer else None
    return ImageDetail(**image_to_read(image, base_url).model_dump(), customer=customer)
