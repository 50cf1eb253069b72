# imageupload/schemas/customers/customer.py
from pydantic import Field
from typing import List, Optional
from datetime import datetime

from ..common.common import CamelModel
from ..images.image import ImageRead

__all__ = ["CustomerCreate", "CustomerUpdate", "CustomerRead"]


class CustomerCreate(CamelModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: Optional[str] = Field(default=None, max_length=200)
    phone: Optional[str] = Field(default=None, max_length=20)


class CustomerUpdate(CustomerCreate):
    id: int


class CustomerRead(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    images: List[ImageRead] = []
