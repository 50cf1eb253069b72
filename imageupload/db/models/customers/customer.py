# imageupload/db/models/customers/customer.py
from typing import Optional, List
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime

from ....utils import utc_now


class Customer(SQLModel, table=True):
    __tablename__ = "customers"
    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100, index=True)
    email: Optional[str] = Field(max_length=200, default=None)
    phone: Optional[str] = Field(max_length=20, default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Relationships; image rows also go away through ON DELETE CASCADE
    images: List["CustomerImage"] = Relationship(
        back_populates="customer",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "passive_deletes": True,
            "order_by": "CustomerImage.uploaded_at",
        },
    )
