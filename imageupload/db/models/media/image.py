# imageupload/db/models/media/image.py
from typing import Optional
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime
from sqlalchemy import Column, ForeignKey, Integer, Text

from ....config import FILESYSTEM_STORAGE, INLINE_STORAGE
from ....utils import utc_now


class CustomerImage(SQLModel, table=True):
    __tablename__ = "customer_images"
    id: Optional[int] = Field(default=None, primary_key=True)
    customer_id: int = Field(
        sa_column=Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)
    )
    file_name: str = Field(max_length=255)
    content_type: str = Field(max_length=100)
    file_size_bytes: int = Field(default=0)
    uploaded_at: datetime = Field(default_factory=utc_now, index=True)
    description: Optional[str] = Field(max_length=500, default=None)
    # Exactly one of the two payload columns is set
    file_path: Optional[str] = Field(max_length=500, default=None)
    base64_data: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    # Relationships
    customer: Optional["Customer"] = Relationship(back_populates="images")

    @property
    def storage_encoding(self) -> str:
        return FILESYSTEM_STORAGE if self.file_path else INLINE_STORAGE
