from typing import List, Optional
from sqlalchemy import func
from sqlmodel import Session, select

from .....db.models import CustomerImage
from .....application.ports.image_repo import ImageRepository


class SqlImageRepository(ImageRepository):
    def __init__(self, session: Session):
        self.session = session

    def count_for_customer(self, customer_id: int) -> int:
        return self.session.exec(
            select(func.count(CustomerImage.id)).where(CustomerImage.customer_id == customer_id)
        ).one()

    def add(self, image: CustomerImage) -> CustomerImage:
        self.session.add(image)
        self.session.commit()
        self.session.refresh(image)
        return image

    def get(self, image_id: int) -> Optional[CustomerImage]:
        return self.session.get(CustomerImage, image_id)

    def list_for_customer(self, customer_id: int) -> List[CustomerImage]:
        return list(self.session.exec(
            select(CustomerImage)
            .where(CustomerImage.customer_id == customer_id)
            .order_by(CustomerImage.uploaded_at, CustomerImage.id)
        ).all())

    def delete(self, image: CustomerImage) -> None:
        self.session.delete(image)
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
