from typing import List, Optional, Protocol

from ...db.models import CustomerImage


class ImageRepository(Protocol):
    def count_for_customer(self, customer_id: int) -> int:
        ...

    def add(self, image: CustomerImage) -> CustomerImage:
        ...

    def get(self, image_id: int) -> Optional[CustomerImage]:
        ...

    def list_for_customer(self, customer_id: int) -> List[CustomerImage]:
        ...

    def delete(self, image: CustomerImage) -> None:
        ...

    def rollback(self) -> None:
        ...
