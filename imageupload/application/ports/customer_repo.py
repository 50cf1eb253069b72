from typing import List, Optional, Protocol

from ...db.models import Customer


class CustomerRepository(Protocol):
    def list_all(self) -> List[Customer]:
        ...

    def get(self, customer_id: int) -> Optional[Customer]:
        ...

    def exists(self, customer_id: int) -> bool:
        ...

    def save(self, customer: Customer) -> Customer:
        ...

    def delete(self, customer: Customer) -> None:
        ...
