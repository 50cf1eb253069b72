from dataclasses import dataclass
from typing import List
import logging

from ..ports.customer_repo import CustomerRepository
from ..ports.storage_repo import StorageRepository
from ...db.models import Customer
from ...exceptions import NotFoundError, ValidationFailedError
from ...schemas.customers.customer import CustomerCreate, CustomerUpdate
from ...utils import utc_now

logger = logging.getLogger(__name__)


@dataclass
class CustomerService:
    customer_repo: CustomerRepository
    storage_repo: StorageRepository

    def list_customers(self) -> List[Customer]:
        return self.customer_repo.list_all()

    def get_customer(self, customer_id: int) -> Customer:
        customer = self.customer_repo.get(customer_id)
        if not customer:
            raise NotFoundError(f"Customer with ID {customer_id} not found")
        return customer

    def create_customer(self, data: CustomerCreate) -> Customer:
        now = utc_now()
        customer = Customer(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone=data.phone,
            created_at=now,
            updated_at=now,
        )
        customer = self.customer_repo.save(customer)
        logger.info(f"Created new customer {customer.id} with name {customer.first_name} {customer.last_name}")
        return customer

    def update_customer(self, customer_id: int, data: CustomerUpdate) -> Customer:
        if customer_id != data.id:
            raise ValidationFailedError("Customer ID mismatch")

        customer = self.get_customer(customer_id)
        customer.first_name = data.first_name
        customer.last_name = data.last_name
        customer.email = data.email
        customer.phone = data.phone
        customer.updated_at = utc_now()
        customer = self.customer_repo.save(customer)
        logger.info(f"Updated customer {customer_id}")
        return customer

    def delete_customer(self, customer_id: int) -> None:
        """Delete a customer, its image files, and (through the cascade) its image rows.

        Files are removed first. A missing file is skipped; any other OSError
        propagates and aborts the delete, leaving already-removed files gone
        and the rows in place.
        """
        customer = self.get_customer(customer_id)

        removed = 0
        for image in customer.images:
            if image.file_path and self.storage_repo.delete(image.file_path):
                removed += 1

        self.customer_repo.delete(customer)
        logger.info(f"Deleted customer {customer_id} and all associated images ({removed} file(s) removed)")
