from typing import List, Optional
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from .....db.models import Customer
from .....application.ports.customer_repo import CustomerRepository


class SqlCustomerRepository(CustomerRepository):
    def __init__(self, session: Session):
        self.session = session

    def list_all(self) -> List[Customer]:
        return list(self.session.exec(
            select(Customer)
            .options(selectinload(Customer.images))
            .order_by(Customer.last_name, Customer.first_name)
        ).all())

    def get(self, customer_id: int) -> Optional[Customer]:
        return self.session.exec(
            select(Customer)
            .options(selectinload(Customer.images))
            .where(Customer.id == customer_id)
        ).first()

    def exists(self, customer_id: int) -> bool:
        return self.session.exec(select(Customer.id).where(Customer.id == customer_id)).first() is not None

    def save(self, customer: Customer) -> Customer:
        self.session.add(customer)
        self.session.commit()
        self.session.refresh(customer)
        return customer

    def delete(self, customer: Customer) -> None:
        self.session.delete(customer)
        self.session.commit()
