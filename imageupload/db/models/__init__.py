# Models package (re-export feature modules for stable imports)
from .customers.customer import Customer
from .media.image import CustomerImage

__all__ = [
    "Customer",
    "CustomerImage",
]
