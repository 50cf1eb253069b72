from .api_client import ApiClient
from .customer_service import CustomerService
from .image_service import ImageService

__all__ = ["ApiClient", "CustomerService", "ImageService"]
