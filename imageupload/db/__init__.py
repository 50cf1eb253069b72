from .models import Customer, CustomerImage

__all__ = ["Customer", "CustomerImage"]
