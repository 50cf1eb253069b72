# Routers package
from . import customers_router
from . import images_router

__all__ = [
    "customers_router",
    "images_router",
]
