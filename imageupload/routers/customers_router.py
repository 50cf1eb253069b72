from typing import List
from fastapi import APIRouter, Depends, HTTPException
import logging

from ..config import Settings, get_settings
from ..dependencies import get_customer_service
from ..application.services.customer_service import CustomerService
from ..schemas.common.common import ApiResponse
from ..schemas.customers.customer import CustomerCreate, CustomerUpdate, CustomerRead
from ..schemas.images.image import image_to_read

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["Customers"])


def _to_read(customer, base_url: str) -> CustomerRead:
    return CustomerRead(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        email=customer.email,
        phone=customer.phone,
        created_at=customer.created_at,
        updated_at=customer.updated_at,
        images=[image_to_read(image, base_url) for image in customer.images],
    )


@router.get("", response_model=ApiResponse[List[CustomerRead]])
def get_customers(
    service: CustomerService = Depends(get_customer_service),
    app_settings: Settings = Depends(get_settings),
):
    try:
        customers = [_to_read(c, app_settings.BASE_URL) for c in service.list_customers()]
        return ApiResponse.ok(customers, "Customers retrieved successfully")
    except Exception as e:
        logger.error(f"Error retrieving customers: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while retrieving customers")


@router.get("/{customer_id}", response_model=ApiResponse[CustomerRead])
def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
    app_settings: Settings = Depends(get_settings),
):
    try:
        customer = service.get_customer(customer_id)
        return ApiResponse.ok(_to_read(customer, app_settings.BASE_URL), "Customer retrieved successfully")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error retrieving customer {customer_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while retrieving the customer")


@router.post("", response_model=ApiResponse[CustomerRead], status_code=201)
def create_customer(
    payload: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
    app_settings: Settings = Depends(get_settings),
):
    try:
        customer = service.create_customer(payload)
        return ApiResponse.ok(_to_read(customer, app_settings.BASE_URL), "Customer created successfully")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating customer: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while creating the customer")


@router.put("/{customer_id}", response_model=ApiResponse[CustomerRead])
def update_customer(
    customer_id: int,
    payload: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
    app_settings: Settings = Depends(get_settings),
):
    try:
        customer = service.update_customer(customer_id, payload)
        return ApiResponse.ok(_to_read(customer, app_settings.BASE_URL), "Customer updated successfully")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating customer {customer_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while updating the customer")


@router.delete("/{customer_id}", response_model=ApiResponse[None])
def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    try:
        service.delete_customer(customer_id)
        return ApiResponse.ok(None, "Customer and all associated images deleted successfully")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting customer {customer_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while deleting the customer")
