from typing import List
import asyncio
import logging

import aiohttp

from ..models import ApiResponse, Customer
from .base import ProxyService

logger = logging.getLogger(__name__)


class CustomerService(ProxyService):
    async def get_customers(self) -> ApiResponse[List[Customer]]:
        try:
            status, body = await self.client.get("customers")
            return self._unwrap(status, body, List[Customer], "Retrieve customers")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error retrieving customers: {e}")
            return ApiResponse[List[Customer]].error_result("An error occurred while retrieving customers")

    async def get_customer(self, customer_id: int) -> ApiResponse[Customer]:
        try:
            status, body = await self.client.get(f"customers/{customer_id}")
            return self._unwrap(status, body, Customer, "Retrieve customer")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error retrieving customer {customer_id}: {e}")
            return ApiResponse[Customer].error_result("An error occurred while retrieving the customer")

    async def create_customer(self, customer: Customer) -> ApiResponse[Customer]:
        try:
            status, body = await self.client.post("customers", json=customer.to_create_payload())
            return self._unwrap(status, body, Customer, "Create")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error creating customer: {e}")
            return ApiResponse[Customer].error_result("An error occurred while creating the customer")

    async def update_customer(self, customer: Customer) -> ApiResponse[Customer]:
        try:
            status, body = await self.client.put(f"customers/{customer.id}", json=customer.to_update_payload())
            return self._unwrap(status, body, Customer, "Update")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error updating customer {customer.id}: {e}")
            return ApiResponse[Customer].error_result("An error occurred while updating the customer")

    async def delete_customer(self, customer_id: int) -> ApiResponse[None]:
        try:
            status, body = await self.client.delete(f"customers/{customer_id}")
            return self._unwrap(status, body, None, "Delete")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error deleting customer {customer_id}: {e}")
            return ApiResponse[None].error_result("An error occurred while deleting the customer")
