from typing import List, Optional, Sequence, Tuple
import asyncio
import logging

import aiohttp

from ..models import ApiResponse, Base64ImageUploadRequest, CustomerImage, ImageBase64, ImageCount
from ..upload import UploadTooLargeError, convert_file_to_base64, validate_image_file
from .base import ProxyService

logger = logging.getLogger(__name__)

# (file name, raw bytes, content type)
UploadFileTuple = Tuple[str, bytes, str]


class ImageService(ProxyService):
    async def get_customer_images(self, customer_id: int) -> ApiResponse[List[CustomerImage]]:
        try:
            status, body = await self.client.get(f"images/customer/{customer_id}")
            return self._unwrap(status, body, List[CustomerImage], "Retrieve images")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error retrieving images for customer {customer_id}: {e}")
            return ApiResponse[List[CustomerImage]].error_result("An error occurred while retrieving images")

    async def upload_base64_image(self, request: Base64ImageUploadRequest) -> ApiResponse[CustomerImage]:
        try:
            status, body = await self.client.post("images/upload-base64", json=request.to_payload())
            response = self._unwrap(status, body, CustomerImage, "Upload")
            if not response.success:
                logger.error(
                    f"Upload failed with status {status}: {response.message}. Request: "
                    f"CustomerId={request.customer_id}, FileName={request.file_name}, ContentType={request.content_type}"
                )
            return response
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error uploading image for customer {request.customer_id}: {e}")
            return ApiResponse[CustomerImage].error_result("An error occurred while uploading the image")

    async def upload_image(
        self,
        customer_id: int,
        file_name: str,
        content_type: str,
        data: bytes,
        description: Optional[str] = None,
    ) -> ApiResponse[CustomerImage]:
        """Check a picked file locally, then send it inline-encoded."""
        valid, error = validate_image_file(content_type, len(data))
        if not valid:
            return ApiResponse[CustomerImage].error_result(error, [error])

        try:
            encoded = convert_file_to_base64(data)
        except UploadTooLargeError as e:
            return ApiResponse[CustomerImage].error_result(str(e), [str(e)])

        request = Base64ImageUploadRequest(
            customer_id=customer_id,
            base64_data=encoded,
            file_name=file_name,
            content_type=content_type,
            description=description,
        )
        return await self.upload_base64_image(request)

    async def upload_files(
        self,
        customer_id: int,
        files: Sequence[UploadFileTuple],
        description: Optional[str] = None,
    ) -> ApiResponse[List[CustomerImage]]:
        """Send several raw files in one multipart request."""
        form = aiohttp.FormData()
        for file_name, data, content_type in files:
            form.add_field("files", data, filename=file_name, content_type=content_type)
        if description:
            form.add_field("description", description)

        try:
            status, body = await self.client.post(f"images/upload/{customer_id}", data=form)
            return self._unwrap(status, body, List[CustomerImage], "Upload")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error uploading files for customer {customer_id}: {e}")
            return ApiResponse[List[CustomerImage]].error_result("An error occurred while uploading images")

    async def delete_image(self, image_id: int) -> ApiResponse[None]:
        try:
            status, body = await self.client.delete(f"images/{image_id}")
            return self._unwrap(status, body, None, "Delete")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error deleting image {image_id}: {e}")
            return ApiResponse[None].error_result("An error occurred while deleting the image")

    async def get_image_count(self, customer_id: int) -> ApiResponse[ImageCount]:
        try:
            status, body = await self.client.get(f"images/count/{customer_id}")
            return self._unwrap(status, body, ImageCount, "Retrieve image count")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error retrieving image count for customer {customer_id}: {e}")
            return ApiResponse[ImageCount].error_result("An error occurred while retrieving image count")

    async def get_image_base64(self, image_id: int) -> ApiResponse[ImageBase64]:
        try:
            status, body = await self.client.get(f"images/base64/{image_id}")
            return self._unwrap(status, body, ImageBase64, "Retrieve image data")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Error retrieving Base64 data for image {image_id}: {e}")
            return ApiResponse[ImageBase64].error_result("An error occurred while retrieving image data")
