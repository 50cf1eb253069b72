from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import Response
import logging

from ..config import MAX_IMAGES_PER_CUSTOMER, Settings, get_settings
from ..dependencies import get_image_service
from ..application.services.image_service import DeleteOutcome, ImageService, UploadFailure, UploadResult
from ..exceptions import LimitReachedError, NotFoundError, ValidationFailedError
from ..schemas.common.common import ApiResponse
from ..schemas.images.image import (
    Base64ImageUploadRequest,
    ImageBase64Response,
    ImageCountResponse,
    ImageDetail,
    ImageRead,
    image_to_detail,
    image_to_read,
)
from ..utils import encode_base64

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/images", tags=["Images"])


def _raise_for_failure(result: UploadResult):
    if result.failure == UploadFailure.CUSTOMER_NOT_FOUND:
        raise NotFoundError(result.message)
    if result.failure == UploadFailure.LIMIT_REACHED:
        raise LimitReachedError(result.message)
    if result.failure == UploadFailure.STORAGE_ERROR:
        raise HTTPException(status_code=500, detail="An error occurred while uploading the image")
    raise ValidationFailedError(result.message, errors=[result.message])


@router.post("/upload/{customer_id}", response_model=ApiResponse[List[ImageRead]])
def upload_images(
    customer_id: int,
    files: Optional[List[UploadFile]] = File(None),
    description: Optional[str] = Form(None, max_length=500),
    service: ImageService = Depends(get_image_service),
    app_settings: Settings = Depends(get_settings),
):
    if not files:
        raise ValidationFailedError("No files provided")
    if not service.customer_exists(customer_id):
        raise NotFoundError(f"Customer with ID {customer_id} not found")

    uploaded: List[ImageRead] = []
    errors: List[str] = []
    try:
        for file in files:
            if not service.can_add_image(customer_id):
                errors.append(
                    f"Cannot upload more images. Customer {customer_id} has reached "
                    f"the maximum limit of {MAX_IMAGES_PER_CUSTOMER} images."
                )
                break

            content = file.file.read()
            result = service.upload_file(
                customer_id,
                content,
                file.filename or "upload.jpg",
                file.content_type,
                description,
            )
            if result.ok:
                uploaded.append(image_to_read(result.image, app_settings.BASE_URL))
            else:
                errors.append(f"Failed to upload file {file.filename}: {result.message}")
    except Exception as e:
        logger.error(f"Error uploading images for customer {customer_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while uploading images")

    if not uploaded:
        raise ValidationFailedError("Failed to upload any images", errors=errors)

    response = ApiResponse.ok(uploaded, f"Successfully uploaded {len(uploaded)} image(s)")
    response.errors = errors
    return response


@router.post("/upload-base64", response_model=ApiResponse[ImageRead])
def upload_base64_image(
    payload: Base64ImageUploadRequest,
    service: ImageService = Depends(get_image_service),
    app_settings: Settings = Depends(get_settings),
):
    try:
        result = service.upload_base64(
            payload.customer_id,
            payload.base64_data,
            payload.file_name,
            payload.content_type,
            payload.description,
        )
    except Exception as e:
        logger.error(f"Error uploading base64 image for customer {payload.customer_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while uploading the image")

    if not result.ok:
        _raise_for_failure(result)
    return ApiResponse.ok(image_to_read(result.image, app_settings.BASE_URL), "Image uploaded successfully")


@router.get("/customer/{customer_id}", response_model=ApiResponse[List[ImageRead]])
def get_customer_images(
    customer_id: int,
    service: ImageService = Depends(get_image_service),
    app_settings: Settings = Depends(get_settings),
):
    try:
        images = [image_to_read(i, app_settings.BASE_URL) for i in service.list_for_customer(customer_id)]
        return ApiResponse.ok(images, f"Found {len(images)} image(s) for customer {customer_id}")
    except Exception as e:
        logger.error(f"Error retrieving images for customer {customer_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while retrieving images")


@router.get("/count/{customer_id}", response_model=ApiResponse[ImageCountResponse])
def get_image_count(customer_id: int, service: ImageService = Depends(get_image_service)):
    try:
        quota = service.get_quota(customer_id)
        result = ImageCountResponse(
            customer_id=quota.customer_id,
            current_count=quota.current_count,
            max_allowed=quota.max_allowed,
            can_add_more=quota.can_add,
            remaining_slots=quota.remaining_slots,
        )
        return ApiResponse.ok(result, "Image count retrieved successfully")
    except Exception as e:
        logger.error(f"Error getting image count for customer {customer_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while retrieving image count")


@router.get("/serve/{image_id}")
def serve_image(image_id: int, service: ImageService = Depends(get_image_service)):
    try:
        image = service.get_image(image_id)
        if not image:
            raise NotFoundError(f"Image {image_id} not found")
        if not image.file_path:
            raise NotFoundError(f"Image {image_id} is stored inline and has no file to serve")

        content = service.read_bytes(image)
        if content is None:
            raise NotFoundError("Image file not found on disk")
        return Response(content=content, media_type=image.content_type)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error serving image {image_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while serving the image")


@router.get("/base64/{image_id}", response_model=ApiResponse[ImageBase64Response])
def get_image_base64(image_id: int, service: ImageService = Depends(get_image_service)):
    try:
        image = service.get_image(image_id)
        if not image:
            raise NotFoundError(f"Image {image_id} not found")

        b64_text = image.base64_data
        if not b64_text:
            content = service.read_bytes(image)
            if content is None:
                raise NotFoundError("Image file not found on disk")
            b64_text = encode_base64(content)

        result = ImageBase64Response(
            image_id=image.id,
            file_name=image.file_name,
            content_type=image.content_type,
            base64_data=b64_text,
            data_url=f"data:{image.content_type};base64,{b64_text}",
        )
        return ApiResponse.ok(result, "Image data retrieved successfully")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error retrieving base64 data for image {image_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while retrieving image data")


@router.get("/{image_id}", response_model=ApiResponse[ImageDetail])
def get_image(
    image_id: int,
    service: ImageService = Depends(get_image_service),
    app_settings: Settings = Depends(get_settings),
):
    try:
        image = service.get_image(image_id)
        if not image:
            raise NotFoundError(f"Image {image_id} not found")
        return ApiResponse.ok(image_to_detail(image, app_settings.BASE_URL), "Image retrieved successfully")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error retrieving image {image_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred while retrieving the image")


@router.delete("/{image_id}", response_model=ApiResponse[None])
def delete_image(image_id: int, service: ImageService = Depends(get_image_service)):
    outcome = service.delete_image(image_id)
    if outcome == DeleteOutcome.NOT_FOUND:
        raise NotFoundError(f"Image {image_id} not found")
    if outcome == DeleteOutcome.FAILED:
        raise HTTPException(status_code=500, detail="An error occurred while deleting the image")
    return ApiResponse.ok(None, f"Image {image_id} deleted successfully")
