from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence
import logging
import uuid

from ..ports.image_repo import ImageRepository
from ..ports.customer_repo import CustomerRepository
from ..ports.storage_repo import StorageRepository
from .admission_policy import ImageAdmissionPolicy, QuotaStatus
from ...config import settings
from ...db.models import CustomerImage
from ...utils import (
    decode_base64_strict,
    encode_base64,
    estimate_decoded_size,
    file_extension,
    split_data_url,
    utc_now,
)

logger = logging.getLogger(__name__)


class UploadFailure(str, Enum):
    CUSTOMER_NOT_FOUND = "customer_not_found"
    LIMIT_REACHED = "limit_reached"
    EMPTY_PAYLOAD = "empty_payload"
    INVALID_CONTENT_TYPE = "invalid_content_type"
    FILE_TOO_LARGE = "file_too_large"
    MALFORMED_PAYLOAD = "malformed_payload"
    STORAGE_ERROR = "storage_error"


class DeleteOutcome(str, Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass
class UploadResult:
    image: Optional[CustomerImage] = None
    failure: Optional[UploadFailure] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.image is not None

    @classmethod
    def rejected(cls, failure: UploadFailure, message: str) -> "UploadResult":
        return cls(image=None, failure=failure, message=message)


@dataclass
class ImageService:
    image_repo: ImageRepository
    customer_repo: CustomerRepository
    storage_repo: StorageRepository
    max_file_size: int = settings.MAX_FILE_SIZE
    allowed_types: Sequence[str] = tuple(settings.ALLOWED_IMAGE_TYPES)
    use_filesystem: bool = settings.uses_filesystem_storage
    admission: ImageAdmissionPolicy = field(default=None)

    def __post_init__(self):
        if self.admission is None:
            self.admission = ImageAdmissionPolicy(image_repo=self.image_repo)

    # --- admission ---
    def get_image_count(self, customer_id: int) -> int:
        return self.admission.count(customer_id)

    def can_add_image(self, customer_id: int) -> bool:
        return self.admission.can_add(customer_id)

    def get_quota(self, customer_id: int) -> QuotaStatus:
        return self.admission.quota(customer_id)

    def customer_exists(self, customer_id: int) -> bool:
        return self.customer_repo.exists(customer_id)

    # --- ingestion ---
    def upload_file(
        self,
        customer_id: int,
        data: Optional[bytes],
        file_name: str,
        content_type: Optional[str],
        description: Optional[str] = None,
    ) -> UploadResult:
        """Validate raw file bytes and store them for ``customer_id``."""
        rejection = self._check_admission(customer_id)
        if rejection:
            return rejection

        if not data:
            logger.warning(f"No file content provided for customer {customer_id}")
            return UploadResult.rejected(UploadFailure.EMPTY_PAYLOAD, "No file content provided")

        rejection = self._check_content_type(content_type) or self._check_size(len(data))
        if rejection:
            return rejection

        return self._persist(customer_id, data, file_name, content_type, description)

    def upload_base64(
        self,
        customer_id: int,
        base64_data: Optional[str],
        file_name: str,
        content_type: Optional[str],
        description: Optional[str] = None,
    ) -> UploadResult:
        """Validate a base64 (or data URL) payload and store it for ``customer_id``."""
        rejection = self._check_admission(customer_id)
        if rejection:
            return rejection

        prefixed_type, b64_text = split_data_url(base64_data or "")
        if not b64_text:
            logger.warning(f"No image data provided for customer {customer_id}")
            return UploadResult.rejected(UploadFailure.EMPTY_PAYLOAD, "No image data provided")

        content_type = content_type or prefixed_type
        rejection = self._check_content_type(content_type) or self._check_size(estimate_decoded_size(b64_text))
        if rejection:
            return rejection

        data = decode_base64_strict(b64_text)
        if not data:
            logger.warning(f"Malformed base64 payload for customer {customer_id}")
            return UploadResult.rejected(UploadFailure.MALFORMED_PAYLOAD, "Image data is not valid base64")

        return self._persist(customer_id, data, file_name, content_type, description, encode_base64(data))

    def _check_admission(self, customer_id: int) -> Optional[UploadResult]:
        if not self.customer_repo.exists(customer_id):
            logger.warning(f"Customer with ID {customer_id} not found")
            return UploadResult.rejected(UploadFailure.CUSTOMER_NOT_FOUND, f"Customer with ID {customer_id} not found")

        if not self.admission.can_add(customer_id):
            logger.warning(
                f"Customer {customer_id} has reached the maximum limit of {self.admission.max_images} images"
            )
            return UploadResult.rejected(
                UploadFailure.LIMIT_REACHED,
                f"Customer {customer_id} has reached the maximum limit of {self.admission.max_images} images",
            )
        return None

    def _check_content_type(self, content_type: Optional[str]) -> Optional[UploadResult]:
        normalized = (content_type or "").strip().lower()
        if normalized not in {t.lower() for t in self.allowed_types}:
            logger.warning(f"Invalid file type: {content_type}")
            return UploadResult.rejected(
                UploadFailure.INVALID_CONTENT_TYPE,
                f"File type {content_type or 'unknown'} not allowed. Allowed: {', '.join(self.allowed_types)}",
            )
        return None

    def _check_size(self, size: int) -> Optional[UploadResult]:
        if size > self.max_file_size:
            logger.warning(f"File size {size} exceeds maximum allowed size {self.max_file_size}")
            return UploadResult.rejected(
                UploadFailure.FILE_TOO_LARGE,
                f"File too large (max {self.max_file_size // (1024 * 1024)}MB)",
            )
        return None

    def _persist(
        self,
        customer_id: int,
        data: bytes,
        file_name: str,
        content_type: str,
        description: Optional[str],
        b64_text: Optional[str] = None,
    ) -> UploadResult:
        try:
            image = CustomerImage(
                customer_id=customer_id,
                file_name=(file_name or "upload.jpg")[:255],
                content_type=content_type.strip().lower(),
                file_size_bytes=len(data),
                description=description,
                uploaded_at=utc_now(),
            )
            if self.use_filesystem:
                # Written before the row commits; a crash in between leaves an orphan file
                stored_name = f"{uuid.uuid4()}{file_extension(file_name)}"
                image.file_path = self.storage_repo.save_bytes(str(customer_id), stored_name, data)
            else:
                image.base64_data = b64_text or encode_base64(data)

            image = self.image_repo.add(image)
            logger.info(f"Successfully uploaded image {image.id} for customer {customer_id}")
            return UploadResult(image=image, message="Image uploaded successfully")
        except Exception as e:
            logger.error(f"Error uploading image for customer {customer_id}: {e}", exc_info=True)
            self.image_repo.rollback()
            return UploadResult.rejected(UploadFailure.STORAGE_ERROR, "An error occurred while saving the image")

    # --- catalog ---
    def list_for_customer(self, customer_id: int) -> List[CustomerImage]:
        return self.image_repo.list_for_customer(customer_id)

    def get_image(self, image_id: int) -> Optional[CustomerImage]:
        return self.image_repo.get(image_id)

    def read_bytes(self, image: CustomerImage) -> Optional[bytes]:
        """Decoded payload of ``image`` whichever way it is stored."""
        if image.file_path:
            return self.storage_repo.read_bytes(image.file_path)
        if image.base64_data:
            return decode_base64_strict(image.base64_data)
        return None

    def delete_image(self, image_id: int) -> DeleteOutcome:
        """Remove an image's file (if any) and then its row.

        A file already missing from disk is not an error. Any other fault is
        logged and reported as ``FAILED``, leaving the row in place.
        """
        try:
            image = self.image_repo.get(image_id)
            if not image:
                logger.warning(f"Image with ID {image_id} not found")
                return DeleteOutcome.NOT_FOUND

            customer_id = image.customer_id
            if image.file_path:
                self.storage_repo.delete(image.file_path)

            self.image_repo.delete(image)
            logger.info(f"Successfully deleted image {image_id} for customer {customer_id}")
            return DeleteOutcome.DELETED
        except Exception as e:
            logger.error(f"Error deleting image {image_id}: {e}", exc_info=True)
            self.image_repo.rollback()
            return DeleteOutcome.FAILED
