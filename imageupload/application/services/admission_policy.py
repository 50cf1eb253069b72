from dataclasses import dataclass

from ..ports.image_repo import ImageRepository
from ...config import MAX_IMAGES_PER_CUSTOMER


@dataclass(frozen=True)
class QuotaStatus:
    customer_id: int
    current_count: int
    max_allowed: int

    @property
    def can_add(self) -> bool:
        return self.current_count < self.max_allowed

    @property
    def remaining_slots(self) -> int:
        # Clamped: a concurrent upload can leave a customer above the limit
        return max(0, self.max_allowed - self.current_count)


@dataclass
class ImageAdmissionPolicy:
    """Decides whether a customer may store another image.

    The count is queried live on every call. Nothing is reserved between the
    check and the insert, so two concurrent uploads can both be admitted and
    push a customer past the limit.
    """

    image_repo: ImageRepository
    max_images: int = MAX_IMAGES_PER_CUSTOMER

    def quota(self, customer_id: int) -> QuotaStatus:
        return QuotaStatus(
            customer_id=customer_id,
            current_count=self.image_repo.count_for_customer(customer_id),
            max_allowed=self.max_images,
        )

    def count(self, customer_id: int) -> int:
        return self.quota(customer_id).current_count

    def can_add(self, customer_id: int) -> bool:
        return self.quota(customer_id).can_add

    def remaining_slots(self, customer_id: int) -> int:
        return self.quota(customer_id).remaining_slots
