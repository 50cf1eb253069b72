from typing import Any, Optional, Type
import logging

from pydantic import ValidationError

from ..models import ApiResponse
from .api_client import ApiClient

logger = logging.getLogger(__name__)


class ProxyService:
    """Shared plumbing for services that forward UI actions to the API."""

    def __init__(self, client: ApiClient):
        self.client = client

    def _unwrap(self, status: int, body: Optional[Any], data_type: Type, action: str) -> ApiResponse:
        """Turn a raw API reply into a typed envelope.

        The API answers errors with an envelope too, so its message is kept
        whenever the body has one; otherwise the status code is reported.
        """
        envelope_type = ApiResponse[data_type]
        if isinstance(body, dict) and "success" in body:
            try:
                return envelope_type.model_validate(body)
            except ValidationError as e:
                logger.error(f"{action} returned an unexpected payload: {e}")
                return envelope_type.error_result(f"{action} failed: unexpected response from server")

        logger.error(f"{action} failed with status {status}: {body!r}")
        return envelope_type.error_result(f"{action} failed: {status}")
