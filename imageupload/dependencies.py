from fastapi import Depends
from sqlmodel import Session

from .config import Settings, get_settings
from .database import get_session
from .application.services.customer_service import CustomerService
from .application.services.image_service import ImageService
from .infrastructure.persistence.sqlalchemy.repositories.customer_repository_sql import SqlCustomerRepository
from .infrastructure.persistence.sqlalchemy.repositories.image_repository_sql import SqlImageRepository
from .infrastructure.storage.local_storage import LocalStorageRepository


def get_storage(app_settings: Settings = Depends(get_settings)) -> LocalStorageRepository:
    return LocalStorageRepository(app_settings.UPLOAD_DIR)


def get_image_service(
    session: Session = Depends(get_session),
    storage: LocalStorageRepository = Depends(get_storage),
    app_settings: Settings = Depends(get_settings),
) -> ImageService:
    return ImageService(
        image_repo=SqlImageRepository(session),
        customer_repo=SqlCustomerRepository(session),
        storage_repo=storage,
        max_file_size=app_settings.MAX_FILE_SIZE,
        allowed_types=tuple(app_settings.ALLOWED_IMAGE_TYPES),
        use_filesystem=app_settings.uses_filesystem_storage,
    )


def get_customer_service(
    session: Session = Depends(get_session),
    storage: LocalStorageRepository = Depends(get_storage),
) -> CustomerService:
    return CustomerService(customer_repo=SqlCustomerRepository(session), storage_repo=storage)
