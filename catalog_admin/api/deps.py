from fastapi import Request

from catalog_admin.config import settings
from catalog_admin.database import CatalogDB, db


def get_db() -> CatalogDB:
    """
    Dependency that returns the MongoDB-backed catalog store.
    Usage:
        db = Depends(get_db)
    Tests swap it via app.dependency_overrides[get_db].
    """
    return db


def get_request_origin(request: Request) -> str:
    """
    scheme://host of the inbound request, used for image URLs in read responses.
    """
    return f"{request.url.scheme}://{request.url.netloc}"


def get_base_url() -> str:
    """Configured public origin used when storing imageUrl on new products."""
    return settings.BASE_URL.rstrip("/")
