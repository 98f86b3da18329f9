# catalog_admin/api/routes/products.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.concurrency import run_in_threadpool

from catalog_admin.api.deps import get_base_url, get_db, get_request_origin
from catalog_admin.api.schemas.product import ProductCreated, ProductDetailOut, ProductListOut
from catalog_admin.config import settings
from catalog_admin.core.errors import CatalogError, UnexpectedError
from catalog_admin.database import CatalogDB
from catalog_admin.services.listing import list_products
from catalog_admin.services.products import create_product, get_product
from catalog_admin.utils.images import ImageUpload

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=ProductListOut)
def get_all_products(
    search: Optional[str] = Query("{}", description='JSON object, e.g. {"name": "lamp", "status": "active"}'),
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    limit: Optional[str] = Query(None, description="page size (default 10)"),
    origin: str = Depends(get_request_origin),
    db: CatalogDB = Depends(get_db),
):
    """
    List products. `search` may carry name (substring), productId, status and
    category (exact category name). Deleted products are hidden unless
    status="deleted" is requested.
    """
    try:
        return list_products(
            db,
            origin,
            search=search,
            page=page,
            limit=limit,
            upload_path=settings.UPLOAD_URL_PATH,
            default_limit=settings.DEFAULT_PAGE_LIMIT,
            max_limit=settings.MAX_PAGE_LIMIT,
        )
    except CatalogError:
        raise
    except Exception:
        logger.exception("Get All Products Error")
        raise UnexpectedError("An unexpected error occurred.")


@router.get("/{product_id}", response_model=ProductDetailOut)
def get_product_by_id(
    product_id: str,
    status: Optional[str] = Query(None, description="active / inactive / deleted"),
    origin: str = Depends(get_request_origin),
    db: CatalogDB = Depends(get_db),
):
    try:
        return get_product(db, product_id, origin, status=status, upload_path=settings.UPLOAD_URL_PATH)
    except CatalogError:
        raise
    except Exception:
        logger.exception("Get Product By ID Error")
        raise UnexpectedError("An unexpected error occurred.")


@router.post("", response_model=ProductCreated, status_code=201)
async def create_product_route(
    name: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    categoryName: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    base_url: str = Depends(get_base_url),
    db: CatalogDB = Depends(get_db),
):
    """
    Create a product from multipart form data with a required `image` file.
    The image is stored under UPLOAD_DIR and served from UPLOAD_URL_PATH.
    """
    try:
        upload = None
        if image is not None and image.filename:
            upload = ImageUpload(filename=image.filename, content_type=image.content_type, data=await image.read())
        created = await run_in_threadpool(
            create_product,
            db,
            name,
            price,
            description,
            categoryName,
            upload,
            base_url,
            settings.UPLOAD_DIR,
            settings.UPLOAD_URL_PATH,
        )
    except CatalogError:
        raise
    except Exception:
        logger.exception("Error creating product")
        raise UnexpectedError("Internal server error.")
    return {"success": True, "message": "Product created successfully.", "data": created}
