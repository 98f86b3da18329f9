# catalog_admin/services/products.py
import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId

from catalog_admin.core.errors import (
    CategoryDeleted,
    CategoryNotFound,
    InvalidFileType,
    InvalidId,
    InvalidPrice,
    MissingField,
    MissingImage,
    NotFound,
)
from catalog_admin.core.status import ProductStatus, status_filter
from catalog_admin.database import CatalogDB
from catalog_admin.services.formatting import format_product, image_url, to_jsonable
from catalog_admin.utils.images import ImageUpload, delete_image, make_stored_filename, save_image

logger = logging.getLogger(__name__)


def get_product(db: CatalogDB, product_id: str, origin: str, status: Optional[str] = None,
                upload_path: str = "/uploads") -> Dict[str, Any]:
    """
    Fetch one product by its store id with the category name resolved.
    The id format and status token are checked before any query is made.
    """
    if not ObjectId.is_valid(product_id):
        raise InvalidId()

    query = {"_id": ObjectId(product_id)}
    query.update(status_filter(status))

    product = db.products.find_one(query)
    if not product:
        raise NotFound()

    category_id = product.get("category")
    if category_id is not None:
        product["category"] = db.categories.find_one({"_id": category_id}, {"name": 1})

    return format_product(product, origin, upload_path)


def _required(value: Optional[str]) -> str:
    if value is None or not str(value).strip():
        raise MissingField()
    return str(value).strip()


def _parse_price(raw: str) -> float:
    try:
        price = float(raw)
    except ValueError:
        raise InvalidPrice()
    if not math.isfinite(price) or price < 0:
        raise InvalidPrice()
    return price


def create_product(db: CatalogDB, name: Optional[str], price: Optional[str], description: Optional[str],
                   category_name: Optional[str], image: Optional[ImageUpload], base_url: str,
                   upload_dir: str, upload_path: str = "/uploads") -> Dict[str, Any]:
    """
    Create a product from the admin form.

    Steps run in order and stop at the first failure: required fields, category
    lookup (must exist and not be deleted), image presence and MIME type, then
    the file is written and finally the record inserted. If the insert fails the
    written file is removed again before the error propagates.
    """
    name = _required(name)
    raw_price = _required(price)
    description = _required(description)
    category_name = _required(category_name)
    price_value = _parse_price(raw_price)

    category = db.categories.find_one({"name": category_name})
    if not category:
        logger.warning("Rejected product %r: category %r not found", name, category_name)
        raise CategoryNotFound()
    if category.get("status") == ProductStatus.DELETED.value:
        logger.warning("Rejected product %r: category %r is deleted", name, category_name)
        raise CategoryDeleted()

    if image is None or not image.filename:
        raise MissingImage()
    if not image.is_image:
        logger.warning("Rejected upload %r with content type %r", image.filename, image.content_type)
        raise InvalidFileType()

    filename = make_stored_filename(name, image)
    path = save_image(image, filename, upload_dir)
    logger.info("Saved product image to %s", path)

    now = datetime.now(timezone.utc)
    record = {
        "name": name,
        "price": price_value,
        "description": description,
        "category": category["_id"],
        "image": filename,
        "imageUrl": image_url(filename, base_url, upload_path),
        "status": ProductStatus.ACTIVE.value,
        "createdAt": now,
        "updatedAt": now,
    }
    try:
        record["productId"] = db.next_product_id()
        result = db.products.insert_one(record)
    except Exception:
        delete_image(upload_dir, filename)
        logger.error("Product insert failed, removed orphaned image %s", filename)
        raise
    record["_id"] = result.inserted_id

    logger.info("Product created: %s (productId=%s)", record["_id"], record["productId"])
    return to_jsonable(record)
