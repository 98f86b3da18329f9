# catalog_admin/services/formatting.py
import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId


def image_url(filename: Optional[str], origin: str, upload_path: str = "/uploads") -> Optional[str]:
    """Public URL of a stored image, or None when the product has no image."""
    if not filename:
        return None
    return f"{origin.rstrip('/')}/{upload_path.strip('/')}/{filename}"


def to_jsonable(value: Any) -> Any:
    """Render ObjectIds as strings and datetimes as ISO text, recursively."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_jsonable(v) for v in value]
    return value


def format_product(doc: Dict[str, Any], origin: str, upload_path: str = "/uploads") -> Dict[str, Any]:
    out = to_jsonable(doc)
    out["imageUrl"] = image_url(doc.get("image"), origin, upload_path)
    return out


def page_count(total: int, limit: int) -> int:
    if total <= 0:
        return 0
    return math.ceil(total / limit)


def format_listing(items: List[Dict[str, Any]], total: int, page: int, limit: int,
                   origin: str, upload_path: str = "/uploads") -> Dict[str, Any]:
    return {
        "products": [format_product(item, origin, upload_path) for item in items],
        "total": total,
        "page": page,
        "pages": page_count(total, limit),
    }
