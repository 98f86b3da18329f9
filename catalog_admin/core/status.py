from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional

from catalog_admin.core.errors import InvalidStatus


class ProductStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    DELETED = "deleted"


def parse_status(token: Any) -> Optional[ProductStatus]:
    """
    Map a raw status token to ProductStatus. None / "" mean "not requested".
    Raises InvalidStatus for anything outside the closed set.
    """
    if token is None or token == "":
        return None
    if not isinstance(token, str):
        raise InvalidStatus()
    try:
        return ProductStatus(token)
    except ValueError:
        raise InvalidStatus()


def status_filter(token: Any) -> Dict[str, Any]:
    """
    Status predicate for a products query:
      - a recognized token filters on exactly that status
      - no token hides deleted products
    """
    status = parse_status(token)
    if status is None:
        return {"status": {"$ne": ProductStatus.DELETED.value}}
    return {"status": status.value}
