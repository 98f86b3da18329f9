# catalog_admin/schemas/search.py
import json
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from catalog_admin.core.errors import MalformedQuery

# $skip and $limit are encoded as BSON int64
MAX_INT64 = 2 ** 63 - 1


class SearchCriteria(BaseModel):
    """
    Typed form of the `search` JSON object accepted by the product listing.
    Unknown keys are rejected. productId is kept raw here; the filter builder
    decides whether it is a usable number, and status is checked by the status
    policy so a bad token is reported as an invalid status.
    """
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, description="Case-insensitive substring of the product name")
    productId: Optional[Any] = Field(None, description="Numeric product id (number or numeric string)")
    status: Optional[Any] = Field(None, description="active / inactive / deleted; empty hides deleted")
    category: Optional[str] = Field(None, description="Exact category name")


@dataclass(frozen=True)
class Pagination:
    page: int = 1
    limit: int = 10

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def _positive_int(raw: Any, default: int) -> int:
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if value >= 1 else default


def parse_search(search: Optional[str] = "{}", page: Any = None, limit: Any = None,
                 default_limit: int = 10, max_limit: Optional[int] = None):
    """
    Decode the listing query parameters.
    Returns (SearchCriteria, Pagination); raises MalformedQuery when `search`
    is not a JSON object of the expected shape.
    """
    raw = search if search not in (None, "") else "{}"
    try:
        decoded = json.loads(raw)
    except (TypeError, ValueError):
        raise MalformedQuery()
    if not isinstance(decoded, dict):
        raise MalformedQuery()
    try:
        criteria = SearchCriteria.model_validate(decoded)
    except ValidationError:
        raise MalformedQuery()

    page_num = _positive_int(page, 1)
    limit_num = _positive_int(limit, default_limit)
    if max_limit is not None and limit_num > max_limit:
        limit_num = max_limit
    limit_num = min(limit_num, MAX_INT64)
    # pages past the last representable offset just come back empty
    page_num = min(page_num, MAX_INT64 // limit_num + 1)
    return criteria, Pagination(page=page_num, limit=limit_num)
