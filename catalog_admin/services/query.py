# catalog_admin/services/query.py
"""
Builds the MongoDB aggregation used by the product listing.

The category name filter cannot run in the first $match because products only
hold the category ObjectId; it is applied after the $lookup instead. Page and
total count come out of a single $facet so both are computed over the same
filtered set in one round trip.
"""
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from catalog_admin.core.errors import InvalidProductId
from catalog_admin.core.status import status_filter
from catalog_admin.schemas.search import Pagination, SearchCriteria

CATEGORY_COLLECTION = "categories"

# fields returned for each listed product (besides _id)
LIST_PROJECTION = {
    "name": 1,
    "description": 1,
    "price": 1,
    "category.name": 1,
    "productId": 1,
    "image": 1,
    "status": 1,
}


@dataclass
class ProductFilter:
    match: Dict[str, Any]
    category_name: Optional[str] = None


def _parse_product_id(raw: Any) -> int:
    if isinstance(raw, bool):
        raise InvalidProductId()
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            raise InvalidProductId()
    raise InvalidProductId()


def build_filter(criteria: SearchCriteria) -> ProductFilter:
    """Translate search criteria into the initial $match plus the deferred category condition."""
    match: Dict[str, Any] = {}

    if criteria.name:
        match["name"] = {"$regex": re.escape(criteria.name), "$options": "i"}

    if criteria.productId is not None and criteria.productId != "":
        match["productId"] = _parse_product_id(criteria.productId)

    match.update(status_filter(criteria.status))

    return ProductFilter(match=match, category_name=criteria.category or None)


def build_pipeline(product_filter: ProductFilter, pagination: Pagination) -> List[Dict[str, Any]]:
    pipeline: List[Dict[str, Any]] = [
        {"$match": product_filter.match},
        {
            "$lookup": {
                "from": CATEGORY_COLLECTION,
                "localField": "category",
                "foreignField": "_id",
                "as": "category",
            }
        },
        # keep products whose category is missing or dangling
        {"$unwind": {"path": "$category", "preserveNullAndEmptyArrays": True}},
    ]

    if product_filter.category_name:
        pipeline.append({"$match": {"category.name": product_filter.category_name}})

    pipeline.extend([
        {"$project": dict(LIST_PROJECTION)},
        {"$sort": {"productId": 1}},
        {
            "$facet": {
                "paginatedResults": [{"$skip": pagination.skip}, {"$limit": pagination.limit}],
                "totalCount": [{"$count": "count"}],
            }
        },
    ])
    return pipeline
