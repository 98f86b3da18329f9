# catalog_admin/services/listing.py
import logging
from typing import Any, Dict, List, Optional, Tuple

from catalog_admin.database import CatalogDB
from catalog_admin.schemas.search import parse_search
from catalog_admin.services.formatting import format_listing
from catalog_admin.services.query import build_filter, build_pipeline

logger = logging.getLogger(__name__)


def run_listing(db: CatalogDB, pipeline: List[Dict[str, Any]]) -> Tuple[List[Dict[str, Any]], int]:
    """
    Execute the faceted pipeline once and unpack (items, total).
    The facet always yields one container; an empty page or a missing count
    simply means zero matches.
    """
    result = list(db.products.aggregate(pipeline))
    facet = result[0] if result else {}
    items = facet.get("paginatedResults") or []
    counts = facet.get("totalCount") or []
    total = int(counts[0].get("count", 0)) if counts else 0
    return items, total


def list_products(db: CatalogDB, origin: str, search: Optional[str] = "{}", page: Any = None,
                  limit: Any = None, upload_path: str = "/uploads", default_limit: int = 10,
                  max_limit: Optional[int] = None) -> Dict[str, Any]:
    """
    Search / filter / paginate products. All input validation happens before the
    store is touched, so a bad `search` never reaches MongoDB.
    """
    criteria, pagination = parse_search(search, page, limit, default_limit=default_limit, max_limit=max_limit)
    logger.debug("Parsed search criteria: %s (page=%s, limit=%s)",
                 criteria.model_dump(exclude_none=True), pagination.page, pagination.limit)

    product_filter = build_filter(criteria)
    pipeline = build_pipeline(product_filter, pagination)
    items, total = run_listing(db, pipeline)
    return format_listing(items, total, pagination.page, pagination.limit, origin, upload_path)
