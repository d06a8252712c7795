"""Query functionality: store query builder and evaluation helpers."""

from contentarea.core.query.models import Filter, FilterOperator, Query
from contentarea.core.query.operations import filter_matches, query_matches, sort_records

__all__ = [
    # Models
    "Query",
    "Filter",
    "FilterOperator",
    # Operations
    "filter_matches",
    "query_matches",
    "sort_records",
]
