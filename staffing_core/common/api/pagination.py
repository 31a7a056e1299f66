# staffing_core/common/api/pagination.py
from __future__ import annotations

from typing import Any, Optional

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class HierarchyPagination(PageNumberPagination):
    """
    Page-number pagination for hierarchy listings.
    Callers order the queryset first; unordered querysets page unstably.
    """
    page_size = 50
    page_size_query_param = "page_size"
    max_page_size = 500


def paginate(
    request,
    queryset,
    serializer_class,
    *,
    paginator: Optional[PageNumberPagination] = None,
    context: Optional[dict[str, Any]] = None,
) -> Response:
    """
    List contract: { count, next, previous, results }
    """
    p = paginator or HierarchyPagination()
    page = p.paginate_queryset(queryset, request)
    ser = serializer_class(page, many=True, context={"request": request, **(context or {})})
    return p.get_paginated_response(ser.data)
