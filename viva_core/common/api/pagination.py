from __future__ import annotations

from rest_framework.response import Response

from viva_core.common.pagination import PageResult


def paged_response(result: PageResult, serializer_class) -> Response:
    """
    Shared pagination helper to enforce a stable contract:
      { data, totalRecords, page, pageSize, totalPages }
    """
    ser = serializer_class(result.items, many=True)
    return Response(
        {
            "data": ser.data,
            "totalRecords": result.total_records,
            "page": result.page,
            "pageSize": result.page_size,
            "totalPages": result.total_pages,
        }
    )
