from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter


# Every error body is {"error": {...}} as rendered by the handlers in main.py
ERROR_RESPONSES: Dict[int | str, Dict[str, Any]] = {
    400: {"description": "Empty update, invalid filter or a violated constraint"},
    404: {"description": "No such job or company"},
    422: {"description": "Request body failed validation"},
}


def create_router(resource: str, *, plural: Optional[str] = None) -> APIRouter:
    """Router for one resource, mounted at ``/<plural>`` and tagged the same.

    Example:
        create_router("job") -> routes under ``/jobs``, tag ``jobs``
    """
    collection = plural or f"{resource}s"
    router = APIRouter(
        prefix=f"/{collection}",
        tags=[collection],
        responses=dict(ERROR_RESPONSES),
    )
    setattr(router, "name", resource)
    return router
