from __future__ import annotations

import logging
import random
import time
import uuid
from typing import Callable, Optional, Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.core.config import settings

logger = logging.getLogger("app.requests")


def configure_logging(level: Optional[str] = None) -> None:
	"""Configure root logging once, at application start-up."""
	level_name = (level or settings.LOG_LEVEL).upper()
	logging.basicConfig(
		level=getattr(logging, level_name, logging.INFO),
		format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
	)


def generate_correlation_id(existing: Optional[str]) -> str:
	if existing and existing.strip():
		return existing.strip()
	return str(uuid.uuid4())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
	"""Middleware to log inbound HTTP requests with correlation IDs."""

	async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
		correlation_id = generate_correlation_id(request.headers.get("X-Correlation-ID"))
		setattr(request.state, "correlation_id", correlation_id)

		if not settings.ENABLE_REQUEST_LOGGING:
			response = await call_next(request)
			response.headers["X-Correlation-ID"] = correlation_id
			return response

		sampled_out = settings.LOG_SAMPLE_RATE < 1.0 and random.random() > settings.LOG_SAMPLE_RATE

		start_ns = time.monotonic_ns()
		status_code: int = 500
		try:
			response = await call_next(request)
			status_code = response.status_code
		finally:
			duration_ms = int((time.monotonic_ns() - start_ns) / 1_000_000)
			if not sampled_out:
				logger.info(
					"Request completed",
					extra=_build_inbound_payload(request, correlation_id, status_code, duration_ms),
				)

		response.headers["X-Correlation-ID"] = correlation_id
		return response


def _build_inbound_payload(request: Request, correlation_id: str, status_code: int, duration_ms: int) -> dict:
	# Route template may be unavailable for 404 or early errors
	route = request.scope.get("route")
	path_template = getattr(route, "path", None) if route is not None else None

	xff = request.headers.get("x-forwarded-for")
	client_ip = (xff.split(",")[0].strip() if xff else (request.client.host if request.client else None))

	return {
		"correlation_id": correlation_id,
		"method": request.method,
		"raw_path": request.url.path,
		"path_template": path_template or request.url.path,
		"status_code": status_code,
		"duration_ms": duration_ms,
		"client_ip": client_ip,
		"user_agent": (request.headers.get("user-agent") or "")[:256],
	}
