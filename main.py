# main.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.api.endpoints import company, job
from app.core.observability import RequestLoggingMiddleware, configure_logging
# Import all models to ensure relationships are properly resolved
from app.db import base  # noqa: F401
from app.services.exceptions import ServiceError, create_error_response, get_http_status_for_error

configure_logging()

app = FastAPI(title="Jobly API")
app.add_middleware(RequestLoggingMiddleware)

app.include_router(company.router)
app.include_router(job.router)


@app.exception_handler(ServiceError)
@app.exception_handler(IntegrityError)
async def error_handler(request: Request, exc: Exception) -> JSONResponse:
	# IntegrityError: unknown company handle, duplicate handle or name, violated check
	correlation_id = getattr(request.state, "correlation_id", None)
	return JSONResponse(
		status_code=get_http_status_for_error(exc).value,
		content={"error": create_error_response(exc, correlation_id)},
	)
