import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from feedback_service.api import feedback, sessions, users
from feedback_service.schemas import ErrorResponse
from feedback_service.services.errors import (
    FeedbackServiceError,
    InternalError,
    InvalidInput,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Session Feedback Service", version="0.1.0")


# =============================================================================
# Request Logging Middleware
# =============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every handled request with latency, status, method and route.

    The log level follows the response status:
    - 200/202: info
    - 400, 404: info (client problems)
    - 500: error
    - anything else: warning
    """

    STATUS_MESSAGES = {
        200: (logging.INFO, "Handled request successfully"),
        202: (logging.INFO, "Handled request successfully"),
        400: (logging.INFO, "Bad request from client"),
        404: (logging.INFO, "Unhandled route"),
        500: (logging.ERROR, "Internal server error"),
    }

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000

        level, message = self.STATUS_MESSAGES.get(
            response.status_code, (logging.WARNING, "Encountered unexpected status")
        )
        route = request.url.path
        if request.url.query:
            route += f"?{request.url.query}"
        logger.log(
            level,
            "%s: latency=%.2fms status=%d method=%s route=%s",
            message,
            latency_ms,
            response.status_code,
            request.method,
            route,
        )
        return response


app.add_middleware(RequestLoggingMiddleware)


# =============================================================================
# Error Handlers
# =============================================================================


def error_response(exc: FeedbackServiceError) -> JSONResponse:
    body = ErrorResponse(error=exc.code, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.exception_handler(FeedbackServiceError)
async def service_error_handler(request: Request, exc: FeedbackServiceError):
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and parameters are client errors (400, not 422)."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    return error_response(InvalidInput(details or None))


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Unhandled store error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(InternalError())


# Include routers
app.include_router(users.router)
app.include_router(sessions.router)
app.include_router(feedback.router)


@app.get("/health")
def health_check():
    return {"status": "healthy"}
