import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortener_app.config import settings
from shortener_app.logging_config import setup_logging
from shortener_app.exceptions import InvalidRequest, ShortenerError
from shortener_app.middleware import RequestLoggingMiddleware
from shortener_app.api.v1 import urls, redirect

setup_logging(settings.log_level)
logger = logging.getLogger("shortener_app.main")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="An in-memory URL shortener with click analytics",
    debug=settings.debug
)

app.add_middleware(RequestLoggingMiddleware)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(ShortenerError)
async def shortener_error_handler(request: Request, exc: ShortenerError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are 400, using the validator's message where it has one."""
    message = InvalidRequest.default_message
    for error in exc.errors():
        if error.get("type") == "value_error" and "error" in (error.get("ctx") or {}):
            message = str(error["ctx"]["error"])
            break
    return error_response(InvalidRequest.status_code, message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
# /shorturls/{code} must be registered before the /{code} catch-all
app.include_router(urls.router)
app.include_router(redirect.router)


def run():
    """Start the server on settings.host:settings.port (PORT env var)"""
    logger.info("Server starting on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
