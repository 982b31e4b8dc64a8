"""
Global Exception Handlers

Custom exceptions and FastAPI exception handlers.
"""

from fastapi import Request
from fastapi.responses import JSONResponse


class CatalogException(Exception):
    """Base exception for catalog errors."""
    
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(CatalogException):
    """Invalid value passed to the catalog model (always recoverable)."""
    
    def __init__(self, message: str):
        super().__init__(message=message, status_code=422)


class NotFoundError(CatalogException):
    """Resource not found."""
    
    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource} not found: {resource_id}",
            status_code=404
        )


class UnsupportedCapabilityError(CatalogException):
    """Content does not implement the requested capability."""
    
    def __init__(self, content_id: str, capability: str):
        super().__init__(
            message=f"Content {content_id} is not {capability}",
            status_code=409
        )


async def catalog_exception_handler(
    request: Request, 
    exc: CatalogException
) -> JSONResponse:
    """Handle CatalogException and return JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": True,
            "message": exc.message,
            "status_code": exc.status_code,
        }
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(CatalogException, catalog_exception_handler)
