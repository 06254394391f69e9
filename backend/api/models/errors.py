"""
Error response models.

Every error the API returns has the same body: ``{"message": "..."}``.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str


# Shared OpenAPI documentation for the statuses routes can return
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed or missing input"},
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    403: {"model": ErrorResponse, "description": "Authenticated but not allowed"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    409: {"model": ErrorResponse, "description": "Conflicting state"},
}
