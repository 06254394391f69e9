"""
DonorHub API package.

Provides the FastAPI application for the blood donation coordination service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
