"""
Realty API package.

Provides the FastAPI application factory for the listings service.
"""

from .app import create_app

__all__ = ["create_app"]
