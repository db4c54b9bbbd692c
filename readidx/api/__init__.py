# Path: readidx/api/__init__.py
"""
HTTP API

FastAPI application exposing report upload, lookup and listing.
"""

from .app import create_app

__all__ = ['create_app']
