"""FastAPI REST API for cut list and panel layout optimization.

Usage:
    uvicorn cutstock.web:app --reload
"""

from cutstock.web.app import app, create_app

__all__ = ["app", "create_app"]
