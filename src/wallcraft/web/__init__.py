"""FastAPI REST API for wall design placement.

This module provides a REST API for resolving block positions, generating
layouts, managing saved designs and processing textures.

Usage:
    uvicorn wallcraft.web:app --reload
"""

from wallcraft.web.app import app, create_app

__all__ = ["app", "create_app"]
