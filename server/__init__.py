"""
server — HTTP front door for the simulation
===========================================

Modules
-------
schemas
    Pydantic models for the ``/Cars`` snapshot payload.
api
    :func:`create_app` FastAPI application factory.
"""

from .api import create_app

__all__ = ["create_app"]
