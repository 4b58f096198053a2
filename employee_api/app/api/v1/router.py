"""
Top-level router for version 1 of the API.

This router aggregates the domain routers.  The employee routes define
their full paths internally, so they are included without a prefix to
keep the paths clients already use.
"""

from fastapi import APIRouter

from .endpoints import employees, health

router = APIRouter()

router.include_router(employees.router, tags=["employees"])
router.include_router(health.router, tags=["health"])
