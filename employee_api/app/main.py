"""
Main entrypoint for the Employee API.

This module assembles the FastAPI application: it sets up logging,
creates the in-memory employee store, registers the error handlers and
request logging middleware, and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn employee_api.app.main:app --reload

Application title and version come from ``Settings`` in
``core.config``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.middleware import log_requests
from .core.store import EmployeeStore


def create_app(store: Optional[EmployeeStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[EmployeeStore]
        Store backing the employee routes.  A new, empty store is
        created when omitted; tests pass their own to inspect it.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the modules below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file, settings.log_max_bytes, settings.log_backup_count)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.employee_store = store if store is not None else EmployeeStore()

    register_error_handlers(app)

    @app.middleware("http")
    async def _log_requests(request, call_next):
        return await log_requests(request, call_next)

    # Employee routes keep their historical unprefixed paths.
    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
