"""
Main entrypoint for the Product Store API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory product store and includes versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn product_store_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.errors import ProductValidationError, product_validation_error_handler
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.product_service import ProductStore


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call returns an application with its own, empty
    ``ProductStore``.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.product_store = ProductStore()

    app.add_exception_handler(ProductValidationError, product_validation_error_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logging.getLogger(__name__).debug("Application %s %s created", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
