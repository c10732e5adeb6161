# resume_generator/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from resume_generator import __version__
from resume_generator.base_path import BasePathMiddleware, compute_base_path
from resume_generator.config import Settings, get_settings
from resume_generator.container import Container
from resume_generator.observability import RequestLogMiddleware
from resume_generator.routers import create_pages_router, create_system_router

logger = logging.getLogger("resume.app")


def create_app(
    settings: Optional[Settings] = None, container: Optional[Container] = None
) -> FastAPI:
    """Wire the container, middleware and routes into a FastAPI app."""
    if container is None:
        container = Container(settings or get_settings())
    settings = container.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # resolve the template cache and build the engine once, before serving
        container.templates
        yield

    # debug=True makes Starlette render tracebacks for unhandled errors
    app = FastAPI(
        title="Resume Generator",
        version=__version__,
        debug=settings.display_error_details,
        lifespan=lifespan,
    )
    app.state.container = container

    # Middleware order: last added runs first, so root_path is set
    # before the request is logged
    app.add_middleware(RequestLogMiddleware)
    base_path = compute_base_path(settings.script_name)
    if base_path:
        logger.info("Serving under base path %s", base_path)
        app.add_middleware(BasePathMiddleware, base_path=base_path)

    # Routers
    app.include_router(create_pages_router(container))
    app.include_router(create_system_router(container))

    return app


app = create_app()
