# resume_generator/routers/pages.py
from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from resume_generator.container import Container
from resume_generator.views import render

HOME_TEMPLATE = "index.html"


def create_pages_router(container: Container) -> APIRouter:
    """HTML pages rendered through the container's template engine."""
    router = APIRouter(tags=["pages"])

    @router.get("/", response_class=HTMLResponse)
    def home() -> HTMLResponse:
        context = {
            "title": "Resume Generator",
            "message": "Welcome to the Resume Generator",
        }
        return HTMLResponse(render(container.templates, HOME_TEMPLATE, context))

    return router
