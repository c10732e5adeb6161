from resume_generator.routers.pages import create_pages_router
from resume_generator.routers.system import create_system_router

__all__ = ["create_pages_router", "create_system_router"]
