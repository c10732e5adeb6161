# resume_generator/routers/system.py
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from resume_generator.container import Container


def create_system_router(container: Container) -> APIRouter:
    router = APIRouter(prefix="/api", tags=["system"])

    @router.get("/health", response_class=JSONResponse)  # liveness probe
    def health() -> JSONResponse:
        payload = {"status": "ok", "timestamp": container.clock().isoformat()}
        return JSONResponse(payload, media_type="application/json")

    return router
