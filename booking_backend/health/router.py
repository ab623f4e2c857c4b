from fastapi import APIRouter
from fastapi.responses import JSONResponse
from booking_backend.health import service as health_service

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root():
    return {"ok": True}

@router.get("/config")
def health_config():
    return JSONResponse(health_service.health_config_info())
