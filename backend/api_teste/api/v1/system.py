from typing import Any, Dict
from fastapi import APIRouter, Response, status
from ...schemas.system import HealthOut, MemoryOut
from ...services import host

router = APIRouter(prefix="/sistema", tags=["sistema"])

@router.get("/info")
def info() -> Dict[str, Any]:
    return host.system_info()

@router.get("/memoria", response_model=MemoryOut)
def memory():
    return host.memory_info()

@router.get("/cpus")
def cpus() -> Dict[str, Any]:
    return host.cpu_info()

@router.get("/rede")
def network() -> Dict[str, Any]:
    return host.network_info()

@router.get("/health", response_model=HealthOut)
def health(response: Response):
    """503 while free memory is below the configured threshold."""
    payload, degraded = host.health()
    if degraded:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return payload

@router.get("/processo")
def process() -> Dict[str, Any]:
    return host.process_info()
