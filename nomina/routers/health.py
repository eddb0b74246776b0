from fastapi import APIRouter

from nomina import __version__
from nomina.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="healthy", application="nomina", version=__version__)
