"""Plain /health for load balancers and Docker."""
from fastapi import APIRouter

from brazucas import __version__

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "service": "brazucas-api", "version": __version__}
