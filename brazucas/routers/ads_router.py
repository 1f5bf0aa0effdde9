"""API /api/ads."""
from brazucas.routers.content_router import build_content_router
from brazucas.schemas.ads import AdCreate, AdOut, AdUpdate
from brazucas.services.status_service import ContentKind

router = build_content_router(
    ContentKind.ADS,
    prefix="/api/ads",
    create_schema=AdCreate,
    update_schema=AdUpdate,
    out_schema=AdOut,
    messages={
        "created": "Advertisement created successfully",
        "updated": "Advertisement updated successfully",
        "deleted": "Advertisement deleted successfully",
        "approved": "Advertisement approved successfully",
        "rejected": "Advertisement rejected successfully",
        "submitted": "Advertisement submitted for approval",
    },
)
