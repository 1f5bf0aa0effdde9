"""API /api/news."""
from brazucas.routers.content_router import build_content_router
from brazucas.schemas.news import NewsCreate, NewsOut, NewsUpdate
from brazucas.services.status_service import ContentKind

router = build_content_router(
    ContentKind.NEWS,
    prefix="/api/news",
    create_schema=NewsCreate,
    update_schema=NewsUpdate,
    out_schema=NewsOut,
    messages={
        "created": "News created successfully",
        "updated": "News updated successfully",
        "deleted": "News deleted successfully",
        "approved": "News approved successfully",
        "rejected": "News rejected successfully",
        "submitted": "News submitted for approval",
    },
)
