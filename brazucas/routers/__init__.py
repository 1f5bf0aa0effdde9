"""API routers."""
from brazucas.routers.admin_stats_router import router as admin_stats_router
from brazucas.routers.ads_router import router as ads_router
from brazucas.routers.api_health_router import router as api_health_router
from brazucas.routers.auth_router import router as auth_router
from brazucas.routers.categories_router import router as categories_router
from brazucas.routers.health_router import router as health_router
from brazucas.routers.news_router import router as news_router
from brazucas.routers.status_router import router as status_router

__all__ = [
    "admin_stats_router",
    "ads_router",
    "api_health_router",
    "auth_router",
    "categories_router",
    "health_router",
    "news_router",
    "status_router",
]
