"""SQLAlchemy models for the Brazucas backend."""
from brazucas.models.user import User
from brazucas.models.news_post import NewsPost
from brazucas.models.advertisement import Advertisement
from brazucas.models.service_category import ServiceCategory
from brazucas.models.status_history import StatusHistoryEntry

__all__ = [
    "User",
    "NewsPost",
    "Advertisement",
    "ServiceCategory",
    "StatusHistoryEntry",
]
