"""Admin dashboard statistics schemas."""
from pydantic import Field

from brazucas.schemas.common import CamelModel


class ContentStats(CamelModel):
    """Counts per derived status for one content kind."""

    published: int = 0
    draft: int = 0
    pending_approval: int = 0
    rejected: int = 0
    total: int = 0


class AdminStatsOut(CamelModel):
    users: int
    news: ContentStats
    ads: ContentStats
    timestamp: int = Field(..., description="Server time in ms, so clients never treat it as cached")
