"""Status catalog schemas (GET /api/status-system...)."""
from typing import List

from brazucas.schemas.common import CamelModel


class StatusColors(CamelModel):
    background: str
    border: str
    text: str
    header_bg: str


class AvailableStatusOut(CamelModel):
    code: str
    display_name: str
    description: str
    colors: StatusColors
    is_default: bool = False
    sort_order: int


class NamedEntry(CamelModel):
    name: str
    display_name: str


class StatusSystemOut(CamelModel):
    content_types: List[NamedEntry]
    contexts: List[NamedEntry]
    statuses: List[AvailableStatusOut]


class ContextualStatusOut(CamelModel):
    content_type: str
    context: str
    available_statuses: List[AvailableStatusOut]
    default_status: str
