"""
Content status: derivation from published/approved plus the display catalog.

The four statuses are never persisted. derive_status is the only place that
turns the stored fields into a status; lists, stats and the frontend filters
all go through it.
"""
from enum import Enum
from typing import Dict, List, Optional


class ContentStatus(str, Enum):
    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    PUBLISHED = "published"
    REJECTED = "rejected"


class ContentKind(str, Enum):
    NEWS = "news"
    ADS = "ads"


class StatusContext(str, Enum):
    """Where a status list is shown: own content, admin review queue, public pages."""

    MANAGEMENT = "management"
    APPROVAL = "approval"
    PUBLIC = "public"


def derive_status(published: bool, approved: Optional[bool]) -> ContentStatus:
    """
    Map (published, approved) to a status. First match wins:
    approved False -> rejected; approved None -> draft/pending by published;
    approved True -> published if published else draft.
    """
    if approved is False:
        return ContentStatus.REJECTED
    if approved is None:
        return ContentStatus.PENDING_APPROVAL if published else ContentStatus.DRAFT
    if published:
        return ContentStatus.PUBLISHED
    return ContentStatus.DRAFT


def status_of(item) -> ContentStatus:
    """derive_status for anything with published/approved attributes."""
    return derive_status(bool(item.published), item.approved)


STATUS_LABELS: Dict[ContentStatus, str] = {
    ContentStatus.DRAFT: "Rascunho",
    ContentStatus.PENDING_APPROVAL: "Pendente",
    ContentStatus.PUBLISHED: "Publicado",
    ContentStatus.REJECTED: "Rejeitado",
}

STATUS_DESCRIPTIONS: Dict[ContentStatus, str] = {
    ContentStatus.DRAFT: "Visível apenas para o autor",
    ContentStatus.PENDING_APPROVAL: "Aguardando aprovação de um administrador",
    ContentStatus.PUBLISHED: "Aprovado e visível para todos",
    ContentStatus.REJECTED: "Rejeitado por um administrador",
}

STATUS_COLORS: Dict[ContentStatus, Dict[str, str]] = {
    ContentStatus.PUBLISHED: {
        "background": "rgba(34, 197, 94, 0.15)",
        "border": "#22c55e",
        "text": "#166534",
        "headerBg": "rgba(34, 197, 94, 0.1)",
    },
    ContentStatus.DRAFT: {
        "background": "rgba(107, 114, 128, 0.15)",
        "border": "#6b7280",
        "text": "#374151",
        "headerBg": "rgba(107, 114, 128, 0.1)",
    },
    ContentStatus.PENDING_APPROVAL: {
        "background": "rgba(245, 158, 11, 0.15)",
        "border": "#f59e0b",
        "text": "#92400e",
        "headerBg": "rgba(245, 158, 11, 0.1)",
    },
    ContentStatus.REJECTED: {
        "background": "rgba(239, 68, 68, 0.15)",
        "border": "#ef4444",
        "text": "#991b1b",
        "headerBg": "rgba(239, 68, 68, 0.1)",
    },
}

SORT_ORDER: List[ContentStatus] = [
    ContentStatus.DRAFT,
    ContentStatus.PENDING_APPROVAL,
    ContentStatus.PUBLISHED,
    ContentStatus.REJECTED,
]

# Same mapping for news and ads; kept per context only.
CONTEXT_STATUSES: Dict[StatusContext, List[ContentStatus]] = {
    StatusContext.MANAGEMENT: list(SORT_ORDER),
    StatusContext.APPROVAL: [
        ContentStatus.PENDING_APPROVAL,
        ContentStatus.PUBLISHED,
        ContentStatus.REJECTED,
    ],
    StatusContext.PUBLIC: [ContentStatus.PUBLISHED],
}

CONTEXT_DEFAULTS: Dict[StatusContext, ContentStatus] = {
    StatusContext.MANAGEMENT: ContentStatus.DRAFT,
    StatusContext.APPROVAL: ContentStatus.PENDING_APPROVAL,
    StatusContext.PUBLIC: ContentStatus.PUBLISHED,
}

CONTEXT_LABELS: Dict[StatusContext, str] = {
    StatusContext.MANAGEMENT: "Gerenciar",
    StatusContext.APPROVAL: "Aprovar",
    StatusContext.PUBLIC: "Público",
}

KIND_LABELS: Dict[ContentKind, str] = {
    ContentKind.NEWS: "Notícias",
    ContentKind.ADS: "Anúncios",
}


def describe_status(status: ContentStatus, is_default: bool = False) -> Dict:
    """Catalog entry for one status (label, colors, order)."""
    return {
        "code": status.value,
        "display_name": STATUS_LABELS[status],
        "description": STATUS_DESCRIPTIONS[status],
        "colors": dict(STATUS_COLORS[status]),
        "is_default": is_default,
        "sort_order": SORT_ORDER.index(status),
    }


def contextual_statuses(kind: ContentKind, context: StatusContext) -> Dict:
    """Statuses offered to the UI for a content kind in a context, with the default one."""
    default = CONTEXT_DEFAULTS[context]
    return {
        "content_type": kind.value,
        "context": context.value,
        "available_statuses": [describe_status(s, is_default=s == default) for s in CONTEXT_STATUSES[context]],
        "default_status": default.value,
    }


def status_catalog() -> Dict:
    """Everything the frontend needs to render status filters and badges."""
    return {
        "content_types": [{"name": k.value, "display_name": KIND_LABELS[k]} for k in ContentKind],
        "contexts": [{"name": c.value, "display_name": CONTEXT_LABELS[c]} for c in StatusContext],
        "statuses": [describe_status(s) for s in SORT_ORDER],
    }


def can_edit(status: ContentStatus) -> bool:
    """UI hint: drafts and rejected items are the ones authors usually rework."""
    return status in (ContentStatus.DRAFT, ContentStatus.REJECTED)


def can_submit(status: ContentStatus) -> bool:
    return status in (ContentStatus.DRAFT, ContentStatus.REJECTED)
