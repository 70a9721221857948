"""Warning Routes - classify an entity snapshot and build its primary notice.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler
    - Classification with no matches returns 200 with an empty list, not an error
    - Notice dialog is null when no warning applies

Design Decisions:
    - Request time supplied here as the snapshot's as_of when the client omits it
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query

from business_warnings.api.dependencies import get_notice_service
from business_warnings.core.classify_warnings import primary_of
from business_warnings.schemas.notice import (
    BusinessStatusRequest, ClassificationResponse, DialogOptionsOut, NoticeResponse,
)
from business_warnings.services.notice_service import NoticeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/warnings", tags=["warnings"])


@router.post("/classify", response_model=ClassificationResponse)
async def classify_entity(
    body: BusinessStatusRequest,
    service: NoticeService = Depends(get_notice_service),
):
    """Applicable warnings for an entity, most severe first."""
    entity = body.to_entity_status(now=datetime.now(timezone.utc))
    warnings = service.classify(entity)
    return ClassificationResponse(
        warnings=list(warnings),
        primary=primary_of(warnings),
    )


@router.post("/notice", response_model=NoticeResponse)
async def build_notice(
    body: BusinessStatusRequest,
    locale: str | None = Query(None),
    service: NoticeService = Depends(get_notice_service),
):
    """Warnings plus the localized dialog for the primary one."""
    entity = body.to_entity_status(now=datetime.now(timezone.utc))
    notice = service.build_notice(entity, locale)
    return NoticeResponse(
        warnings=list(notice.warnings),
        primary=notice.primary,
        dialog=(
            DialogOptionsOut.from_options(notice.dialog)
            if notice.dialog is not None else None
        ),
    )
