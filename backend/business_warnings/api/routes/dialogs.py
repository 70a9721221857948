"""Dialog Routes - resolve a warning or failure code into localized DialogOptions.

Invariants:
    - Codes outside the closed set -> 404 UNKNOWN_DIALOG_CODE
    - Unsupported locale -> 400 UNSUPPORTED_LOCALE
    - Response matches DialogOptions.to_dict(): action omitted when absent
"""

import logging

from fastapi import APIRouter, Depends, Query

from business_warnings.api.dependencies import get_notice_service
from business_warnings.core.domain_types import parse_dialog_code
from business_warnings.core.errors import UnknownDialogCodeError
from business_warnings.schemas.notice import DialogOptionsOut
from business_warnings.services.notice_service import NoticeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/dialogs", tags=["dialogs"])


@router.get("")
async def list_dialog_codes(service: NoticeService = Depends(get_notice_service)):
    """The closed set of resolvable codes."""
    return {"codes": [c.value for c in service.codes]}


@router.get("/{code}", response_model=DialogOptionsOut)
async def get_dialog(
    code: str,
    locale: str | None = Query(None),
    service: NoticeService = Depends(get_notice_service),
):
    """Localized dialog description for one code."""
    dialog_code = parse_dialog_code(code)
    if dialog_code is None:
        raise UnknownDialogCodeError(code)
    options = service.resolve(dialog_code, locale)
    logger.debug(
        "Resolved dialog",
        extra={"dialog_code": dialog_code.value, "locale": locale},
    )
    return DialogOptionsOut.from_options(options)
