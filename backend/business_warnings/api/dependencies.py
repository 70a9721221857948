"""Route Dependencies - access to the NoticeService built in the app lifespan.

Invariants:
    - The service lives on app.state; routes never build their own resolvers
    - Missing service (lifespan not run) -> 503, not an AttributeError
"""

from fastapi import HTTPException, Request, status

from business_warnings.services.notice_service import NoticeService


def get_notice_service(request: Request) -> NoticeService:
    service = getattr(request.app.state, "notice_service", None)
    if service is None:
        raise HTTPException(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Notice service not initialized",
        )
    return service
