"""API test fixtures - FastAPI app with a real NoticeService + httpx client.

Invariants:
    - Every test gets the service attached to app.state (lifespan does not run
      under ASGITransport)
    - app.state restored after each test

Design Decisions:
    - Real resolvers over mocks: the catalog is in-process and fast
"""

import pytest
from httpx import ASGITransport, AsyncClient

from business_warnings.config import Settings
from business_warnings.main import app
from business_warnings.services.notice_service import build_notice_service


@pytest.fixture
def notice_service():
    return build_notice_service(Settings())


@pytest.fixture
async def client(notice_service):
    """FastAPI test client with the notice service attached."""
    original = getattr(app.state, "notice_service", None)
    app.state.notice_service = notice_service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.notice_service = original


@pytest.fixture
async def bare_client():
    """Client against an app whose lifespan never built the service."""
    original = getattr(app.state, "notice_service", None)
    app.state.notice_service = None

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.notice_service = original
