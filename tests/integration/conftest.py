"""Fixtures for HTTP-level tests."""

import pytest
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from authcore.api.dependencies import (
    OptionalPrincipal,
    get_uow,
    require_all_roles,
    require_any_role,
    require_permissions,
)
from authcore.api.main import create_app


@pytest.fixture
def app(settings, issuer_config, session_store, uow) -> FastAPI:
    """Application wired to the in-memory stores, with a few gated routes."""
    # Sign and verify with the same issuer as the ``token_issuer`` fixture.
    app_settings = settings.model_copy(update={"jwt_issuer": issuer_config.issuer})
    application = create_app(app_settings, session_store=session_store, configure_logging=False)
    application.dependency_overrides[get_uow] = lambda: uow

    @application.get("/gated/write", dependencies=[Depends(require_permissions("workflow:write"))])
    async def gated_write() -> dict[str, str]:
        return {"ok": "write"}

    @application.get("/gated/admin", dependencies=[Depends(require_any_role("admin"))])
    async def gated_admin() -> dict[str, str]:
        return {"ok": "admin"}

    @application.get("/gated/both", dependencies=[Depends(require_all_roles("admin", "viewer"))])
    async def gated_both() -> dict[str, str]:
        return {"ok": "both"}

    @application.get("/whoami")
    async def whoami(principal: OptionalPrincipal) -> dict:
        return {"user_id": str(principal.user_id) if principal else None}

    return application


@pytest.fixture
async def async_client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def auth_headers():
    """Build a bearer Authorization header."""

    def _auth_headers(access_token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {access_token}"}

    return _auth_headers
