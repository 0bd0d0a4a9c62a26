"""Integration tests for health routes."""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from authcore.application.exceptions import StoreError


class TestHealth:
    """Test liveness and readiness probes."""

    @pytest.mark.asyncio
    async def test_liveness(self, async_client: AsyncClient, settings):
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": settings.version}

    @pytest.mark.asyncio
    async def test_ready(self, async_client: AsyncClient):
        response = await async_client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"]["session_store"] == "ok"

    @pytest.mark.asyncio
    async def test_ready_degraded(self, async_client: AsyncClient, session_store):
        session_store.ping = AsyncMock(side_effect=StoreError(store="redis"))

        response = await async_client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "degraded"
