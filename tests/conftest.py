"""Shared fixtures for unit and integration tests."""

from __future__ import annotations

import pytest

from mapsquery.settings import Settings

# Secret and signature from the published URL signing walkthrough.
CLIENT_SECRET = "vNIXE0xscrmjlyV-12Nj_BvUPaw="


@pytest.fixture()
def client_secret() -> str:
    return CLIENT_SECRET


@pytest.fixture()
def geocode_url() -> str:
    return "https://maps.googleapis.com/maps/api/geocode/json"


@pytest.fixture()
def api_key_settings() -> Settings:
    return Settings(api_key="test-api-key", client_id="", client_secret="")


@pytest.fixture()
def premium_settings(client_secret: str) -> Settings:
    return Settings(api_key="", client_id="clientID", client_secret=client_secret)
