"""Shared fixtures: deterministic stamps, sample entities, isolated config."""

from datetime import date, datetime
from itertools import count

import pytest

from core.config import AppSettings
from core.domain.models import Client, Pet, antibiotic
from core.services.discounts import PromotionWindow
from core.services.orders import StampProvider

FIXED_NOW = datetime(2024, 6, 15, 10, 30)


@pytest.fixture
def stamps() -> StampProvider:
    """Ids 1000, 1001, ... and a frozen clock."""
    ids = count(1000)
    return StampProvider(next_id=lambda: next(ids), now=lambda: FIXED_NOW)


@pytest.fixture
def client() -> Client:
    return Client(name="Ana", email="ana@x.com", phone="111")


@pytest.fixture
def other_client() -> Client:
    return Client(name="Bruno", email="bruno@x.com", phone="999")


@pytest.fixture
def pet() -> Pet:
    return Pet(name="Firulais", species="Dog", age=4, weight=12.5)


@pytest.fixture
def amoxicillin():
    return antibiotic(price=15000.0)


@pytest.fixture
def december_window() -> PromotionWindow:
    return PromotionWindow(start=date(2024, 12, 1), end=date(2024, 12, 31))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep settings away from any real .env or VETDESK_* variables."""
    for key in ("VETDESK_PROMO_START", "VETDESK_PROMO_END", "VETDESK_DEFAULT_LANGUAGE", "VETDESK_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setitem(AppSettings.model_config, "env_file", (str(tmp_path / ".env"), str(tmp_path / "user.env")))
    monkeypatch.chdir(tmp_path)
    yield
