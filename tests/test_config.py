"""Tests for settings, the user .env writer and logging setup."""

import logging
from datetime import date

import pytest
from pydantic import ValidationError

from core.config import AppSettings, write_user_env_vars
from core.domain.language import Language
from core.logging_config import get_logger, setup_logging


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings(_env_file=None)
        window = settings.promotion_window()
        assert (window.start, window.end) == (date(2024, 12, 1), date(2024, 12, 31))
        assert settings.default_language is Language.ENGLISH

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("VETDESK_PROMO_START", "2025-07-01")
        monkeypatch.setenv("VETDESK_PROMO_END", "2025-07-31")
        monkeypatch.setenv("VETDESK_DEFAULT_LANGUAGE", "es")
        settings = AppSettings(_env_file=None)
        assert settings.promotion_window().contains(date(2025, 7, 15))
        assert settings.default_language is Language.SPANISH

    def test_inverted_window_is_rejected(self, monkeypatch):
        monkeypatch.setenv("VETDESK_PROMO_START", "2025-08-01")
        monkeypatch.setenv("VETDESK_PROMO_END", "2025-07-01")
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)

    def test_project_env_file(self, tmp_path):
        env = tmp_path / ".env"
        env.write_text("VETDESK_PROMO_START=2025-01-05\nVETDESK_PROMO_END=2025-01-06\n", encoding="utf-8")
        settings = AppSettings(_env_file=str(env))
        assert settings.promo_start == date(2025, 1, 5)

    def test_default_env_files_stay_inside_tmp_path(self, tmp_path):
        assert all(str(path).startswith(str(tmp_path)) for path in AppSettings.model_config["env_file"])
        window = AppSettings().promotion_window()
        assert (window.start, window.end) == (date(2024, 12, 1), date(2024, 12, 31))


class TestWriteUserEnv:
    def test_merges_and_sorts(self, tmp_path):
        env = tmp_path / "cfg" / ".env"
        write_user_env_vars({"VETDESK_PROMO_END": "2025-01-31"}, env_path=env)
        write_user_env_vars({"VETDESK_PROMO_START": "2025-01-01"}, env_path=env)
        lines = env.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert lines[1:] == ["VETDESK_PROMO_END=2025-01-31", "VETDESK_PROMO_START=2025-01-01"]


class TestLogging:
    def test_setup_is_idempotent(self):
        root = setup_logging("DEBUG")
        setup_logging("INFO")
        assert root.level == logging.INFO
        assert len([h for h in root.handlers if h.get_name() == "vetdesk-rich"]) == 1

    def test_module_loggers_hang_off_root(self):
        assert get_logger("core.services.orders").name == "vetdesk.core.services.orders"
        assert get_logger("vetdesk.x").name == "vetdesk.x"

    def test_unknown_level_falls_back_to_warning(self):
        assert setup_logging("LOUD").level == logging.WARNING
