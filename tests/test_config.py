"""Tests for settings loading."""

import pytest

from rarecandy.config import Settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.api_base_url == "https://api.pokemontcg.io/v2"
        assert settings.page_size == 20
        assert settings.user_agent == "RareCandy/1.0"

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RARECANDY_API_BASE_URL", "https://staging.example.com/v2")
        monkeypatch.setenv("RARECANDY_PAGE_SIZE", "50")

        settings = Settings(_env_file=None)

        assert settings.api_base_url == "https://staging.example.com/v2"
        assert settings.page_size == 50
