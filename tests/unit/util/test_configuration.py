"""Unit tests for settings, observability setup and provider selection."""

import pytest

from tally.config import ObservabilitySettings, Settings
from tally.util.di import PROVIDERS, get_provider
from tally.util.di.base import ProviderBase
from tally.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from tally.util.error import ConfigurationError, DependencyInjectionError
from tally.util.observability import configure_logfire
from tests.di import MockPersistenceProvider


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.voting.max_votes_per_user == 3
        assert settings.voting.username_prefix == "user_"
        assert settings.database_url == settings.database.url

    def test_nested_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("VOTING__MAX_VOTES_PER_USER", "5")
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/votes")

        settings = Settings(_env_file=None)

        assert settings.voting.max_votes_per_user == 5
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/votes"


class TestConfigureLogfire:
    def test_forced_sending_without_token_is_rejected(self):
        settings = Settings(
            _env_file=None,
            observability=ObservabilitySettings(send_to_logfire=True),
        )

        with pytest.raises(ConfigurationError, match="LOGFIRE_TOKEN"):
            configure_logfire(settings)


class TestGetProvider:
    def test_persistence_is_the_only_mockable_component(self):
        mockable = [p for p in PROVIDERS if p.__subclasses__()]

        assert mockable == [PersistenceProvider]

    def test_selects_by_mock_flag(self):
        prod = get_provider(PersistenceProvider, use_mock=False)
        mock = get_provider(PersistenceProvider, use_mock=True)

        assert prod is ProdPersistenceProvider
        assert mock is MockPersistenceProvider

    def test_missing_implementation_raises(self):
        class LonelyProvider(ProviderBase):
            __mock_component__ = "persistence"

        class ProdLonelyProvider(LonelyProvider):
            __is_mock__ = False

        assert get_provider(LonelyProvider) is ProdLonelyProvider

        with pytest.raises(DependencyInjectionError, match="No mock implementation"):
            get_provider(LonelyProvider, use_mock=True)
